"""Journey tests for builder-style and fan-out usage of SharedValue."""

import gc
from dataclasses import dataclass, field

from cowshare import SharedValue


@dataclass
class RequestBuilder:
    """Immutable-style builder: each with_* call returns a new builder."""

    request: SharedValue = field(default_factory=lambda: SharedValue({"headers": {}}))

    def with_header(self, name: str, value: str) -> "RequestBuilder":
        next_request = self.request.clone()
        next_request.update(lambda req: req["headers"].__setitem__(name, value))
        return RequestBuilder(next_request)

    def fork(self) -> "RequestBuilder":
        return RequestBuilder(self.request.clone())


def test_forked_builders_share_until_customized() -> None:
    """Forking a builder is free; customizing one fork leaves the others alone."""
    base = RequestBuilder().with_header("accept", "json")
    forks = [base.fork() for _ in range(10)]

    assert all(f.request.shares_with(base.request) for f in forks)
    assert base.request.ref_count == 11

    authed = forks[0].with_header("authorization", "token")

    assert authed.request.get()["headers"] == {"accept": "json", "authorization": "token"}
    assert base.request.get()["headers"] == {"accept": "json"}
    assert all(f.request.get()["headers"] == {"accept": "json"} for f in forks)


def test_config_fan_out_with_dataclass_values(base_request) -> None:
    """Fan-out of one template to many workers, a few of which override fields."""
    template = SharedValue(base_request)
    workers = {name: template.clone() for name in ("a", "b", "c", "d")}

    workers["b"].update(lambda req: setattr(req, "retries", 3))
    workers["c"].update(lambda req: req.headers.update({"x-trace": "on"}))

    assert workers["a"].shares_with(template)
    assert workers["d"].shares_with(template)
    assert workers["b"].get().retries == 3
    assert workers["c"].get().headers == {"accept": "json", "x-trace": "on"}
    assert template.get() == base_request
    assert base_request.retries == 0
    assert base_request.headers == {"accept": "json"}


def test_template_released_when_all_workers_diverge(request_cls) -> None:
    template = SharedValue(request_cls(url="https://example.test"))
    first = template.clone()
    second = template.clone()
    original_id = template.allocation_id
    original = template._allocation

    first.set(request_cls(url="https://one.test"))
    second.transform(lambda req: request_cls(url=req.url.replace("example", "two")))
    del template
    gc.collect()

    assert not original.is_alive()
    assert original.ref_count == 0
    assert first.allocation_id != original_id
    assert second.get().url == "https://two.test"
    assert first.ref_count == 1
    assert second.ref_count == 1
