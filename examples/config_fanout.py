"""One settings template handed to many workers, a few of which override it."""

from pydantic import BaseModel

from cowshare import SharedValue


class WorkerConfig(BaseModel):
    endpoint: str
    timeout: float = 30.0
    tags: list[str] = []


def main() -> None:
    template = SharedValue(WorkerConfig(endpoint="https://api.example.test", tags=["prod"]))
    workers = {f"worker-{i}": template.clone() for i in range(8)}

    workers["worker-3"].update(lambda cfg: cfg.tags.append("canary"))
    workers["worker-5"].transform(lambda cfg: cfg.model_copy(update={"timeout": 5.0}))

    for name, cfg in workers.items():
        shared = "shared" if cfg.shares_with(template) else "own copy"
        print(f"{name}: {cfg.get().model_dump()} ({shared})")
    print(f"template holders: {template.ref_count}")


if __name__ == "__main__":
    main()
