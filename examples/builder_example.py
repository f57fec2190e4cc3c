"""Query builder whose forks share their clause lists until one is extended."""

from __future__ import annotations

from dataclasses import dataclass, field

from cowshare import SharedValue, configure_logging


@dataclass
class Clauses:
    table: str
    filters: list[str] = field(default_factory=list)
    order_by: list[str] = field(default_factory=list)


class QueryBuilder:
    def __init__(self, clauses: SharedValue[Clauses]) -> None:
        self._clauses = clauses

    @classmethod
    def from_table(cls, table: str) -> QueryBuilder:
        return cls(SharedValue(Clauses(table=table)))

    def where(self, condition: str) -> QueryBuilder:
        clauses = self._clauses.clone()
        clauses.update(lambda c: c.filters.append(condition))
        return QueryBuilder(clauses)

    def order(self, column: str) -> QueryBuilder:
        clauses = self._clauses.clone()
        clauses.update(lambda c: c.order_by.append(column))
        return QueryBuilder(clauses)

    def fork(self) -> QueryBuilder:
        return QueryBuilder(self._clauses.clone())

    def shares_clauses_with(self, other: QueryBuilder) -> bool:
        return self._clauses.shares_with(other._clauses)

    def build(self) -> str:
        c = self._clauses.get()
        sql = f"SELECT * FROM {c.table}"
        if c.filters:
            sql += " WHERE " + " AND ".join(c.filters)
        if c.order_by:
            sql += " ORDER BY " + ", ".join(c.order_by)
        return sql


def main() -> None:
    configure_logging("DEBUG")

    active = QueryBuilder.from_table("users").where("active = 1")
    by_name = active.order("name")
    admins = active.where("role = 'admin'")
    same_as_active = active.fork()

    print(active.build())
    print(by_name.build())
    print(admins.build())
    print(f"fork shares clauses: {same_as_active.shares_clauses_with(active)}")


if __name__ == "__main__":
    main()
