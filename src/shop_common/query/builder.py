"""Backend-neutral query pipeline: filter, sort, skip, limit and group stages."""

from dataclasses import dataclass, replace
from enum import StrEnum


class SortOrder(StrEnum):
    """Sort direction for an ``order_by`` stage."""

    ASC = "ASC"
    DESC = "DESC"


class Accumulator(StrEnum):
    """Group accumulators applied across every document in a single group."""

    AVG = "avg"
    SUM = "sum"
    MIN = "min"
    MAX = "max"
    ADD_TO_SET = "add_to_set"
    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class Contains:
    """Substring match on a string field."""

    field: str
    value: str
    ignore_case: bool = True


@dataclass(frozen=True)
class SortKey:
    field: str
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True)
class GroupField:
    """One output field of a group stage: ``output = accumulator(field)``."""

    output: str
    accumulator: Accumulator
    field: str


@dataclass(frozen=True)
class Query:
    """Immutable query description.

    Stages are always applied in the same order: filters, sort, skip, limit,
    then the optional group stage. Each builder method returns a new query so a
    base query can be shared and extended safely.

    Example:
        Query().where_contains("name", "lamp").order_by("price").offset(10).take(10)
    """

    filters: tuple[Contains, ...] = ()
    sort: tuple[SortKey, ...] = ()
    skip: int = 0
    limit: int | None = None
    group: tuple[GroupField, ...] = ()

    def where_contains(self, field_name: str, value: str, ignore_case: bool = True) -> "Query":
        return replace(self, filters=(*self.filters, Contains(field_name, value, ignore_case)))

    def order_by(self, field_name: str, order: SortOrder = SortOrder.ASC) -> "Query":
        return replace(self, sort=(*self.sort, SortKey(field_name, order)))

    def offset(self, count: int) -> "Query":
        if count < 0:
            raise ValueError("offset must be non-negative")
        return replace(self, skip=count)

    def take(self, count: int) -> "Query":
        if count < 0:
            raise ValueError("limit must be non-negative")
        return replace(self, limit=count)

    def group_by(self, *fields: GroupField) -> "Query":
        """Collapse every matching document into a single summary document."""
        return replace(self, group=(*self.group, *fields))

    def without_group(self) -> "Query":
        return replace(self, group=())

    @property
    def is_grouped(self) -> bool:
        return bool(self.group)
