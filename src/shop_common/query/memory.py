"""In-memory evaluation of :class:`~shop_common.query.builder.Query` pipelines."""

from collections.abc import Iterable
from numbers import Number
from typing import Any

from shop_common.query.builder import Accumulator, Contains, GroupField, Query, SortOrder


def _matches(document: dict[str, Any], condition: Contains) -> bool:
    value = document.get(condition.field)
    if not isinstance(value, str):
        return False
    if condition.ignore_case:
        return condition.value.lower() in value.lower()
    return condition.value in value


def _sort_key(field_name: str):
    # Documents missing the field sort first.
    def key(document: dict[str, Any]) -> tuple[bool, Any]:
        value = document.get(field_name)
        return (value is not None, value)

    return key


def _numbers(documents: list[dict[str, Any]], field_name: str) -> list[Any]:
    values = [document.get(field_name) for document in documents]
    return [value for value in values if isinstance(value, Number) and not isinstance(value, bool)]


def _accumulate(documents: list[dict[str, Any]], group_field: GroupField) -> Any:
    field_name = group_field.field
    match group_field.accumulator:
        case Accumulator.AVG:
            numbers = _numbers(documents, field_name)
            return sum(numbers) / len(numbers) if numbers else None
        case Accumulator.SUM:
            return sum(_numbers(documents, field_name))
        case Accumulator.MIN:
            numbers = _numbers(documents, field_name)
            return min(numbers) if numbers else None
        case Accumulator.MAX:
            numbers = _numbers(documents, field_name)
            return max(numbers) if numbers else None
        case Accumulator.ADD_TO_SET:
            return list(dict.fromkeys(document.get(field_name) for document in documents))
        case Accumulator.FIRST:
            return documents[0].get(field_name)
        case Accumulator.LAST:
            return documents[-1].get(field_name)
    raise ValueError(f"Unsupported accumulator: {group_field.accumulator}")


def group_documents(documents: Iterable[dict[str, Any]], group: tuple[GroupField, ...]) -> list[dict[str, Any]]:
    """Apply a group stage to already-filtered documents.

    Args:
        documents: Documents in the order the backing store produced them
        group: Output fields to compute

    Returns:
        A single-element list with the summary document, or an empty list when
        there were no documents to group
    """
    rows = list(documents)
    if not rows:
        return []
    return [{group_field.output: _accumulate(rows, group_field) for group_field in group}]


def run_query(documents: Iterable[dict[str, Any]], query: Query) -> list[dict[str, Any]]:
    """Run every stage of ``query`` against ``documents`` in memory."""
    rows = [document for document in documents if all(_matches(document, f) for f in query.filters)]

    # Stable sorts applied from the least to the most significant key.
    for sort_key in reversed(query.sort):
        rows.sort(key=_sort_key(sort_key.field), reverse=sort_key.order == SortOrder.DESC)

    end = None if query.limit is None else query.skip + query.limit
    rows = rows[query.skip : end]

    if query.is_grouped:
        return group_documents(rows, query.group)
    return rows
