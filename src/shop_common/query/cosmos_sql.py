"""Compile :class:`~shop_common.query.builder.Query` pipelines to Cosmos DB SQL."""

import re
from typing import Any

from shop_common.query.builder import Query

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _property(field_name: str) -> str:
    # Property paths cannot be bound as parameters, so only plain identifiers are accepted.
    if not _IDENTIFIER.match(field_name):
        raise ValueError(f"Invalid field name for Cosmos DB query: {field_name!r}")
    return f"c.{field_name}"


def compile_cosmos_sql(query: Query) -> tuple[str, list[dict[str, Any]]]:
    """Build a parameterised Cosmos DB SQL statement for the fetch stages of a query.

    The group stage is not part of the statement. Cross-partition aggregates
    are limited in the Cosmos DB SDK, so callers fetch the filtered documents
    and group them client-side.

    Args:
        query: Query to compile

    Returns:
        Tuple of (SQL text, parameters in the SDK's ``[{"name", "value"}]`` format)

    Raises:
        ValueError: If a field name is not a plain identifier, or an offset is
            requested without a limit (Cosmos DB requires both together)
    """
    parameters: list[dict[str, Any]] = []
    sql = "SELECT * FROM c"

    conditions = []
    for index, condition in enumerate(query.filters):
        name = f"@filter{index}"
        parameters.append({"name": name, "value": condition.value})
        ignore_case = "true" if condition.ignore_case else "false"
        conditions.append(f"CONTAINS({_property(condition.field)}, {name}, {ignore_case})")
    if conditions:
        sql += " WHERE " + " AND ".join(conditions)

    if query.sort:
        sql += " ORDER BY " + ", ".join(f"{_property(key.field)} {key.order.value}" for key in query.sort)

    if query.limit is not None:
        sql += " OFFSET @offset LIMIT @limit"
        parameters.append({"name": "@offset", "value": query.skip})
        parameters.append({"name": "@limit", "value": query.limit})
    elif query.skip:
        raise ValueError("Cosmos DB requires a limit when an offset is set")

    return sql, parameters
