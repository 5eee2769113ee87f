"""Query builder package."""

from shop_common.query.builder import Accumulator, Contains, GroupField, Query, SortKey, SortOrder
from shop_common.query.cosmos_sql import compile_cosmos_sql
from shop_common.query.memory import group_documents, run_query

__all__ = [
    "Accumulator",
    "Contains",
    "GroupField",
    "Query",
    "SortKey",
    "SortOrder",
    "compile_cosmos_sql",
    "group_documents",
    "run_query",
]
