"""RowTaxonomy - taxonomy fields over SQL join tables."""

from __future__ import annotations

from row_taxonomy.core.connection import ConnectionConfig, ConnectionManager
from row_taxonomy.core.engine import Engine
from row_taxonomy.core.enums import DatabaseBackend
from row_taxonomy.core.exceptions import (
    AdapterError,
    ConnectionError,  # noqa: A004
    DuplicateFieldTypeError,
    ExecutionError,
    FieldConfigError,
    FieldTypeError,
    InvalidFilterExpressionError,
    MultipleRowsError,
    PoolError,
    QueryBuildError,
    RowTaxonomyError,
    StatementExecutionError,
    TransactionError,
    TransactionStateError,
    UnknownFieldTypeError,
    UnsupportedPlatformError,
)
from row_taxonomy.core.transaction import TransactionManager
from row_taxonomy.fields import FieldType, FieldTypeRegistry, TaxonomyType, default_registry
from row_taxonomy.mapping import Content, TaxonomyFieldConfig, TaxonomyGroup, TaxonomyValue
from row_taxonomy.query import ContentQuery, QuerySet, SelectQueryBuilder
from row_taxonomy.repository import ContentRepository

__all__ = [
    # Connection
    "ConnectionConfig",
    "ConnectionManager",
    # Engine
    "Engine",
    # Transaction
    "TransactionManager",
    # Query
    "SelectQueryBuilder",
    "ContentQuery",
    "QuerySet",
    # Mapping
    "Content",
    "TaxonomyFieldConfig",
    "TaxonomyValue",
    "TaxonomyGroup",
    # Fields
    "FieldType",
    "FieldTypeRegistry",
    "TaxonomyType",
    "default_registry",
    # Repository
    "ContentRepository",
    # Enums
    "DatabaseBackend",
    # Exceptions
    "RowTaxonomyError",
    "QueryBuildError",
    "UnsupportedPlatformError",
    "InvalidFilterExpressionError",
    "ExecutionError",
    "MultipleRowsError",
    "StatementExecutionError",
    "FieldTypeError",
    "UnknownFieldTypeError",
    "DuplicateFieldTypeError",
    "FieldConfigError",
    "TransactionError",
    "TransactionStateError",
    "AdapterError",
    "ConnectionError",
    "PoolError",
]
