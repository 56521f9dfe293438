"""RowTaxonomy exception hierarchy.

Query-building and configuration failures raise RowTaxonomy-specific
exceptions. Driver errors raised while a transaction is executing pending
writes are surfaced unmodified so the enclosing transaction can roll back.
"""

from __future__ import annotations


class RowTaxonomyError(Exception):
    """Base exception for all RowTaxonomy errors."""


# --- Query building ---


class QueryBuildError(RowTaxonomyError):
    """Base for errors raised while building or rewriting a query."""


class UnsupportedPlatformError(QueryBuildError):
    """Raised when no aggregate SQL exists for the active database platform."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(
            f"Unsupported database platform for taxonomy aggregation: '{platform}'"
        )


class InvalidFilterExpressionError(QueryBuildError):
    """Raised when a taxonomy filter uses a combinator other than AND / OR."""

    def __init__(self, filter_key: str, expression_type: str) -> None:
        self.filter_key = filter_key
        self.expression_type = expression_type
        super().__init__(
            f"Cannot rewrite filter '{filter_key}': unsupported expression "
            f"type '{expression_type}' (expected AND or OR)"
        )


# --- Execution ---


class ExecutionError(RowTaxonomyError):
    """Base for query execution errors."""


class MultipleRowsError(ExecutionError):
    """Raised when fetch_one encounters more than one row."""

    def __init__(self, label: str, row_count: int) -> None:
        self.label = label
        self.row_count = row_count
        super().__init__(f"fetch_one for '{label}' returned {row_count} rows (expected 0 or 1)")


class StatementExecutionError(ExecutionError):
    """Raised when the engine fails to execute a statement outside a transaction."""

    def __init__(self, label: str, detail: str) -> None:
        self.label = label
        super().__init__(f"Statement '{label}' failed: {detail}")


# --- Fields ---


class FieldTypeError(RowTaxonomyError):
    """Base for field type registry errors."""


class UnknownFieldTypeError(FieldTypeError):
    """Raised when no field type is registered under a declared type name."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"No field type registered for '{type_name}'")


class DuplicateFieldTypeError(FieldTypeError):
    """Raised when a field type name is registered twice."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Field type '{type_name}' is already registered")


class FieldConfigError(FieldTypeError):
    """Raised when a field definition cannot be turned into a configuration."""

    def __init__(self, fieldname: str, detail: str) -> None:
        self.fieldname = fieldname
        super().__init__(f"Invalid configuration for field '{fieldname}': {detail}")


# --- Transaction ---


class TransactionError(RowTaxonomyError):
    """Base for transaction errors."""


class TransactionStateError(TransactionError):
    """Raised on invalid transaction state transitions."""

    def __init__(self, current_state: str, attempted_action: str) -> None:
        self.current_state = current_state
        self.attempted_action = attempted_action
        super().__init__(f"Cannot {attempted_action} transaction in state '{current_state}'")


# --- Adapter ---


class AdapterError(RowTaxonomyError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""


class PoolError(AdapterError):
    """Raised on connection pool failures."""
