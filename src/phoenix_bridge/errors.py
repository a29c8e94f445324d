"""
Error taxonomy for the Hive/Phoenix bridge.

- SchemaError: the Hive table definition cannot be turned into a Phoenix table
  (row-key spec missing or unsatisfiable, malformed directives, binary columns
  without a length, unsupported table kind).
- CatalogError: anything that failed while talking to Phoenix. Always raised
  `from` the underlying error; `cause_message` keeps the original text.

Neither is retried by this package.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base class for all errors raised by the bridge."""


class SchemaError(BridgeError):
    """Table definition cannot be translated into Phoenix DDL."""


class CatalogError(BridgeError):
    """A Phoenix catalog operation failed."""

    def __init__(self, message: str, cause_message: str = "") -> None:
        super().__init__(message)
        self.cause_message = cause_message

    @classmethod
    def from_exception(cls, operation: str, error: BaseException) -> CatalogError:
        """Wrap `error`, keeping its first line as the cause message."""
        text = str(error).strip()
        first_line = text.splitlines()[0] if text else type(error).__name__
        return cls(f"{operation} failed: {first_line}", cause_message=text)


class TableExistenceError(CatalogError):
    """Phoenix table presence does not match what the table kind requires."""
