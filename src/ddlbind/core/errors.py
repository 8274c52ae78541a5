"""ddlbind error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Schema (DDL parsing and type resolution)
- 9xxx: Internal

Every schema problem is fatal: generation aborts before the output
directory is touched.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    CONFIG_FILE_NOT_FOUND = 2004

    # Schema (3xxx)
    MISSING_IDENTIFIER = 3001
    MALFORMED_COLUMN = 3002
    INVALID_OVERRIDE = 3003
    UNSUPPORTED_CUSTOM_TYPE = 3004
    UNRESOLVED_FIELD_TYPE = 3005
    AMBIGUOUS_GENERATED_NAME = 3006
    UNBALANCED_PARENTHESES = 3007
    DUPLICATE_DEFINITION = 3008
    INVALID_IDENTIFIER = 3009
    UNRECOGNIZED_STATEMENT = 3010
    UNTERMINATED_LITERAL = 3011
    INPUT_NOT_FOUND = 3012
    MALFORMED_ENUM_VALUE = 3013

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class DdlBindError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'UNRESOLVED_FIELD_TYPE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(DdlBindError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


def _excerpt(statement: str, limit: int = 60) -> str:
    return statement if len(statement) <= limit else statement[: limit - 3] + "..."


class SchemaError(DdlBindError):
    """DDL parsing and type resolution errors.

    ``details["source"]`` is filled in by the pipeline once the failing
    file is known (see ``with_source``).
    """

    def with_source(self, source: str) -> "SchemaError":
        """Return a copy of this error tagged with the input file it came from."""
        return type(self)(
            code=self.code,
            message=f"{source}: {self.message}",
            retryable=self.retryable,
            details={**self.details, "source": source},
        )

    @classmethod
    def missing_identifier(cls, kind: str, statement: str) -> "SchemaError":
        return cls(
            code=ErrorCode.MISSING_IDENTIFIER,
            message=f"Missing {kind} name: {_excerpt(statement)}",
            details={"kind": kind, "statement": statement},
        )

    @classmethod
    def malformed_column(cls, table: str, clause: str) -> "SchemaError":
        return cls(
            code=ErrorCode.MALFORMED_COLUMN,
            message=f"Missing column name or type in table '{table}': {clause}",
            details={"table": table, "clause": clause},
        )

    @classmethod
    def invalid_override(
        cls, table: str, column: str, override: str, reason: str
    ) -> "SchemaError":
        return cls(
            code=ErrorCode.INVALID_OVERRIDE,
            message=f"Invalid type override '{override}' on {table}.{column}: {reason}",
            details={"table": table, "column": column, "override": override, "reason": reason},
        )

    @classmethod
    def malformed_enum_value(cls, enum_name: str, piece: str) -> "SchemaError":
        return cls(
            code=ErrorCode.MALFORMED_ENUM_VALUE,
            message=f"Enum '{enum_name}' has a value that is not a quoted literal: {piece}",
            details={"type": enum_name, "value": piece},
        )

    @classmethod
    def unsupported_custom_type(cls, name: str, statement: str) -> "SchemaError":
        return cls(
            code=ErrorCode.UNSUPPORTED_CUSTOM_TYPE,
            message=f"Only enum custom types are supported, found '{name}': "
            f"{_excerpt(statement)}",
            details={"type": name, "statement": statement},
        )

    @classmethod
    def unresolved_field_type(cls, table: str, column: str, type_name: str) -> "SchemaError":
        return cls(
            code=ErrorCode.UNRESOLVED_FIELD_TYPE,
            message=f"Type '{type_name}' of {table}.{column} is neither a primitive nor a "
            "declared enum",
            details={"table": table, "column": column, "type": type_name},
        )

    @classmethod
    def ambiguous_generated_name(cls, generated: str, sources: list[str]) -> "SchemaError":
        return cls(
            code=ErrorCode.AMBIGUOUS_GENERATED_NAME,
            message=f"Names {', '.join(repr(s) for s in sources)} all generate '{generated}'",
            details={"generated": generated, "sources": sources},
        )

    @classmethod
    def unbalanced_parentheses(cls, statement: str) -> "SchemaError":
        return cls(
            code=ErrorCode.UNBALANCED_PARENTHESES,
            message=f"No balanced parenthesis group found: {_excerpt(statement)}",
            details={"statement": statement},
        )

    @classmethod
    def duplicate_definition(cls, kind: str, name: str, scope: str | None = None) -> "SchemaError":
        where = f" in {scope}" if scope else ""
        return cls(
            code=ErrorCode.DUPLICATE_DEFINITION,
            message=f"Duplicate {kind} '{name}'{where}",
            details={"kind": kind, "name": name, "scope": scope},
        )

    @classmethod
    def invalid_identifier(cls, kind: str, name: str, origin: str) -> "SchemaError":
        return cls(
            code=ErrorCode.INVALID_IDENTIFIER,
            message=f"Generated {kind} '{name}' (from {origin!r}) is not a valid Python "
            "identifier",
            details={"kind": kind, "name": name, "origin": origin},
        )

    @classmethod
    def unrecognized_statement(cls, statement: str) -> "SchemaError":
        return cls(
            code=ErrorCode.UNRECOGNIZED_STATEMENT,
            message=f"Unsupported statement: {_excerpt(statement)}",
            details={"statement": statement},
        )

    @classmethod
    def unterminated_literal(cls, kind: str, offset: int) -> "SchemaError":
        return cls(
            code=ErrorCode.UNTERMINATED_LITERAL,
            message=f"Unterminated {kind} starting at offset {offset}",
            details={"kind": kind, "offset": offset},
        )

    @classmethod
    def input_not_found(cls, path: str) -> "SchemaError":
        return cls(
            code=ErrorCode.INPUT_NOT_FOUND,
            message=f"Input directory not found: {path}",
            details={"path": path},
        )


class InternalError(DdlBindError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
