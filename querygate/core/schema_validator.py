"""Schema Validator: adapts pydantic schemas to the Validator protocol.

Invariants:
    - Never raises on bad input; pydantic.ValidationError becomes ValidationFailure
    - Every pydantic error maps to exactly one Issue (loc -> path, msg -> message, type -> code)
    - The failure keeps the untouched raw value

Design Decisions:
    - TypeAdapter over BaseModel.model_validate: accepts models, lists, unions, TypedDicts alike
    - The adapter is built once per schema_validator() call, not per validation
"""

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from querygate.core.source_protocols import (
    Issue, ValidationFailure, ValidationSuccess, Validator,
)

T = TypeVar("T")


def issues_from_pydantic(exc: ValidationError) -> tuple[Issue, ...]:
    """Flatten a pydantic ValidationError into Issues, preserving order."""
    return tuple(
        Issue(path=tuple(err["loc"]), message=err["msg"], code=err["type"])
        for err in exc.errors()
    )


def schema_validator(schema: Any, *, strict: bool | None = None) -> Validator[T]:
    """Build a Validator that checks values against `schema`.

    `schema` is anything pydantic's TypeAdapter accepts: a BaseModel subclass,
    `list[Movie]`, `dict[str, int]`, an Annotated type, ...
    """
    adapter = TypeAdapter(schema)

    def validate(value: Any) -> ValidationSuccess[T] | ValidationFailure:
        try:
            parsed = adapter.validate_python(value, strict=strict)
        except ValidationError as exc:
            return ValidationFailure(issues=issues_from_pydantic(exc), raw=value)
        return ValidationSuccess(parsed)

    validate.__name__ = f"validate_{getattr(schema, '__name__', 'schema')}"
    return validate
