"""
Boundary validation for untrusted input.

Request bodies arrive as arbitrary JSON values.  The helpers in this
module run them through the pydantic ``*Create`` models and return a
``ValidationResult`` instead of raising: either ``value`` holds the
validated model, or ``errors`` lists one ``FieldError`` per offending
field.  Callers check ``result.ok`` before touching storage.

Pydantic's default messages are replaced with short, user facing
sentences (``"Title cannot be empty"``).  The browser form phrases the
empty‑title case differently, so ``validate_insert_todo`` accepts an
override for that message; both call sites share the same rule.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .todo import TodoCreate
from .user import UserCreate

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_FIELD = "body"


@dataclass
class FieldError:
    """A single validation failure tied to a field name."""

    field: str
    message: str


@dataclass
class ValidationResult(Generic[ModelT]):
    """Outcome of validating a payload: a model or a list of errors."""

    value: Optional[ModelT] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        """All field messages joined into one human readable string."""
        return "; ".join(error.message for error in self.errors)


def _describe(error: Dict[str, Any], overrides: Dict[str, str]) -> FieldError:
    loc = error.get("loc") or ()
    if not loc:
        # The payload itself is not an object.
        return FieldError(field=BODY_FIELD, message="Request body must be a JSON object")

    name = str(loc[0])
    label = name.replace("_", " ").capitalize()
    kind = error.get("type", "")

    if kind in overrides:
        return FieldError(field=name, message=overrides[kind])
    if kind == "missing":
        message = f"{label} is required"
    elif kind == "string_too_short":
        message = f"{label} cannot be empty"
    elif kind == "string_type":
        message = f"{label} must be a string"
    else:
        message = error.get("msg", "Invalid value")
    return FieldError(field=name, message=message)


def validate_payload(
    model: Type[ModelT],
    data: Any,
    overrides: Optional[Dict[str, Dict[str, str]]] = None,
) -> ValidationResult[ModelT]:
    """Validate ``data`` against ``model`` without raising.

    ``overrides`` maps a field name to ``{pydantic error type: message}``
    and replaces the default message for that field and error type.
    """
    overrides = overrides or {}
    try:
        value = model.model_validate(data)
    except ValidationError as exc:
        errors = []
        for error in exc.errors():
            loc = error.get("loc") or ()
            field_overrides = overrides.get(str(loc[0]), {}) if loc else {}
            errors.append(_describe(error, field_overrides))
        return ValidationResult(errors=errors)
    return ValidationResult(value=value)


def validate_insert_todo(
    data: Any, empty_message: Optional[str] = None
) -> ValidationResult[TodoCreate]:
    """Validate a todo creation payload.

    Succeeds only if ``data`` is a mapping with a string ``title`` that
    is non‑empty after trimming.  The returned ``TodoCreate`` carries
    the trimmed title.  ``empty_message`` replaces the message used for
    an empty or missing title.
    """
    overrides: Dict[str, Dict[str, str]] = {}
    if empty_message:
        overrides["title"] = {
            "string_too_short": empty_message,
            "missing": empty_message,
        }
    return validate_payload(TodoCreate, data, overrides)


def validate_insert_user(data: Any) -> ValidationResult[UserCreate]:
    """Validate a user creation payload (``username`` and ``password``)."""
    return validate_payload(UserCreate, data)
