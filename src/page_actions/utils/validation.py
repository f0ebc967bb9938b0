"""Helpers for turning pydantic validation failures into API error bodies."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError


def flatten_validation_error(exc: PydanticValidationError) -> dict[str, Any]:
    """
    Flatten pydantic errors into form-level and field-level messages.

    Errors without a location (e.g. the body is not an object) are form errors;
    everything else is grouped under the top-level field it belongs to.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}

    for error in exc.errors():
        loc = error.get("loc") or ()
        message = error.get("msg", "Invalid value")
        if loc:
            field_errors.setdefault(str(loc[0]), []).append(message)
        else:
            form_errors.append(message)

    return {"form_errors": form_errors, "field_errors": field_errors}
