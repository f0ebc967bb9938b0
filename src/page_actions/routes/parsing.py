"""Request body parsing shared by the JSON endpoints."""

import json
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request

from page_actions.exceptions import RequestTooLargeError, ValidationError
from page_actions.utils.validation import flatten_validation_error

ModelT = TypeVar("ModelT", bound=BaseModel)


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """
    Read the JSON body of *request* and validate it against *model*.

    An empty body is validated as an empty object so missing fields are
    reported per field.

    Raises:
        RequestTooLargeError: If the body exceeds the configured limit
        ValidationError: If the body is not JSON or fails validation
    """
    limit = request.app.state.context.settings.max_request_body_bytes

    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise RequestTooLargeError(limit)

    raw = await request.body()
    if len(raw) > limit:
        raise RequestTooLargeError(limit)

    try:
        payload = json.loads(raw) if raw.strip() else {}
    except ValueError as e:
        raise ValidationError({"form_errors": ["Invalid JSON body"], "field_errors": {}}) from e

    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(flatten_validation_error(e)) from e
