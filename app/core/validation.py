"""
Request payload validation.

Handlers validate bodies and coerced query strings against pydantic schemas
here, so every schema failure becomes one BadRequestError listing all
problems found.
"""

from typing import Any, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import BadRequestError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def format_validation_errors(errors: Iterable[dict]) -> List[str]:
    """
    Turn pydantic error dicts into "<location>: <message>" strings.

    Errors about the payload as a whole (empty location) are reported with
    the bare message.
    """
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        if location:
            messages.append(f"{location}: {error['msg']}")
        else:
            messages.append(error["msg"])
    return messages


def validate_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """
    Validate payload against schema.

    Raises:
        BadRequestError: with the list of validation messages
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError(format_validation_errors(exc.errors())) from exc
