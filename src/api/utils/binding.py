from __future__ import annotations

import logging
from typing import Any, TypeVar

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from schemas.responses import FieldError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_FIELD = "body"
VALUE_ERROR_PREFIX = "Value error, "


class BindingResult:
    """Field errors collected while binding a payload to a request model."""

    def __init__(self, target: str) -> None:
        self.target = target
        self._field_errors: list[FieldError] = []

    def reject(self, field: str, rejected_value: Any, message: str) -> None:
        self._field_errors.append(FieldError(field=field, rejected_value=rejected_value, message=message))

    def has_errors(self) -> bool:
        return bool(self._field_errors)

    @property
    def field_errors(self) -> list[FieldError]:
        return list(self._field_errors)

    def __repr__(self) -> str:
        return f"<BindingResult(target={self.target!r}, errors={len(self._field_errors)})>"


def _field_name(loc: tuple[int | str, ...]) -> str:
    if not loc:
        return BODY_FIELD
    name = str(loc[0])
    for part in loc[1:]:
        name += f"[{part}]" if isinstance(part, int) else f".{part}"
    return name


def _message(error: dict[str, Any]) -> str:
    msg = str(error.get("msg", "invalid value"))
    if msg.startswith(VALUE_ERROR_PREFIX):
        return msg[len(VALUE_ERROR_PREFIX):]
    return msg


def bind(model: type[ModelT], payload: Any) -> tuple[ModelT | None, BindingResult]:
    """Validate ``payload`` against ``model``.

    Returns the bound model, or ``None`` together with a binding result
    holding one field error per violated constraint, in field order.
    """
    result = BindingResult(model.__name__)
    try:
        return model.model_validate(payload), result
    except ValidationError as exc:
        for error in exc.errors():
            rejected = None if error.get("type") == "missing" else error.get("input")
            result.reject(_field_name(tuple(error.get("loc", ()))), rejected, _message(error))
        return None, result


def validated_result(result: BindingResult) -> JSONResponse | None:
    """Turn a failed binding into a 400 response listing every field error.

    Returns ``None`` when the binding produced no errors.
    """
    if not result.has_errors():
        return None

    field_errors = result.field_errors
    for err in field_errors:
        logger.warning("invalid client data - %s", err)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(field_errors, by_alias=True),
    )
