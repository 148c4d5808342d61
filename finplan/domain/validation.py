from __future__ import annotations

from typing import Any, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

ParamsT = TypeVar("ParamsT", bound=BaseModel)


class InvalidParameter(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidParameter":
        return cls([_describe(error) for error in exc.errors()])


def _describe(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    # field validators raise ValueError, pydantic prefixes those with "Value error, "
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{location}: {message}" if location else message


def validate_parameters(
    model: Type[ParamsT],
    payload: Union[ParamsT, Mapping[str, Any]],
) -> ParamsT:
    """Validate ``payload`` against ``model`` and return a checked instance.

    Model instances are re-validated too, since ``model_construct`` skips
    every constraint. All violations are reported together.
    """
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    if not isinstance(payload, Mapping):
        raise InvalidParameter([f"expected a mapping of {model.__name__} fields"])
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidParameter.from_validation_error(exc) from exc
