"""Shared pydantic building blocks for parameters and results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ParametersModel(BaseModel):
    """Immutable input record; accepts camelCase JSON or snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        allow_inf_nan=False,
    )


class ResultModel(BaseModel):
    """Immutable output record, serialised with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Tag(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Recommendation(ResultModel):
    kind: Tag
    title: str
    description: str


class CalculationStatus(ResultModel):
    """One-line outcome banner shown above a calculation's results."""

    kind: Tag
    message: str
