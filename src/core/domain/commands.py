"""Funciones enrutables del módulo intelligence.

El conjunto es cerrado: cualquier nombre fuera de `FunctionName` se trata
como función no implementada.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class FunctionName(str, Enum):
    GENERATE_POST_BRIEFS = "generatepostbriefs"
    SUMMARIZE_METRICS = "summarizemetrics"
    SCHEDULE_POST = "schedulepost"

    @classmethod
    def parse(cls, name: str | None) -> "FunctionName | None":
        try:
            return cls(name)
        except ValueError:
            return None


class _StringArgs(BaseModel):
    """Los argumentos del modelo se tratan como strings, sin más validación."""

    @field_validator("*", mode="before")
    @classmethod
    def _as_string(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class GeneratePostBriefsArgs(_StringArgs):
    topic: str
    tone: str


class SummarizeMetricsArgs(_StringArgs):
    period: str


class SchedulePostArgs(_StringArgs):
    datetime: str
    platform: str
