"""Contratos de los backends del módulo intelligence.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Las implementaciones de referencia (`adapters.fakes`) fabrican datos; un
  backend real (métricas, programador de posts) se enchufa sin tocar el router.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import EngagementMetrics, PostBrief, ScheduledPost


@runtime_checkable
class MetricsBackend(Protocol):
    def summarize(self, period: str) -> EngagementMetrics:
        """Resume las métricas de engagement de `period`."""

        ...


@runtime_checkable
class PostBriefBackend(Protocol):
    def generate(self, topic: str, tone: str) -> list[PostBrief]:
        """Genera briefs de posts para `topic` con el tono indicado."""

        ...


@runtime_checkable
class SchedulerBackend(Protocol):
    def schedule(self, datetime: str, platform: str) -> ScheduledPost:
        """Programa un post y devuelve la confirmación."""

        ...
