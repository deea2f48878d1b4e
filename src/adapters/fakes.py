"""Backends de referencia (fakes) del módulo intelligence.

Por qué existen:
- No hay almacén de métricas ni programador de posts reales; estas clases
  fabrican respuestas plausibles detrás de los contratos de
  `core.interfaces.backends`.
- Aceptan un `random.Random` para que los tests sean deterministas.
"""

from __future__ import annotations

import random
import re
from datetime import datetime as _datetime
from datetime import timezone

from core.domain.models import EngagementMetrics, MetricDatum, PostBrief, ScheduledPost
from core.interfaces.backends import MetricsBackend, PostBriefBackend, SchedulerBackend

# (nombre, mínimo, máximo inclusive, color)
METRIC_RANGES: tuple[tuple[str, int, int, str], ...] = (
    ("Likes", 1000, 5999, "#8884d8"),
    ("Comments", 200, 1199, "#82ca9d"),
    ("Shares", 150, 949, "#ffc658"),
    ("Views", 5000, 24999, "#ff8042"),
)

_BRIEF_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("Exploring the future of {topic} in modern tech.", "#Innovation"),
    ("A deep dive into how {topic} is changing the industry.", "#TechTrends"),
    ("5 key takeaways about {topic} you need to know.", "#FutureTech"),
)

_WHITESPACE_RE = re.compile(r"\s+")
_DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def topic_hashtag(topic: str) -> str:
    return "#" + _WHITESPACE_RE.sub("", topic)


class RandomMetricsBackend(MetricsBackend):
    """Métricas aleatorias dentro de rangos fijos."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def summarize(self, period: str) -> EngagementMetrics:
        data = [
            MetricDatum(name=name, value=self._rng.randint(low, high), fill=fill)
            for name, low, high, fill in METRIC_RANGES
        ]
        return EngagementMetrics(
            period=period,
            summary=f"Engagement for {period} shows strong growth in shares and comments.",
            data=data,
        )


class TemplatePostBriefBackend(PostBriefBackend):
    """Tres briefs a partir de plantillas fijas; el tono no influye."""

    def generate(self, topic: str, tone: str) -> list[PostBrief]:
        tag = topic_hashtag(topic)
        return [
            PostBrief(topic=topic, content=template.format(topic=topic), hashtags=[tag, extra])
            for template, extra in _BRIEF_TEMPLATES
        ]


def format_local_datetime(value: str) -> str:
    """Formatea un ISO 8601 como fecha local estilo en-US.

    Ejemplo: ``2025-03-04T15:05:09`` -> ``3/4/2025, 3:05:09 PM``. Los valores
    no parseables devuelven ``Invalid Date``.
    """

    text = (value or "").strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = _datetime.fromisoformat(text)
    except ValueError:
        return "Invalid Date"

    # Una fecha sin hora se interpreta como medianoche UTC.
    if _DATE_ONLY_RE.match(text):
        parsed = parsed.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()

    hour = parsed.hour % 12 or 12
    suffix = "AM" if parsed.hour < 12 else "PM"
    return (
        f"{parsed.month}/{parsed.day}/{parsed.year}, "
        f"{hour}:{parsed.minute:02d}:{parsed.second:02d} {suffix}"
    )


class ConfirmationSchedulerBackend(SchedulerBackend):
    """No programa nada: solo fabrica la confirmación."""

    def schedule(self, datetime: str, platform: str) -> ScheduledPost:
        return ScheduledPost(
            datetime=datetime,
            platform=platform,
            confirmation=f"Successfully scheduled post for {platform} at {format_local_datetime(datetime)}.",
        )
