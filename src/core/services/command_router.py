"""Enrutado de comandos del módulo de inteligencia.

El modelo remoto elige una de las funciones declaradas; este módulo lee la
primera llamada devuelta y la despacha al backend correspondiente. Cualquier
fallo se convierte en un valor `CommandError`, así que el llamador no
necesita try/except alrededor de `route`.

Nota:
- Solo se atiende la primera llamada. Si el modelo devuelve varias, el resto
  se descarta.
"""

from __future__ import annotations

import logging
from typing import Any

from google.genai import types

from adapters.fakes import (
    ConfirmationSchedulerBackend,
    RandomMetricsBackend,
    TemplatePostBriefBackend,
)
from adapters.gemini.declarations import INTELLIGENCE_TOOL
from adapters.gemini.prompts import SYSTEM_PROMPT_INTELLIGENCE
from core.config import AppSettings
from core.domain.commands import (
    FunctionName,
    GeneratePostBriefsArgs,
    SchedulePostArgs,
    SummarizeMetricsArgs,
)
from core.domain.models import CommandError, CommandResult, Module
from core.interfaces.backends import MetricsBackend, PostBriefBackend, SchedulerBackend

logger = logging.getLogger(__name__)

REPHRASE_MESSAGE = "I couldn't determine the right action. Could you please rephrase?"
GENERIC_ERROR_MESSAGE = "An error occurred while processing your command."


def not_implemented_message(name: str | None) -> str:
    return f"Function {name} is not implemented."


class CommandRouter:
    def __init__(
        self,
        client: Any,
        settings: AppSettings | None = None,
        *,
        metrics: MetricsBackend | None = None,
        briefs: PostBriefBackend | None = None,
        scheduler: SchedulerBackend | None = None,
    ) -> None:
        self._client = client
        self._settings = settings or AppSettings()
        self._metrics = metrics or RandomMetricsBackend()
        self._briefs = briefs or TemplatePostBriefBackend()
        self._scheduler = scheduler or ConfirmationSchedulerBackend()

    async def route(self, prompt: str) -> CommandResult:
        """Ask the model which function fits `prompt` and execute it."""

        try:
            response = await self._client.aio.models.generate_content(
                model=self._settings.intelligence_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT_INTELLIGENCE,
                    tools=[INTELLIGENCE_TOOL],
                ),
            )

            calls = response.function_calls or []
            if not calls:
                return CommandError(error=REPHRASE_MESSAGE)
            if len(calls) > 1:
                logger.debug(
                    "Ignoring %d extra function call(s): %s",
                    len(calls) - 1,
                    [c.name for c in calls[1:]],
                )

            call = calls[0]
            return self._dispatch(call.name, call.args or {})
        except Exception:
            logger.exception(
                "Error in intelligence module",
                extra={"gt_module": Module.INTELLIGENCE.value},
            )
            return CommandError(error=GENERIC_ERROR_MESSAGE)

    def _dispatch(self, name: str | None, args: dict[str, Any]) -> CommandResult:
        function = FunctionName.parse(name)
        logger.info(
            "Routed command to %s",
            function.value if function else name,
            extra={"gt_module": Module.INTELLIGENCE.value},
        )

        if function is FunctionName.SUMMARIZE_METRICS:
            metrics_args = SummarizeMetricsArgs.model_validate(args)
            return self._metrics.summarize(metrics_args.period)

        if function is FunctionName.GENERATE_POST_BRIEFS:
            brief_args = GeneratePostBriefsArgs.model_validate(args)
            return self._briefs.generate(brief_args.topic, brief_args.tone)

        if function is FunctionName.SCHEDULE_POST:
            schedule_args = SchedulePostArgs.model_validate(args)
            return self._scheduler.schedule(schedule_args.datetime, schedule_args.platform)

        # Unknown name, or a declared function without a dispatch branch yet.
        return CommandError(error=not_implemented_message(name))
