"""Relay de chat del módulo chatbot.

Reenvía la conversación al modelo de chat con la instrucción fija del
chatbot. Los fallos nunca llegan al llamador: se registran y se sustituyen
por una disculpa fija para que la UI siempre tenga algo que mostrar.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from google.genai import types

from adapters.gemini.prompts import SYSTEM_PROMPT_CHATBOT
from core.config import AppSettings
from core.domain.models import ChatTurn, Module, coerce_turn

logger = logging.getLogger(__name__)

CHAT_FALLBACK_REPLY = "Sorry, I encountered an error. Please try again."


def _to_content(turn: ChatTurn) -> types.Content:
    return types.Content(
        role=turn.role.value,
        parts=[types.Part(text=part.text) for part in turn.parts],
    )


class ChatRelay:
    def __init__(self, client: Any, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    async def respond(
        self,
        history: Sequence[ChatTurn | Mapping[str, Any]],
        message: str,
    ) -> str:
        """Send `message` after `history` and return the model's reply text."""

        try:
            chat = self._client.aio.chats.create(
                model=self._settings.chat_model,
                history=[_to_content(coerce_turn(turn)) for turn in history],
                config=types.GenerateContentConfig(system_instruction=SYSTEM_PROMPT_CHATBOT),
            )
            response = await chat.send_message(message)
            return response.text or ""
        except Exception:
            logger.exception(
                "Error getting chatbot response",
                extra={"gt_module": Module.CHATBOT.value},
            )
            return CHAT_FALLBACK_REPLY
