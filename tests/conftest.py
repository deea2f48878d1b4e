"""
Pytest configuration and shared fixtures.

The GenAI client is replaced by a MagicMock exposing the async surface the
services use (`aio.models.generate_content`, `aio.models.generate_images`,
`aio.chats.create(...).send_message`).
"""

import random
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from core.config import AppSettings


def make_function_call_response(*calls: types.FunctionCall, text: Optional[str] = None) -> SimpleNamespace:
    """Response double carrying `function_calls` like GenerateContentResponse."""
    return SimpleNamespace(function_calls=list(calls) or None, text=text)


def make_call(name: str, args: Optional[Dict[str, Any]] = None) -> types.FunctionCall:
    return types.FunctionCall(name=name, args=args or {})


def make_text_response(text: Optional[str]) -> SimpleNamespace:
    return SimpleNamespace(function_calls=None, text=text)


def make_images_response(images: List[bytes]) -> SimpleNamespace:
    return SimpleNamespace(
        generated_images=[SimpleNamespace(image=SimpleNamespace(image_bytes=b)) for b in images]
    )


@pytest.fixture
def settings() -> AppSettings:
    """Settings with a dummy key; no .env files are read."""
    return AppSettings(api_key="test-key", _env_file=None)


@pytest.fixture
def chat_session() -> MagicMock:
    session = MagicMock()
    session.send_message = AsyncMock(return_value=make_text_response("Routed to Intelligence."))
    return session


@pytest.fixture
def genai_client(chat_session) -> MagicMock:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    client.aio.models.generate_images = AsyncMock()
    client.aio.chats.create = MagicMock(return_value=chat_session)
    return client


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
