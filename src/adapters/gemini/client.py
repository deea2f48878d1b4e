"""Factoría del cliente Google GenAI.

Por qué un builder:
- El cliente se construye de forma explícita y se inyecta en cada servicio,
  de modo que los tests pueden sustituirlo por un doble sin estado global.
"""

from __future__ import annotations

from google import genai

from core.config import AppSettings


def build_genai_client(settings: AppSettings | None = None) -> genai.Client:
    """Crea un `genai.Client` con la API key configurada.

    Falla con `ConfigurationError` si la key no existe.
    """

    settings = settings or AppSettings()
    return genai.Client(api_key=settings.require_api_key())
