"""Adaptador para Google GenAI (Gemini + Imagen).

Responsabilidad:
- Construir el cliente del SDK a partir de `AppSettings`.
- Definir los prompts de sistema, las declaraciones de funciones y el esquema
  de salida estructurada que se envían al servicio remoto.
"""

from adapters.gemini.client import build_genai_client
from adapters.gemini.declarations import (
    CONCEPTS_RESPONSE_SCHEMA,
    FUNCTION_DECLARATIONS,
    INTELLIGENCE_TOOL,
)

__all__ = [
    "CONCEPTS_RESPONSE_SCHEMA",
    "FUNCTION_DECLARATIONS",
    "INTELLIGENCE_TOOL",
    "build_genai_client",
]
