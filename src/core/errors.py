"""Excepciones de la aplicación.

Solo los módulos visuales propagan errores al llamador; el chatbot y el
enrutador de comandos devuelven valores por defecto o resultados etiquetados.
"""

from __future__ import annotations


class GTPilotError(Exception):
    """Base exception for GT Pilot errors."""


class ConfigurationError(GTPilotError):
    """Raised when a required setting (typically the API key) is missing."""


class ConceptGenerationError(GTPilotError):
    """Raised when the visuals module cannot produce image concepts."""

    def __init__(self, message: str = "Failed to generate image concepts.") -> None:
        super().__init__(message)


class ImageGenerationError(GTPilotError):
    """Raised when the image model does not return a usable image."""

    def __init__(self, message: str = "Failed to generate the image.") -> None:
        super().__init__(message)
