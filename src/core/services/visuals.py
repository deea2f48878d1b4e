"""Módulo visual: generación de conceptos y renderizado de imágenes.

A diferencia del chatbot y del enrutador de comandos, aquí los fallos se
propagan: el llamador recibe `ConceptGenerationError` o
`ImageGenerationError` con un mensaje fijo, encadenado a la causa.

Nota:
- El JSON de conceptos solo se parsea. El esquema de salida es orientativo
  para el servicio remoto y no se valida en local.
"""

from __future__ import annotations

import base64
import json
import logging
import uuid
from typing import Any, Iterable

from google.genai import types

from adapters.gemini.declarations import CONCEPTS_RESPONSE_SCHEMA
from adapters.gemini.prompts import SYSTEM_PROMPT_VISUALS, build_concepts_prompt
from core.config import AppSettings
from core.domain.models import AspectRatio, ImageConcept, Module
from core.errors import ConceptGenerationError, ImageGenerationError

logger = logging.getLogger(__name__)

JPEG_DATA_URI_PREFIX = "data:image/jpeg;base64,"


def to_jpeg_data_uri(image_bytes: bytes | str) -> str:
    """Encode raw JPEG bytes as a data URI.

    A `str` is assumed to be base64 text already.
    """

    if isinstance(image_bytes, str):
        encoded = image_bytes
    else:
        encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"{JPEG_DATA_URI_PREFIX}{encoded}"


class VisualConceptGenerator:
    def __init__(self, client: Any, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    async def generate(self, brand_name: str, tone: str, brief: str) -> list[ImageConcept]:
        """Return 1-3 image concepts for a brand, tone and content brief."""

        try:
            response = await self._client.aio.models.generate_content(
                model=self._settings.visuals_model,
                contents=build_concepts_prompt(brand_name=brand_name, tone=tone, brief=brief),
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT_VISUALS,
                    response_mime_type="application/json",
                    response_schema=CONCEPTS_RESPONSE_SCHEMA,
                ),
            )
            concepts = json.loads(response.text)["concepts"]
            if not isinstance(concepts, list):
                raise TypeError(f"'concepts' must be a list, got {type(concepts).__name__}")
            return [ImageConcept.from_response(item) for item in concepts]
        except Exception as exc:
            logger.exception(
                "Error generating image concepts",
                extra={"gt_module": Module.VISUALS.value},
            )
            raise ConceptGenerationError() from exc


def assign_concept_ids(concepts: Iterable[ImageConcept]) -> list[ImageConcept]:
    """Give every concept without an id a fresh one."""

    return [
        c if c.id else c.model_copy(update={"id": uuid.uuid4().hex})
        for c in concepts
    ]


class ImageRenderer:
    def __init__(self, client: Any, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    async def render(self, prompt: str, aspect_ratio: AspectRatio | str) -> str:
        """Generate one JPEG for `prompt` and return it as a data URI."""

        try:
            ratio = AspectRatio(aspect_ratio)
            response = await self._client.aio.models.generate_images(
                model=self._settings.image_model,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=1,
                    aspect_ratio=ratio.value,
                    output_mime_type="image/jpeg",
                ),
            )
            image_bytes = response.generated_images[0].image.image_bytes
            if not image_bytes:
                raise ValueError("image model returned an empty image")
            return to_jpeg_data_uri(image_bytes)
        except Exception as exc:
            logger.exception(
                "Error generating image",
                extra={"gt_module": Module.VISUALS.value},
            )
            raise ImageGenerationError() from exc


async def render_concept(renderer: ImageRenderer, concept: ImageConcept) -> ImageConcept:
    """Render a concept's description and attach the resulting data URI.

    A concept without a ratio is rendered square; the concept itself keeps
    `aspect_ratio=None`.
    """

    ratio = concept.aspect_ratio or AspectRatio.SQUARE
    image_url = await renderer.render(concept.concept_description or "", ratio)
    return concept.model_copy(update={"image_url": image_url, "is_generating": False})
