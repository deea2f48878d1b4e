"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core al SDK de Gemini.
- Los alias camelCase mantienen el formato JSON que esperan la UI y el
  esquema de salida estructurada del modelo remoto.

Nota:
- Son objetos de transferencia: viven lo que dura una petición/respuesta.
"""

from __future__ import annotations

from datetime import datetime as _datetime
from datetime import timezone
from enum import Enum
from typing import Any, Iterable, Mapping, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Module(str, Enum):
    """Módulo de GT Pilot que produjo un mensaje o resultado."""

    CHATBOT = "chatbot"
    INTELLIGENCE = "intelligence"
    VISUALS = "visuals"


class Role(str, Enum):
    USER = "user"
    MODEL = "model"
    SYSTEM = "system"


class AspectRatio(str, Enum):
    """Relaciones de aspecto admitidas por el modelo de imágenes."""

    SQUARE = "1:1"
    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"
    STANDARD = "4:3"
    STANDARD_PORTRAIT = "3:4"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


def normalize_aspect_ratio(value: Any) -> Any:
    """Devuelve el miembro de `AspectRatio` si el valor es conocido; si no, el valor tal cual."""

    if isinstance(value, str) and value in AspectRatio.values():
        return AspectRatio(value)
    return value


def _utc_now_iso() -> str:
    return _datetime.now(timezone.utc).isoformat(timespec="seconds")


class ChatMessage(BaseModel):
    """Mensaje de la conversación tal como lo guarda el llamador."""

    role: Role = Field(..., description="Autor del mensaje (user/model/system).")
    content: str = Field(..., description="Texto del mensaje.")
    module: Module | None = Field(
        default=None,
        description="Módulo que generó o atendió el mensaje.",
    )
    timestamp: str = Field(
        default_factory=_utc_now_iso,
        description="Momento del mensaje (ISO 8601).",
    )


class TextPart(BaseModel):
    text: str


class ChatTurn(BaseModel):
    """Turno del historial en el formato que acepta la sesión de chat remota."""

    role: Role
    parts: list[TextPart] = Field(default_factory=list)

    @classmethod
    def from_message(cls, message: ChatMessage) -> "ChatTurn":
        return cls(role=message.role, parts=[TextPart(text=message.content)])

    @property
    def text(self) -> str:
        return "".join(part.text for part in self.parts)


def history_from_messages(messages: Iterable[ChatMessage]) -> list[ChatTurn]:
    """Convierte una transcripción en historial remoto.

    Los mensajes `system` se descartan: la sesión remota solo admite turnos
    user/model.
    """

    return [ChatTurn.from_message(m) for m in messages if m.role is not Role.SYSTEM]


def coerce_turn(turn: ChatTurn | Mapping[str, Any]) -> ChatTurn:
    if isinstance(turn, ChatTurn):
        return turn
    return ChatTurn.model_validate(turn)


class ImageConcept(BaseModel):
    """Dirección creativa propuesta por el módulo visual.

    `id`, `image_url` e `is_generating` los rellena el llamador; el modelo
    remoto nunca los devuelve.

    Lo que llega del modelo remoto se construye con `from_response`: el
    esquema de salida es orientativo para el servicio y aquí no se valida.
    Un campo ausente queda en `None` y una relación de aspecto desconocida
    se conserva tal cual.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = Field(default=None)
    title: str | None = Field(default=None)
    concept_description: str | None = Field(
        default=None,
        alias="conceptDescription",
        description="Descripción detallada; se usa como prompt de imagen.",
    )
    palette: list[str] | None = Field(default=None)
    caption: str | None = Field(default=None)
    alt_text: str | None = Field(default=None, alias="altText")
    aspect_ratio: AspectRatio | str | None = Field(default=None, alias="aspectRatio")
    image_url: str | None = Field(default=None, alias="imageUrl")
    is_generating: bool | None = Field(default=None, alias="isGenerating")

    @field_validator("aspect_ratio", mode="after")
    @classmethod
    def _known_ratio(cls, value: Any) -> Any:
        return normalize_aspect_ratio(value)

    @classmethod
    def from_response(cls, item: Mapping[str, Any]) -> "ImageConcept":
        """Construye un concepto desde el JSON del modelo, sin validarlo."""

        if not isinstance(item, Mapping):
            raise TypeError(f"concept must be a JSON object, got {type(item).__name__}")
        names = {field.alias: name for name, field in cls.model_fields.items() if field.alias}
        values = {names.get(key, key): value for key, value in item.items()}
        if "aspect_ratio" in values:
            values["aspect_ratio"] = normalize_aspect_ratio(values["aspect_ratio"])
        return cls.model_construct(**values)


class PostBrief(BaseModel):
    topic: str
    content: str
    hashtags: list[str] = Field(default_factory=list)


class MetricDatum(BaseModel):
    name: str
    value: int
    fill: str = Field(..., description="Color de visualización (hex).")


class EngagementMetrics(BaseModel):
    period: str
    summary: str
    data: list[MetricDatum] = Field(default_factory=list)


class ScheduledPost(BaseModel):
    datetime: str = Field(..., description="Fecha/hora ISO 8601 solicitada.")
    platform: str
    confirmation: str


class CommandError(BaseModel):
    """Resultado etiquetado de error del enrutador de comandos."""

    error: str


CommandResult = Union[EngagementMetrics, list[PostBrief], ScheduledPost, CommandError]
