"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (Gemini/Imagen) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigurationError


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "gt-pilot"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "gt-pilot"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "gt-pilot"
    return Path.home() / ".config" / "gt-pilot"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# GT Pilot user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GT_PILOT_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GT_PILOT_API_KEY", "API_KEY", "GEMINI_API_KEY"),
        description="API key del servicio Gemini/Imagen.",
    )

    chat_model: str = Field(
        default="gemini-2.5-flash",
        min_length=1,
        description="Modelo conversacional del módulo chatbot.",
    )
    intelligence_model: str = Field(
        default="gemini-2.5-pro",
        min_length=1,
        description="Modelo con function-calling para el enrutado de comandos.",
    )
    visuals_model: str = Field(
        default="gemini-2.5-pro",
        min_length=1,
        description="Modelo con salida JSON estructurada para conceptos visuales.",
    )
    image_model: str = Field(
        default="imagen-4.0-generate-001",
        min_length=1,
        description="Modelo de generación de imágenes.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    def require_api_key(self) -> str:
        """Devuelve la API key o falla de inmediato si no está configurada."""

        key = (self.api_key or "").strip()
        if not key:
            raise ConfigurationError("API_KEY environment variable not set")
        return key
