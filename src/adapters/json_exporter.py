"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con la UI (alias camelCase) y otros pipelines.
- Permite guardar briefs, métricas o conceptos sin depender de la CLI.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def to_jsonable(payload: Any) -> Any:
    """Convierte modelos (o listas de modelos) a estructuras JSON con alias.

    Los conceptos del modelo remoto no se validan, así que un campo puede
    traer otro tipo; se exporta tal cual, sin avisos de serialización.
    """

    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True, warnings=False)
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    return payload


def export_json(*, payload: Any, output_path: Path) -> Path:
    """Exporta `payload` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
