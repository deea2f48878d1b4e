"""Guardado de imágenes recibidas como data URI."""

from __future__ import annotations

import base64
import binascii
import re
from pathlib import Path

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """Devuelve `(mime_type, bytes)` de un data URI base64."""

    match = _DATA_URI_RE.match(uri or "")
    if not match:
        raise ValueError("Not a base64 data URI.")
    try:
        data = base64.b64decode(match.group("data"), validate=True)
    except binascii.Error as exc:
        raise ValueError("Invalid base64 payload in data URI.") from exc
    return match.group("mime"), data


def write_data_uri(*, uri: str, output_path: Path) -> Path:
    _, data = decode_data_uri(uri)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path
