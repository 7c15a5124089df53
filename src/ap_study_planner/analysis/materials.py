"""Combine uploaded study materials into the raw text the insight extractor reads."""

from collections.abc import Iterable

import structlog
from pydantic import BaseModel

logger = structlog.get_logger()

TEXT_SUFFIXES = (".txt", ".md", ".markdown", ".csv")


class MaterialFile(BaseModel):
    name: str
    content_type: str = "application/octet-stream"
    data: bytes | str = b""

    @property
    def is_text(self) -> bool:
        return self.content_type.startswith("text/") or self.name.lower().endswith(TEXT_SUFFIXES)


def _decode(data: bytes | str) -> str:
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


def build_material_text(files: Iterable[MaterialFile], notes: str = "") -> str:
    """Join typed notes and uploaded files into one text blob.

    Binary formats are not parsed; they contribute a placeholder line naming
    the file and its type.
    """
    parts = [notes.strip()] if notes and notes.strip() else []
    for file in files:
        if file.is_text:
            parts.append(f"From {file.name}:\n{_decode(file.data)}")
        else:
            logger.debug("material_placeholder", name=file.name, content_type=file.content_type)
            parts.append(f"Uploaded file: {file.name} ({file.content_type})")
    return "\n\n".join(parts)
