from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OCRForm:
    """Multipart body for one ``/parse/image`` upload."""
    file_name: str
    content: bytes
    mime_type: str
    fields: dict[str, str] = field(default_factory=dict)

    def to_httpx(self) -> tuple[dict[str, str], dict[str, tuple[str, bytes, str]]]:
        """Return ``(data, files)`` keyword arguments for ``httpx``."""
        return dict(self.fields), {"file": (self.file_name, self.content, self.mime_type)}


class OCRTransport:
    async def parse_image(self, form: OCRForm) -> dict[str, Any]:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None
