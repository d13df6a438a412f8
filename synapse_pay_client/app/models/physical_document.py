import base64
import mimetypes
from pathlib import Path
from typing import Optional

from .document import Document


class PhysicalDocument(Document):
    """ID scans, selfies, proof of address and other uploaded files."""

    @classmethod
    def from_byte_stream(cls, type: str, data: bytes, mime_type: str) -> "PhysicalDocument":
        encoded = base64.b64encode(data).decode("ascii")
        return cls(type=type, value=f"data:{mime_type};base64,{encoded}")

    @classmethod
    def from_file_path(cls, type: str, file_path: str, mime_type: Optional[str] = None) -> "PhysicalDocument":
        path = Path(file_path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(path.name)
        return cls.from_byte_stream(type, path.read_bytes(), mime_type or "application/octet-stream")
