"""Document entities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

# A stored product or order: an arbitrary JSON object
Document = dict[str, Any]


@dataclass(frozen=True)
class StaticDocument:
    """A fixed document served as-is (the root page).

    Attributes:
        content: Raw bytes of the document
        media_type: Content type sent with the bytes
    """

    content: bytes
    media_type: str = "text/html"

    @classmethod
    def from_path(cls, path: str | Path, media_type: str = "text/html") -> "StaticDocument":
        """Read a document from disk once."""
        return cls(content=Path(path).read_bytes(), media_type=media_type)
