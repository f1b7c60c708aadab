"""Domain entities for internal representation.

These are pure dataclasses (frozen) passed between handlers and the
HTTP boundary. They are NOT used for API contracts - use DTOs from the
dto package for that.
"""

from .document import Document, StaticDocument
from .outcome import Err, NotFound, Ok, Outcome

__all__ = ["Document", "StaticDocument", "Ok", "NotFound", "Err", "Outcome"]
