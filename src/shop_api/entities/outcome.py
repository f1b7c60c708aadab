"""Handler outcome entities.

Every request handler returns exactly one of these. The HTTP boundary
decides what each variant means on the wire.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok:
    """Successful result, serialized verbatim by the boundary.

    Attributes:
        value: The collaborator's return value
    """

    value: Any


@dataclass(frozen=True)
class NotFound:
    """The requested resource does not exist."""


@dataclass(frozen=True)
class Err:
    """A failure forwarded to centralized error handling.

    Attributes:
        reason: The exception raised by the handler or its collaborator
    """

    reason: Exception


Outcome = Ok | NotFound | Err
