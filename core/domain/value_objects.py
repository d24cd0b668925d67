"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity.
"""
import time
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


def now_ms() -> int:
    """Return the current time as epoch milliseconds."""
    return int(time.time() * 1000)


DAY_MS = 24 * 60 * 60 * 1000


class LicenseStatus(Enum):
    """License status value object."""

    ACTIVE = "active"
    EXPIRED = "expired"
    BANNED = "banned"

    def __str__(self) -> str:
        """Return status as string."""
        return self.value


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of a cursor-paginated listing.

    `next` is None once the end of the collection is reached,
    otherwise an opaque token that resumes after the last item.
    """

    items: List[T]
    next: Optional[str]
