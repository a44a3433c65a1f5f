"""Sort parameter shared by list endpoints."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel


class SortOrder(IntEnum):
    """Direction tokens used by the management API ``sort`` syntax."""

    ASCENDING = 1
    DESCENDING = -1


class Sort(BaseModel):
    """A single ``field:order`` ordering instruction, or nothing at all."""

    field: str | None = None
    order: SortOrder | None = None

    def is_empty(self) -> bool:
        return self.field is None

    def set(self, field: str, order: SortOrder) -> Sort:
        self.field = field
        self.order = SortOrder(order)
        return self

    def to_param(self) -> str | None:
        """Return ``date:1`` / ``date:-1``, or None when no sort was requested."""
        if self.is_empty():
            return None
        order = self.order if self.order is not None else SortOrder.ASCENDING
        return f"{self.field}:{order.value}"
