"""Small documented items kept for demonstration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DocumentedStruct:
    """A plain record with two documented fields."""

    field1: int
    field2: str

    def test_method(self) -> bool:
        """Always true."""
        return True


def documented_function() -> int:
    """Return the fixed answer."""
    return 42