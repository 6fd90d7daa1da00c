"""Major.minor versions used to tag documented options."""

from __future__ import annotations

from dataclasses import dataclass

from ..helpers import parse_int


@dataclass(frozen=True)
class Version:
    """A ``major.minor`` version; the zero value is ``0.0``."""

    major: int = 0
    minor: int = 0

    @classmethod
    def parse(cls, data: str) -> "Version":
        """Parse ``major.minor``; anything else raises ValueError."""
        parts = data.split(".")
        if len(parts) != 2:
            raise ValueError("version is not in correct format")
        return cls(parse_int(parts[0]), parse_int(parts[1]))

    def lower_or_equal(self, active: "Version") -> bool:
        """True when this version is not newer than ``active``."""
        if active.major < self.major:
            return False
        if active.major != self.major:
            return True
        return active.minor >= self.minor

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"