"""Collecting several errors and reporting them as one."""

from __future__ import annotations

from typing import Iterable, Iterator


class AggregateError(Exception):
    """Several errors joined into one; each message sits on its own line."""

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors: tuple[BaseException, ...] = tuple(errors)
        super().__init__("".join("\n" + str(error) for error in self.errors))


class ErrorCollector:
    """Accumulates errors, silently ignoring ``None`` values."""

    def __init__(self) -> None:
        self._errors: list[BaseException] = []

    def add(self, *args: BaseException | None) -> None:
        """Record every argument that is not ``None``."""
        self._errors.extend(error for error in args if error is not None)

    def result(self) -> AggregateError | None:
        """Return the collected errors as one exception, or ``None`` if there are none."""
        if not self._errors:
            return None
        return AggregateError(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)