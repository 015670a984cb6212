"""Ordered list with a single movable, wrapping selection cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """An ordered sequence of items plus an optional selected index.

    The selection is a plain index. Navigation wraps around at both ends, and
    an empty list never holds a selection.
    """

    def __init__(self, items: list[T], selected: int | None = None) -> None:
        self.items = items
        self._selected = selected

    @classmethod
    def with_items(cls, items: Iterable[T]) -> SelectableList[T]:
        """Build a list, selecting the first item when there is one."""
        items = list(items)
        return cls(items, 0 if items else None)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def selected(self) -> int | None:
        return self._selected

    def selected_item(self) -> T | None:
        if self._selected is None:
            return None
        return self.items[self._selected]

    def next(self) -> None:
        """Move the cursor forward, wrapping to the first item."""
        if not self.items:
            self._selected = None
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected + 1) % len(self.items)

    def previous(self) -> None:
        """Move the cursor back, wrapping to the last item."""
        if not self.items:
            self._selected = None
            return
        if self._selected is None:
            self._selected = 0
        else:
            self._selected = (self._selected - 1) % len(self.items)

    def unselect(self) -> None:
        self._selected = None
