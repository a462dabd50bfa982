"""Play-order sorting for the tracks of one album."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from .vinyl import vinyl_track_number

T = TypeVar("T")


def album_sort_key(label: Optional[str]) -> Tuple[int, int]:
    number = vinyl_track_number(label)
    if number is None:
        return (1, 0)
    return (0, number)


def order_labels(labels: Iterable[Optional[str]]) -> List[Optional[str]]:
    return sorted(labels, key=album_sort_key)


def order_tracks(items: Iterable[T], label_of: Callable[[T], Optional[str]]) -> List[T]:
    """Sort items side-major by their track label.

    Unparseable labels go last and keep their original relative order.
    """
    return sorted(items, key=lambda item: album_sort_key(label_of(item)))
