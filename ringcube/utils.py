from __future__ import annotations
from typing import Any

FACE_COUNT = 6
RING_SIZE = 8

def relative_index(index: int, offset: int) -> int:
    """
    Returns the index of the face 'offset' faces away from the given one,
    wrapping around the six faces.

    >>> relative_index(0, -2)
    4
    >>> relative_index(5, 1)
    0
    >>> relative_index(1, 3)
    4
    """
    return (index + offset) % FACE_COUNT

def ring_slots(*slots: int) -> list[int]:
    """
    Normalizes ring positions so strips can wrap past the top left cell.

    >>> ring_slots(6, 7, 8)
    [6, 7, 0]
    >>> ring_slots(-2, -1, 0)
    [6, 7, 0]
    """
    return [slot % RING_SIZE for slot in slots]

def debug_print(prompt: str, *items: Any) -> None:
    print(f"{prompt}:")
    for item in items:
        print(item)
