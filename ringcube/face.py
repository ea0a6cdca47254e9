from __future__ import annotations
from typing import Iterable, Iterator, Optional

import numpy as np

from ringcube.enums import Color
from ringcube.error import InvalidFaceException
from ringcube.utils import RING_SIZE

# ring positions laid out as seen looking straight at the face,
# None being the center
GRID = [
    [0, 1, 2],
    [7, None, 3],
    [6, 5, 4]
]

def _slot(index: int, doc: str) -> property:
    return property(lambda self: self[index], doc=doc)

class Face():

    """
    Stores a face as the ring of eight cells around its center,
    clockwise starting at the top left:

    0 1 2
    7   3
    6 5 4

    The center is not stored since it never moves, it is
    the color the face is filed under in the cube.
    Faces are immutable, the array backing them is read-only.
    """

    pos0 = _slot(0, "Top left")
    pos1 = _slot(1, "Top middle")
    pos2 = _slot(2, "Top right")
    pos3 = _slot(3, "Middle right")
    pos4 = _slot(4, "Bottom right")
    pos5 = _slot(5, "Bottom middle")
    pos6 = _slot(6, "Bottom left")
    pos7 = _slot(7, "Middle left")

    def __init__(self, cells: Iterable[Color]):
        cells = list(cells)
        if len(cells) != RING_SIZE:
            raise InvalidFaceException(f"A face has exactly {RING_SIZE} cells, got {len(cells)}")
        if not all(isinstance(cell, Color) for cell in cells):
            raise InvalidFaceException("Every cell of a face must be a Color")
        self._ring = np.array([cell.value for cell in cells], dtype=np.uint8)
        self._ring.flags.writeable = False

    @staticmethod
    def filled(color: Color) -> Face:
        """ Returns a face with every cell set to the given color """
        return Face([color] * RING_SIZE)

    @classmethod
    def _from_array(cls, ring: np.ndarray) -> Face:
        """ Wraps an already validated row of color values, copying it """
        face = cls.__new__(cls)
        face._ring = np.array(ring, dtype=np.uint8)
        face._ring.flags.writeable = False
        return face

    def get_array(self) -> np.ndarray:
        """ Returns the read-only array of color values """
        return self._ring

    def grid(self, center: Optional[Color] = None) -> list[list[Optional[Color]]]:
        """
        Returns the face as three rows of three, as seen looking at it.
        The middle cell is filled with the given center color.
        """
        return [
            [center if slot is None else self[slot] for slot in row]
            for row in GRID
        ]

    def __getitem__(self, index: int) -> Color:
        return Color(int(self._ring[index]))

    def __iter__(self) -> Iterator[Color]:
        return (Color(int(value)) for value in self._ring)

    def __len__(self) -> int:
        return RING_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return bool(np.array_equal(self._ring, other._ring))

    def __hash__(self) -> int:
        return hash(self._ring.tobytes())

    def __repr__(self) -> str:
        return f"Face([{', '.join(f'Color.{cell.name}' for cell in self)}])"
