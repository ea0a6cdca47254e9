from __future__ import annotations
from typing import Iterator, Mapping, Sequence, Union

import numpy as np
from pynterface import Background

from ringcube.enums import Color
from ringcube.error import InvalidCubeException
from ringcube.face import Face
from ringcube.utils import FACE_COUNT, RING_SIZE

class Cube():

    """
    Stores a cube as a read-only array of shape (6, 8): one row per face,
    holding the ring of that face (see Face for the slot numbering).
    Row n is the face with color n at its center, and that never changes,
    turning only moves the cells around.

    Every face has a viewing orientation. Start on the center of face 0,
    walk up to pos 1 and cross over onto face 1. Walk to its center, turn
    and keep walking until the edge: that's "up" on face 1, so the walk
    leaves face 1 at pos 1. On face 1 turn left at the center, on face 2
    turn right, and keep alternating, which gets you through all six faces
    and back onto face 0.

    The walk leaves every face at pos 1, but enters it at pos 3 when you
    turned right (the even, right handed faces) and at pos 7 when you
    turned left (the odd, left handed ones).
    """

    COLOR_TO_STRING = {
        color: str(color.value) for color in list(Color)
    }

    STRING_TO_COLOR = {
        v: k for k, v in COLOR_TO_STRING.items()
    }

    ANSI_BACKGROUNDS = {
        Color.COLOR0: Background.GREEN_BRIGHT,
        Color.COLOR1: Background.RED_BRIGHT,
        Color.COLOR2: Background.WHITE_BRIGHT,
        Color.COLOR3: Background.BLUE_BRIGHT,
        Color.COLOR4: Background.RGB((255, 165, 0)),
        Color.COLOR5: Background.YELLOW_BRIGHT
    }

    @staticmethod
    def solved() -> Cube:
        """ A solved cube has the face's own color at every position """
        return Cube([Face.filled(color) for color in list(Color)])

    @staticmethod
    def from_simple_string(cube_string: str) -> Cube:
        """
        Returns the cube represented by 48 color digits, the rings
        of faces 0 through 5 one after another, each from pos 0 to pos 7.
        """

        if len(cube_string) != FACE_COUNT * RING_SIZE:
            raise InvalidCubeException(
                f"String of invalid length (must be {FACE_COUNT * RING_SIZE}, got {len(cube_string)})"
            )
        if invalid := {*cube_string} - {*Cube.STRING_TO_COLOR.keys()}:
            raise InvalidCubeException(f"Invalid characters in string: {''.join(sorted(invalid))}")

        return Cube([
            Face(Cube.STRING_TO_COLOR[c] for c in cube_string[i:i + RING_SIZE])
            for i in range(0, len(cube_string), RING_SIZE)
        ])

    @classmethod
    def _from_matrix(cls, matrix: np.ndarray) -> Cube:
        """ Takes ownership of a (6, 8) array of color values and freezes it """
        cube = cls.__new__(cls)
        cube._cube = matrix
        cube._cube.flags.writeable = False
        return cube

    def __init__(self, faces: Union[Sequence[Face], Mapping[Color, Face]]):
        if isinstance(faces, Mapping):
            if set(faces.keys()) != set(Color):
                raise InvalidCubeException("A cube needs exactly one face for each of the six colors")
            faces = [faces[color] for color in list(Color)]
        else:
            faces = list(faces)
        if len(faces) != FACE_COUNT:
            raise InvalidCubeException(f"A cube has exactly {FACE_COUNT} faces, got {len(faces)}")
        if not all(isinstance(face, Face) for face in faces):
            raise InvalidCubeException("Every face of a cube must be a Face")

        self._cube = np.stack([face.get_array() for face in faces])
        self._cube.flags.writeable = False

    def __str__(self):
        output = "\n"
        for color, face in self:
            for row in face.grid(color):
                for cell in row:
                    output += Cube.ANSI_BACKGROUNDS[cell] + '  '
                output += f"{Background.RESET_BACKGROUND}\n"
            output += "\n"
        return output

    def __repr__(self) -> str:
        return f"Cube.from_simple_string({self.to_simple_string()!r})"

    def __getitem__(self, color: Color) -> Face:
        return Face._from_array(self._cube[color.value])

    def __iter__(self) -> Iterator[tuple[Color, Face]]:
        for color in list(Color):
            yield color, self[color]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return bool(np.array_equal(self._cube, other._cube))

    def __hash__(self) -> int:
        return hash(self._cube.tobytes())

    def face(self, color: Color) -> Face:
        """ Returns the face with the given color at its center """
        return self[color]

    @property
    def faces(self) -> tuple[Face, ...]:
        return tuple(face for _, face in self)

    def get_matrix(self) -> np.ndarray:
        """ Returns the read-only array of the cube """
        return self._cube

    def to_simple_string(self) -> str:
        """
        Returns the cube as 48 color digits, in the format
        read by Cube.from_simple_string.
        """

        output = ""
        for _, face in self:
            for cell in face:
                output += Cube.COLOR_TO_STRING[cell]
        return output

    def rotate_clockwise(self, pivot: Color, debug: bool = False) -> Cube:
        """ Returns a copy of the cube with the given face turned a quarter clockwise """
        from ringcube.rotation import rotate_clockwise
        return rotate_clockwise(self, pivot, debug)
