from __future__ import annotations
from enum import Enum

class Color(Enum):
    """
    Enums for colors. Abstractly all that matters is that there are six
    distinct ones; glyphs or terminal colors are assigned when displaying.
    The value doubles as the index of the face whose center has this color,
    so these numbers must stay as they are.
    """
    COLOR0 = 0
    COLOR1 = 1
    COLOR2 = 2
    COLOR3 = 3
    COLOR4 = 4
    COLOR5 = 5

    def __lt__(self, other: Color):
        return self.value < other.value

class Chirality(Enum):
    """
    Handedness of a face. Walking across the faces (leaving each at pos 1),
    right handed faces are entered at pos 3 and left handed ones at pos 7.
    Even indexed faces are right handed.
    """
    RIGHT = 0
    LEFT = 1

# the total number of colors is baked into the modular arithmetic
assert len(Color) == 6
