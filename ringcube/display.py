from __future__ import annotations
from typing import Mapping, Optional, TYPE_CHECKING

from ringcube.enums import Color
from ringcube.error import InvalidColorSchemeException

if TYPE_CHECKING:
    from ringcube.cube import Cube
    from ringcube.face import Face

FACE_BORDER = " " + "-" * 13
FACE_SPACER = "|" + " " * 13 + "|"

class ColorScheme():
    """
    Maps the colors to the characters they are drawn with,
    e.g. COLOR0 = 'G' draws the first color as green.
    Every color needs its own character.
    """

    DEFAULT_GLYPHS = "GRWBOY"

    @staticmethod
    def default() -> ColorScheme:
        """ Green, red, white, blue, orange, yellow """
        return ColorScheme.from_string(ColorScheme.DEFAULT_GLYPHS)

    @staticmethod
    def from_string(glyphs: str) -> ColorScheme:
        """ Reads one character per color, in color order """
        if len(glyphs) != len(Color):
            raise InvalidColorSchemeException(f"Expected {len(Color)} characters, got {len(glyphs)}")
        return ColorScheme(dict(zip(list(Color), glyphs)))

    def __init__(self, glyphs: Mapping[Color, str]):
        if missing := [color.name for color in list(Color) if color not in glyphs]:
            raise InvalidColorSchemeException(f"No character given for {', '.join(missing)}")
        if len(glyphs) != len(Color):
            raise InvalidColorSchemeException("Color schemes can only map the six colors")
        if not all(isinstance(glyph, str) and len(glyph) == 1 for glyph in glyphs.values()):
            raise InvalidColorSchemeException("Every color must map to a single character")
        if len(set(glyphs.values())) != len(Color):
            raise InvalidColorSchemeException("Two colors cannot share a character")
        self._glyphs = {color: glyphs[color] for color in list(Color)}

    def __getitem__(self, color: Color) -> str:
        return self._glyphs[color]

    def __repr__(self) -> str:
        return f"ColorScheme.from_string({''.join(self._glyphs.values())!r})"

def render_face(face: Face, face_color: Color, scheme: ColorScheme) -> str:
    """
    Draws a single face, its own color in the middle:

     -------------
    |0     1     2|
    |             |
    |7     c     3|
    |             |
    |6     5     4|
     -------------
    """
    lines = [FACE_BORDER]
    for n, row in enumerate(face.grid(face_color)):
        if n:
            lines.append(FACE_SPACER)
        lines.append("|" + "     ".join(scheme[cell] for cell in row) + "|")
    lines.append(FACE_BORDER)
    return "\n".join(lines)

def render(cube: Cube, scheme: Optional[ColorScheme] = None) -> str:
    """ Renders the cube as text, with face 0 at the top and face 5 at the bottom. """
    if scheme is None:
        scheme = ColorScheme.default()
    return "\n\n".join(render_face(face, color, scheme) for color, face in cube)
