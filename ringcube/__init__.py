__version__ = "0.1.0"
__author__ = "Vivaan Singhvi"

from ringcube.enums import Chirality, Color
from ringcube.face import Face
from ringcube.cube import Cube
from ringcube.rotation import rotate_clockwise
from ringcube.display import ColorScheme, render

solved = Cube.solved
