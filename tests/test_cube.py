import numpy as np
import pytest

from ringcube import Color, Cube, Face, solved
from ringcube.error import InvalidCubeException

def test_solved_cube_has_uniform_faces():
    cube = solved()
    for color, face in cube:
        assert list(face) == [color] * 8
    assert cube == Cube.solved()

def test_faces_addressable_by_color():
    cube = Cube.solved()
    for color in Color:
        assert cube[color] == cube.face(color) == Face.filled(color)
    assert cube.faces == tuple(Face.filled(color) for color in Color)

def test_build_from_mapping():
    faces = {color: Face.filled(color) for color in Color}
    assert Cube(faces) == Cube.solved()

def test_mapping_must_cover_every_color():
    faces = {color: Face.filled(color) for color in Color if color != Color.COLOR3}
    with pytest.raises(InvalidCubeException):
        Cube(faces)

@pytest.mark.parametrize("count", [0, 5, 7])
def test_wrong_number_of_faces(count):
    with pytest.raises(InvalidCubeException):
        Cube([Face.filled(Color.COLOR0)] * count)

def test_faces_must_be_faces():
    with pytest.raises(InvalidCubeException):
        Cube([Face.filled(Color.COLOR0)] * 5 + [[Color.COLOR0] * 8])

def test_matrix_is_read_only():
    cube = Cube.solved()
    matrix = cube.get_matrix()
    assert matrix.shape == (6, 8)
    with pytest.raises(ValueError):
        matrix[0, 0] = 1

def test_cube_does_not_share_memory_with_faces():
    face = Face.filled(Color.COLOR2)
    cube = Cube([face] * 6)
    assert not np.shares_memory(cube.get_matrix(), face.get_array())

def test_simple_string():
    assert Cube.solved().to_simple_string() == "".join(str(n) * 8 for n in range(6))
    assert Cube.from_simple_string("".join(str(n) * 8 for n in range(6))) == Cube.solved()

def test_simple_string_round_trip(turned):
    assert Cube.from_simple_string(turned.to_simple_string()) == turned
    assert eval(repr(turned), {"Cube": Cube}) == turned

@pytest.mark.parametrize("cube_string", ["0" * 47, "0" * 49, "0" * 47 + "6", "0" * 47 + "G"])
def test_invalid_simple_string(cube_string):
    with pytest.raises(InvalidCubeException):
        Cube.from_simple_string(cube_string)

def test_hash_follows_content(turned):
    copy = Cube.from_simple_string(turned.to_simple_string())
    assert hash(copy) == hash(turned)
    assert len({copy, turned, Cube.solved()}) == 2

def test_ansi_output_has_every_face():
    output = str(Cube.solved())
    for background in Cube.ANSI_BACKGROUNDS.values():
        assert background in output
    # three rows per face plus a blank line after each
    assert output.count("\n") == 6 * 4 + 1
