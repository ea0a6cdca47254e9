from __future__ import annotations

import numpy as np

from ringcube.cube import Cube
from ringcube.enums import Chirality, Color
from ringcube.utils import debug_print, relative_index, ring_slots

__doc__ = """
Quarter turns of a single face. Turning face i moves its own ring two
slots along and passes a strip of three cells between the four faces
around it, at offsets -2, -1, +1 and +2 from i. The face at +3 is the
opposite one and never changes.

Where the strip sits on each neighbor depends on the chirality of face i.
With face i in the middle and its neighbors folded out around it:

              Right handed                      Left handed

                  i+1                               i+1
            i+2    i    i-1                   i-1    i    i+2
                  i-2                               i-2

Right handed, the strips travel i-1 -> i-2 -> i+2 -> i+1 -> i-1.
Left handed, they travel i-1 -> i+1 -> i+2 -> i-2 -> i-1.
"""

# a quarter turn moves every cell of the turned ring two slots along
RING_TURN = 2

NEIGHBOR_OFFSETS = (-2, -1, 1, 2)
OPPOSITE_OFFSET = 3

# (destination offset, destination slots, source offset, source slots)
# cell n of the source strip lands on cell n of the destination strip
TRANSFERS = {
    Chirality.RIGHT: [
        (-2, ring_slots(6, 7, 8), -1, ring_slots(0, 1, 2)),
        (-1, ring_slots(0, 1, 2), 1, ring_slots(6, 7, 8)),
        (1, ring_slots(6, 7, 8), 2, ring_slots(4, 5, 6)),
        (2, ring_slots(4, 5, 6), -2, ring_slots(6, 7, 8))
    ],
    Chirality.LEFT: [
        (-2, ring_slots(2, 3, 4), 2, ring_slots(4, 5, 6)),
        (-1, ring_slots(0, 1, 2), -2, ring_slots(2, 3, 4)),
        (1, ring_slots(2, 3, 4), -1, ring_slots(0, 1, 2)),
        (2, ring_slots(4, 5, 6), 1, ring_slots(2, 3, 4))
    ]
}

def chirality(color: Color) -> Chirality:
    """ Even faces are right handed, odd faces are left handed """
    return Chirality(color.value % 2)

def neighbors(color: Color) -> dict[int, Color]:
    """ Returns the four faces touching the given one, keyed by offset """
    return {
        offset: Color(relative_index(color.value, offset))
        for offset in NEIGHBOR_OFFSETS
    }

def opposite(color: Color) -> Color:
    return Color(relative_index(color.value, OPPOSITE_OFFSET))

def rotate_clockwise(cube: Cube, pivot: Color, debug: bool = False) -> Cube:
    """
    Returns a copy of the cube where the face with the given center
    color was turned 90 degrees clockwise, looking straight at it.

    On the turned face, top left moves to top right, top middle moves
    to middle right and so on. Every transfer reads from the cube as it
    was before the turn, never from a face already updated.
    """
    i = pivot.value
    old_cube = cube.get_matrix()
    new_cube = old_cube.copy()

    if debug:
        debug_print(f"Turning face {i} ({chirality(pivot).name.lower()} handed)", cube.to_simple_string())

    new_cube[i] = np.roll(old_cube[i], RING_TURN)
    for dest_offset, dest_slots, source_offset, source_slots in TRANSFERS[chirality(pivot)]:
        dest, source = relative_index(i, dest_offset), relative_index(i, source_offset)
        new_cube[dest, dest_slots] = old_cube[source, source_slots]
        if debug:
            debug_print(f"Face {dest} {dest_slots} <- face {source} {source_slots}", new_cube[dest])

    return Cube._from_matrix(new_cube)
