import argparse
from typing import Optional

from ringcube.cube import Cube
from ringcube.display import ColorScheme, render
from ringcube.enums import Color
from ringcube.error import InvalidColorSchemeException

def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ringcube", description="turn one face of a solved cube and show the result")
    parser.add_argument("-p", "--pivot", help="the color (0-5) of the face to turn", type=int, choices=range(len(Color)), default=0)
    parser.add_argument("-s", "--scheme", help="one character per color, in color order", type=str, default=ColorScheme.DEFAULT_GLYPHS)
    parser.add_argument("--ansi", help="draw the cube with terminal colors", action="store_true")
    parser.add_argument("-d", "--debug", help="print every strip moved by the turn", action="store_true")
    args = parser.parse_args(argv)

    try:
        args.scheme = ColorScheme.from_string(args.scheme)
    except InvalidColorSchemeException as e:
        parser.error(e.message)
    args.pivot = Color(args.pivot)
    return args

def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    show = str if args.ansi else lambda cube: render(cube, args.scheme)

    start = Cube.solved()
    print("Starting out with a solved cube")
    print(show(start))

    rotated = start.rotate_clockwise(args.pivot, debug=args.debug)
    print(f"Rotated 90 degrees clockwise around '{args.scheme[args.pivot]}'")
    print(show(rotated))

if __name__ == "__main__":
    main()
