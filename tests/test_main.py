import pytest

from ringcube import Color, ColorScheme, Cube, render
from ringcube.__main__ import main, parse_args

def test_defaults():
    args = parse_args([])
    assert args.pivot == Color.COLOR0
    assert args.scheme[Color.COLOR0] == "G"
    assert not args.ansi and not args.debug

def test_prints_before_and_after(capsys):
    main(["-p", "1", "-s", "abcdef"])
    out = capsys.readouterr().out
    scheme = ColorScheme.from_string("abcdef")
    assert out == "\n".join([
        "Starting out with a solved cube",
        render(Cube.solved(), scheme),
        "Rotated 90 degrees clockwise around 'b'",
        render(Cube.solved().rotate_clockwise(Color.COLOR1), scheme),
        ""
    ])

def test_ansi_output(capsys):
    main(["--ansi"])
    out = capsys.readouterr().out
    assert str(Cube.solved()) in out
    assert "Rotated 90 degrees clockwise around 'G'" in out

def test_debug_output(capsys):
    main(["--debug", "--pivot", "2"])
    assert capsys.readouterr().out.count("<- face") == 4

@pytest.mark.parametrize("argv", [["-p", "6"], ["-p", "x"], ["-s", "GGWBOY"], ["-s", "GRW"]])
def test_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit):
        parse_args(argv)
    assert "error" in capsys.readouterr().err
