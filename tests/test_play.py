import argparse
import io

import pytest

import play
from sweeper.engine import CoordinateOrder


@pytest.mark.parametrize("text,expected", [
    ("ff", 255),
    ("0x1F", 31),
    ("0", 0),
])
def test_hex_seed(text, expected):
    assert play.hex_seed(text) == expected


@pytest.mark.parametrize("text", ["zz", "-1", "1" + "0" * 16])
def test_hex_seed_rejects(text):
    with pytest.raises(argparse.ArgumentTypeError):
        play.hex_seed(text)


def test_defaults():
    args, _ = play.build_parser().parse_known_args([])
    assert (args.width, args.height, args.mines) == (20, 20, 70)
    assert args.seed is None
    assert not args.cartesian


def test_flags_and_unknown_flags_ignored():
    parser = play.build_parser()
    args, unknown = parser.parse_known_args(["--width=5", "--bogus", "--cartesian", "--seed=abc", "--mines=3"])
    assert args.width == 5
    assert args.cartesian
    assert args.seed == 0xabc
    assert unknown == ["--bogus"]
    board = play.make_board(args, parser)
    assert board.order is CoordinateOrder.COLUMN_FIRST
    assert board.seed == 0xabc
    assert (board.width, board.height, board.num_mines) == (5, 20, 3)


def test_too_many_mines_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        play.main(["--width=2", "--height=2", "--mines=4"])
    assert excinfo.value.code == 2


def test_main_plays_until_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("r 0 0\nq\n"))
    assert play.main(["--width=4", "--height=4", "--mines=2", "--seed=1"]) == 0
    assert "Seed: 1" in capsys.readouterr().out


def test_abbreviated_flags_are_ignored():
    args, unknown = play.build_parser().parse_known_args(["--cart", "--w=5", "--he=3"])
    assert unknown == ["--cart", "--w=5", "--he=3"]
    assert (args.width, args.height) == (20, 20)
    assert not args.cartesian
