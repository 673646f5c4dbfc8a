"""Tests for the command-line entry point."""

import pytest

from drag_many import build_scene, parse_args


@pytest.mark.parametrize("argv", [[], ["5", "6"]])
def test_wrong_argument_count_exits_with_usage(argv, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "usage:" in err


@pytest.mark.parametrize("value", ["abc", "1_000", " 7 ", "\u0665", "5.0", "0x10"])
def test_non_integer_count_names_the_input(value, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_args([value])
    assert exc.value.code == 1
    assert repr(value) in capsys.readouterr().err


@pytest.mark.parametrize("value", ["0", "-3"])
def test_non_positive_count_is_rejected(value, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_args([value])
    assert exc.value.code == 1
    assert "positive" in capsys.readouterr().err


def test_valid_count_builds_that_many_shapes(capsys) -> None:
    args = parse_args(["5"])
    assert args.count == 5
    assert args.seed is None
    scene = build_scene(args)
    assert len(scene) == 5
    assert "Generated 5 shapes" in capsys.readouterr().out


def test_seed_makes_layout_reproducible() -> None:
    a = build_scene(parse_args(["8", "--seed", "7"]))
    b = build_scene(parse_args(["8", "--seed", "7"]))
    assert [s.anchor for s in a] == [s.anchor for s in b]


def test_signed_decimal_count_is_accepted() -> None:
    assert parse_args(["+5"]).count == 5
