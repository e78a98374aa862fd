"""Bottle and puzzle rule tests."""

from __future__ import annotations

import pytest

from liquidsort.engine.gamerandom import SeededRandom
from liquidsort.models.puzzle import Bottle, PourRejection, Puzzle, TopInfo

E = None
R, B, Y = "red", "blue", "yellow"


def _mixed() -> Puzzle:
    return Puzzle.from_layers([[R, B, R, B], [B, R, B, R], [E, E, E, E]])


# -- bottles ------------------------------------------------------------------


def test_bottle_requires_four_slots() -> None:
    with pytest.raises(ValueError):
        Bottle(id="short", layers=(R, R, R))


@pytest.mark.parametrize(
    ("layers", "expected"),
    [
        ((R, B, B, E), TopInfo(color=B, count=2, top_index=2)),
        ((B, B, B, B), TopInfo(color=B, count=4, top_index=3)),
        ((R, B, R, B), TopInfo(color=B, count=1, top_index=3)),
        ((Y, E, E, E), TopInfo(color=Y, count=1, top_index=0)),
        ((E, E, E, E), None),
    ],
)
def test_top_info(layers, expected) -> None:
    assert Bottle(id="b", layers=layers).top_info() == expected


def test_empty_count() -> None:
    assert Bottle(id="b", layers=(R, B, E, E)).empty_count() == 2
    assert Bottle.empty("b").empty_count() == 4


@pytest.mark.parametrize(
    ("layers", "complete"),
    [
        ((R, R, R, R), True),
        ((R, R, R, E), False),
        ((R, E, E, E), False),
        ((R, R, R, B), False),
        ((E, E, E, E), False),
    ],
)
def test_bottle_complete(layers, complete: bool) -> None:
    assert Bottle(id="b", layers=layers).is_complete() is complete


# -- win check ----------------------------------------------------------------


def test_sorted_puzzle_is_solved() -> None:
    puzzle = Puzzle.from_layers([[R] * 4, [B] * 4, [E] * 4])
    assert puzzle.is_solved()


@pytest.mark.parametrize("partial", [[R, E, E, E], [R, R, E, E], [R, R, R, E]])
def test_partially_filled_bottle_is_not_solved(partial) -> None:
    puzzle = Puzzle.from_layers([partial, [B] * 4, [E] * 4])
    assert not puzzle.is_solved()


def test_mixed_puzzle_is_not_solved() -> None:
    assert not _mixed().is_solved()


# -- pouring ------------------------------------------------------------------


def test_pour_single_top_layer_into_empty_bottle() -> None:
    puzzle = _mixed()
    result = puzzle.pour(0, 2)

    assert result is not None
    assert result[0].layers == (R, B, R, E)
    assert result[2].layers == (B, E, E, E)
    assert result[1] is puzzle[1]
    assert puzzle[0].layers == (R, B, R, B)


def test_pour_is_limited_by_free_space() -> None:
    puzzle = Puzzle.from_layers([[B, R, R, R], [R, R, E, E], [B, B, B, E]])
    result = puzzle.pour(0, 1)

    assert result is not None
    assert result[0].layers == (B, R, E, E)
    assert result[1].layers == (R, R, R, R)
    assert puzzle.pour_amount(0, 1) == 2


@pytest.mark.parametrize(
    ("rows", "source", "target", "reason"),
    [
        ([[R, B, R, B], [B, R, B, R], [E] * 4], 0, 0, PourRejection.SAME_BOTTLE),
        ([[R, B, R, B], [B, R, B, R], [E] * 4], 2, 0, PourRejection.EMPTY_SOURCE),
        ([[R, B, R, B], [B, R, B, R], [E] * 4], 0, 1, PourRejection.FULL),
        ([[R, B, E, E], [B, R, E, E], [R, B, R, B]], 0, 1, PourRejection.COLOR_MISMATCH),
        ([[R, R, E, E], [E] * 4, [B, B, B, B]], 0, 1, PourRejection.NO_OP),
        ([[R] * 4, [B] * 4, [E] * 4], 0, 2, PourRejection.NO_OP),
    ],
)
def test_rejected_pours(rows, source: int, target: int, reason: PourRejection) -> None:
    puzzle = Puzzle.from_layers(rows)
    assert puzzle.check_pour(source, target) == reason
    assert not puzzle.can_pour(source, target)
    assert puzzle.pour(source, target) is None


def test_mixed_bottle_may_pour_into_empty_bottle() -> None:
    puzzle = Puzzle.from_layers([[B, R, E, E], [E] * 4, [R, R, B, B], [B, E, E, E]])
    result = puzzle.pour(0, 1)
    assert result is not None
    assert result[1].layers == (R, E, E, E)


def test_can_pour_agrees_with_pour() -> None:
    puzzle = Puzzle.from_layers(
        [[R, B, Y, R], [B, B, E, E], [Y, Y, R, E], [E] * 4, [Y, R, B, E]]
    )
    for i in range(len(puzzle)):
        for j in range(len(puzzle)):
            assert puzzle.can_pour(i, j) == (puzzle.pour(i, j) is not None)


def test_colors_are_conserved_across_pours() -> None:
    puzzle = Puzzle.from_layers(
        [[R, B, Y, R], [B, Y, R, B], [Y, R, B, Y], [E] * 4, [E] * 4]
    )
    counts = puzzle.color_counts()
    rng = SeededRandom(3)

    for _ in range(40):
        moves = puzzle.legal_moves()
        if not moves:
            break
        move = rng.choice(moves)
        result = puzzle.pour(move.source, move.target)
        assert result is not None
        puzzle = result
        assert puzzle.color_counts() == counts


# -- state keys ---------------------------------------------------------------


def test_state_key_ignores_bottle_order() -> None:
    rows = [[R, B, R, B], [B, R, B, R], [E] * 4]
    assert Puzzle.from_layers(rows).state_key() == Puzzle.from_layers(rows[::-1]).state_key()


def test_state_key_distinguishes_contents() -> None:
    a = Puzzle.from_layers([[R, B, R, B], [B, R, B, R], [E] * 4])
    b = Puzzle.from_layers([[R, B, R, E], [B, R, B, R], [B, E, E, E]])
    assert a.state_key() != b.state_key()
    assert hash(a.state_key()) == hash(_mixed().state_key())


def test_index_of_and_sequential_ids() -> None:
    puzzle = Puzzle(
        (Bottle(id="x", layers=(R,) * 4), Bottle.empty("y"))
    ).with_sequential_ids()
    assert [b.id for b in puzzle] == ["bottle-0", "bottle-1"]
    assert puzzle.index_of("bottle-1") == 1
    assert puzzle.index_of("x") is None
