import pytest

from domain.statistics import sample_lines

LINES = [f"row{i}" for i in range(10)]


def test_seeded_draw_is_reproducible() -> None:
    assert sample_lines(LINES, 4, seed=7) == sample_lines(LINES, 4, seed=7)


def test_without_replacement_picks_distinct_rows() -> None:
    picked = sample_lines(LINES, 10, seed=1)

    assert len(picked) == 10
    assert sorted(picked) == sorted(LINES)


def test_with_replacement_may_exceed_input() -> None:
    picked = sample_lines(LINES[:2], 25, replace=True, seed=3)

    assert len(picked) == 25
    assert set(picked) <= {"row0", "row1"}


@pytest.mark.parametrize(
    ("lines", "size", "replace"),
    [
        (LINES, 0, False),
        (LINES, -2, True),
        ([], 1, True),
        (LINES, 11, False),
    ],
)
def test_invalid_requests(lines, size, replace) -> None:
    with pytest.raises(ValueError):
        sample_lines(lines, size, replace=replace)
