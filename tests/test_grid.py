import pytest

from grid import Cell, Grid, OutOfBounds, Status


def test_starts_empty():
    grid = Grid(6, 5)
    rows = grid.rows()
    assert len(rows) == 6
    assert all(len(row) == 5 for row in rows)
    assert all(cell == Cell("", Status.EMPTY) for row in rows for cell in row)


def test_write_and_read_row_text():
    grid = Grid(6, 5)
    for col, ch in enumerate("CRA"):
        grid.write(1, col, ch)
    assert grid.read_row_text(1) == "cra"
    assert grid.read_row_text(0) == ""
    assert not grid.is_row_full(1)


def test_full_row():
    grid = Grid(6, 5)
    for col, ch in enumerate("Trace"):
        grid.write(0, col, ch)
    assert grid.is_row_full(0)
    assert grid.read_row_text(0) == "trace"


def test_clear_keeps_status():
    grid = Grid(6, 5)
    grid.write(0, 0, "A")
    grid.set_status(0, 0, Status.WRONG_PLACE)
    grid.clear(0, 0)
    assert grid.cell(0, 0) == Cell("", Status.WRONG_PLACE)


@pytest.mark.parametrize("row, col", [(6, 0), (0, 5), (-1, 0), (0, -1)])
def test_out_of_bounds(row, col):
    grid = Grid(6, 5)
    with pytest.raises(OutOfBounds):
        grid.write(row, col, "A")
    with pytest.raises(OutOfBounds):
        grid.set_status(row, col, Status.RIGHT_PLACE)
    with pytest.raises(IndexError):
        grid.cell(row, col)


def test_read_row_text_out_of_bounds():
    with pytest.raises(OutOfBounds):
        Grid(6, 5).read_row_text(6)


def test_rows_is_a_copy():
    grid = Grid(2, 2)
    before = grid.rows()
    grid.write(0, 0, "X")
    assert before[0][0].letter == ""
    assert grid.rows()[0][0].letter == "X"


def test_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        Grid(0, 5)
