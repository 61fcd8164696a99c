import pytest

from algobox.grid import GridMap, flood_fill

SCREEN = [
    "YYYGGGGGGG",
    "YYYYYYGXXX",
    "GGGGGGGXXX",
    "WWWWWGGGGX",
    "WRRRRRGXXX",
    "WWWRRGGXXX",
    "WBWRRRRRRX",
    "WBBBBRRXXX",
    "WBBXBBBBXX",
    "WBBXXXXXXX",
]


def _neighbours(grid, r, c):
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            nr, nc = r + dr, c + dc
            if (dr or dc) and 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]):
                yield nr, nc


def test_flood_fill_screen_region():
    filled = flood_fill(SCREEN, 3, 9, "C")
    assert filled[3][9] == "C"
    for r, line in enumerate(SCREEN):
        for c, before in enumerate(line):
            after = filled[r][c]
            if after != before:
                assert before == "X" and after == "C"
            if after == "X":
                assert all(filled[nr][nc] != "C" for nr, nc in _neighbours(filled, r, c))


def test_flood_fill_leaves_input_unchanged():
    grid = [list(line) for line in SCREEN]
    flood_fill(grid, 0, 0, "Z")
    assert ["".join(line) for line in grid] == SCREEN


def test_flood_fill_uniform_grid():
    assert flood_fill(["aaa", "aaa"], 1, 1, "b") == [list("bbb"), list("bbb")]


def test_flood_fill_diagonal_connection():
    filled = flood_fill(["xo", "ox"], 0, 0, "y")
    assert filled[1][1] == "y"
    assert filled[0][1] == "o"


def test_flood_fill_same_colour():
    assert flood_fill(SCREEN, 0, 0, "Y") == [list(line) for line in SCREEN]


def test_flood_fill_outside_grid():
    with pytest.raises(IndexError):
        flood_fill(SCREEN, 10, 0, "C")


def test_grid_map_set_and_get():
    grid = GridMap(3, 4)
    grid.set(2, 3, 7)
    assert grid.get(2, 3) == 7
    assert grid.get(1, 1) == 0


@pytest.mark.parametrize("row, col", [(0, 1), (1, 0), (4, 1), (1, 5)])
def test_grid_map_bounds(row, col):
    grid = GridMap(3, 4)
    with pytest.raises(IndexError):
        grid.get(row, col)
    with pytest.raises(IndexError):
        grid.set(row, col, 1)


def test_grid_map_components():
    grid = GridMap(4, 5)
    open_cells = {(1, 1), (1, 2), (2, 2), (3, 4), (4, 4), (4, 5), (2, 3)}
    for r, c in open_cells:
        grid.set(r, c, 1)
    regions = grid.components()
    assert set().union(*regions) == open_cells
    assert sum(len(region) for region in regions) == len(open_cells)
    assert len(regions) == 2
    assert (1, 1) in regions[0]


def test_grid_map_diagonal_cells_are_separate():
    grid = GridMap(2, 2)
    grid.set(1, 1, 1)
    grid.set(2, 2, 1)
    assert grid.components() == [{(1, 1)}, {(2, 2)}]


def test_grid_map_rejects_negative_size():
    with pytest.raises(ValueError):
        GridMap(-1, 2)