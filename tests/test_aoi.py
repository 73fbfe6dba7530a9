import pytest

from zinx.mmo.aoi import AOIManager


@pytest.fixture
def square() -> AOIManager:
    return AOIManager(0, 250, 5, 0, 250, 5)


def test_new_aoi_manager():
    mgr = AOIManager(100, 300, 4, 200, 450, 5)
    assert mgr.grid_width() == 50
    assert mgr.grid_length() == 50
    assert mgr.gids() == list(range(20))
    text = str(mgr)
    assert "minX:100, maxX:300, cntsX:4, minY:200, maxY:450, cntsY:5" in text
    first = mgr.grid(0)
    assert (first.min_x, first.max_x, first.min_y, first.max_y) == (100, 150, 200, 250)
    last = mgr.grid(19)
    assert (last.min_x, last.max_x, last.min_y, last.max_y) == (250, 300, 400, 450)


def test_surround_grid_counts(square):
    for gid in square.gids():
        grids = square.get_surround_grids_by_gid(gid)
        x, y = gid % 5, gid // 5
        on_x_edge = x in (0, 4)
        on_y_edge = y in (0, 4)
        expected = 9
        if on_x_edge and on_y_edge:
            expected = 4
        elif on_x_edge or on_y_edge:
            expected = 6
        assert len(grids) == expected
        assert grids[0].gid == gid
        assert len({g.gid for g in grids}) == len(grids)


def test_surround_grids_of_corner_in_order(square):
    assert [g.gid for g in square.get_surround_grids_by_gid(0)] == [0, 5, 1, 6]


def test_surround_grids_of_centre(square):
    gids = [g.gid for g in square.get_surround_grids_by_gid(12)]
    assert gids == [12, 6, 11, 16, 7, 17, 8, 13, 18]


def test_surround_grids_of_unknown_gid(square):
    assert square.get_surround_grids_by_gid(25) == []
    assert square.get_surround_grids_by_gid(-1) == []


def test_gid_by_pos(square):
    assert square.get_gid_by_pos(0, 0) == 0
    assert square.get_gid_by_pos(60.7, 110.2) == 11
    assert square.get_gid_by_pos(249.9, 249.9) == 24


def test_gid_by_pos_lies_in_its_grid(square):
    for x, y in [(10, 10), (75.5, 199), (120, 30), (230, 240)]:
        grid = square.grid(square.get_gid_by_pos(x, y))
        assert grid.min_x <= x < grid.max_x
        assert grid.min_y <= y < grid.max_y


def test_add_and_remove_by_pos(square):
    square.add_to_grid_by_pos(1, 60, 110)
    assert square.get_pids_by_gid(11) == [1]
    square.remove_from_grid_by_pos(1, 60, 110)
    assert square.get_pids_by_gid(11) == []


def test_add_and_remove_by_gid(square):
    square.add_pid_to_grid(4, 3)
    assert square.get_pids_by_gid(3) == [4]
    square.remove_pid_from_grid(4, 3)
    assert square.get_pids_by_gid(3) == []


def test_pids_by_pos_sees_neighbours_only(square):
    square.add_pid_to_grid(1, 12)
    square.add_pid_to_grid(2, 6)
    square.add_pid_to_grid(3, 0)
    x = square.grid(12).min_x + 1
    y = square.grid(12).min_y + 1
    assert sorted(square.get_pids_by_pos(x, y)) == [1, 2]


def test_unknown_gid_raises(square):
    with pytest.raises(KeyError):
        square.grid(100)
    with pytest.raises(KeyError):
        square.get_pids_by_gid(100)
    with pytest.raises(KeyError):
        square.add_pid_to_grid(1, 100)