"""Area-of-interest management: a map split into a grid of cells."""

from __future__ import annotations

from zinx.mmo.grid import Grid

AOI_MIN_X = 85
AOI_MAX_X = 410
AOI_CNTS_X = 10
AOI_MIN_Y = 75
AOI_MAX_Y = 400
AOI_CNTS_Y = 20

# Neighbour offsets in the order they are visited.
_NEIGHBOURS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class AOIManager:
    """A rectangular area divided into ``cnts_x`` by ``cnts_y`` cells.

    Cell ``gid`` lies at column ``gid % cnts_x`` and row ``gid // cnts_x``.
    """

    def __init__(self, min_x: int, max_x: int, cnts_x: int, min_y: int, max_y: int, cnts_y: int):
        self.min_x = min_x
        self.max_x = max_x
        self.cnts_x = cnts_x
        self.min_y = min_y
        self.max_y = max_y
        self.cnts_y = cnts_y
        width = self.grid_width()
        length = self.grid_length()
        self._grids: dict[int, Grid] = {}
        for y in range(cnts_y):
            for x in range(cnts_x):
                gid = y * cnts_x + x
                self._grids[gid] = Grid(
                    gid,
                    min_x + x * width,
                    min_x + (x + 1) * width,
                    min_y + y * length,
                    min_y + (y + 1) * length,
                )

    def grid_width(self) -> int:
        """Width of each cell along the x axis."""
        return _trunc_div(self.max_x - self.min_x, self.cnts_x)

    def grid_length(self) -> int:
        """Length of each cell along the y axis."""
        return _trunc_div(self.max_y - self.min_y, self.cnts_y)

    def grid(self, gid: int) -> Grid:
        """The cell with id ``gid``; raises ``KeyError`` if there is none."""
        return self._grids[gid]

    def gids(self) -> list[int]:
        """Ids of all cells, in ascending order."""
        return sorted(self._grids)

    def __str__(self) -> str:
        lines = [
            "AOIManager:",
            f"minX:{self.min_x}, maxX:{self.max_x}, cntsX:{self.cnts_x}, "
            f"minY:{self.min_y}, maxY:{self.max_y}, cntsY:{self.cnts_y}",
            " Grids in AOI Manager:",
        ]
        lines.extend(str(grid) for grid in self._grids.values())
        return "\n".join(lines) + "\n"

    def get_surround_grids_by_gid(self, gid: int) -> list[Grid]:
        """The cell ``gid`` followed by its in-bounds neighbours.

        An unknown ``gid`` yields an empty list.
        """
        if gid not in self._grids:
            return []
        x, y = gid % self.cnts_x, gid // self.cnts_x
        grids = [self._grids[gid]]
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.cnts_x and 0 <= ny < self.cnts_y:
                grids.append(self._grids[ny * self.cnts_x + nx])
        return grids

    def get_gid_by_pos(self, x: float, y: float) -> int:
        """Id of the cell containing the point ``(x, y)``."""
        gx = _trunc_div(int(x) - self.min_x, self.grid_width())
        gy = _trunc_div(int(y) - self.min_y, self.grid_length())
        return gy * self.cnts_x + gx

    def get_pids_by_pos(self, x: float, y: float) -> list[int]:
        """Ids of all players in the cells around the point ``(x, y)``."""
        gid = self.get_gid_by_pos(x, y)
        return [pid for grid in self.get_surround_grids_by_gid(gid) for pid in grid.player_ids()]

    def get_pids_by_gid(self, gid: int) -> list[int]:
        """Ids of the players in cell ``gid``."""
        return self._grids[gid].player_ids()

    def remove_pid_from_grid(self, pid: int, gid: int) -> None:
        self._grids[gid].remove(pid)

    def add_pid_to_grid(self, pid: int, gid: int) -> None:
        self._grids[gid].add(pid)

    def add_to_grid_by_pos(self, pid: int, x: float, y: float) -> None:
        """Put a player into the cell containing ``(x, y)``."""
        self._grids[self.get_gid_by_pos(x, y)].add(pid)

    def remove_from_grid_by_pos(self, pid: int, x: float, y: float) -> None:
        """Take a player out of the cell containing ``(x, y)``."""
        self._grids[self.get_gid_by_pos(x, y)].remove(pid)