"""The set of online players and their place on the map."""

from __future__ import annotations

import threading
from typing import Optional, Protocol

from zinx.mmo.aoi import (
    AOI_CNTS_X,
    AOI_CNTS_Y,
    AOI_MAX_X,
    AOI_MAX_Y,
    AOI_MIN_X,
    AOI_MIN_Y,
    AOIManager,
)


class PlayerLike(Protocol):
    """What the world needs from a player: an id and a planar position."""

    pid: int
    x: float
    z: float


class WorldManager:
    """Tracks online players by id and places them on the AOI grid."""

    def __init__(self, aoi_manager: Optional[AOIManager] = None):
        if aoi_manager is None:
            aoi_manager = AOIManager(
                AOI_MIN_X, AOI_MAX_X, AOI_CNTS_X, AOI_MIN_Y, AOI_MAX_Y, AOI_CNTS_Y
            )
        self.aoi_manager = aoi_manager
        self._players: dict[int, PlayerLike] = {}
        self._lock = threading.RLock()

    def add_player(self, player: PlayerLike) -> None:
        """Register a player and put it into the cell at its position."""
        with self._lock:
            self._players[player.pid] = player
        self.aoi_manager.add_to_grid_by_pos(player.pid, player.x, player.z)

    def remove_player_by_pid(self, pid: int) -> None:
        """Forget a player; its grid placement is left to the caller."""
        with self._lock:
            self._players.pop(pid, None)

    def get_player_by_pid(self, pid: int) -> Optional[PlayerLike]:
        with self._lock:
            return self._players.get(pid)

    def get_all_players(self) -> list[PlayerLike]:
        with self._lock:
            return list(self._players.values())

    def get_players_by_gid(self, gid: int) -> list[Optional[PlayerLike]]:
        """Players in cell ``gid``; an id not registered here yields ``None``."""
        pids = self.aoi_manager.grid(gid).player_ids()
        with self._lock:
            return [self._players.get(pid) for pid in pids]