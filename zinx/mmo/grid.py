"""A rectangular cell of the game map and the players standing in it."""

from __future__ import annotations

import threading


class Grid:
    """One cell of the map, tracking the ids of the players inside it."""

    def __init__(self, gid: int, min_x: int, max_x: int, min_y: int, max_y: int):
        self.gid = gid
        self.min_x = min_x
        self.max_x = max_x
        self.min_y = min_y
        self.max_y = max_y
        # A dict keeps insertion order and gives set semantics.
        self._player_ids: dict[int, None] = {}
        self._lock = threading.RLock()

    def add(self, player_id: int) -> None:
        """Put a player into this cell."""
        with self._lock:
            self._player_ids[player_id] = None

    def remove(self, player_id: int) -> None:
        """Take a player out of this cell; unknown ids are ignored."""
        with self._lock:
            self._player_ids.pop(player_id, None)

    def player_ids(self) -> list[int]:
        """Ids of all players currently in this cell."""
        with self._lock:
            return list(self._player_ids)

    def __str__(self) -> str:
        return (
            f"Grid ID: {self.gid}, minX:{self.min_x}, maxX:{self.max_x}, "
            f"minY:{self.min_y}, maxY:{self.max_y}, playerIDs:{self.player_ids()}"
        )