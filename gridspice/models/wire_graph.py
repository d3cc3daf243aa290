"""
WireGraph - Adjacency of grid-aligned wire points.

This module contains no Qt dependencies. Positions are looked up by
GridPosition, but the adjacency itself lives in an index arena so the
node grouping engine can walk compact integer slots instead of hashing
coordinates on every step.
"""

import logging
from typing import Iterable, Iterator, Optional

from .grid import GridPosition

logger = logging.getLogger(__name__)


class WireGraph:
    """
    Undirected graph of wire points keyed by GridPosition.

    Edges are stored symmetrically: if A lists B then B lists A.
    Neighbor lists keep insertion order and never contain duplicates
    or self-loops.
    """

    def __init__(self):
        # GridPosition -> slot index
        self._index: dict[GridPosition, int] = {}
        # slot index -> GridPosition (None for a freed slot)
        self._positions: list[Optional[GridPosition]] = []
        # slot index -> neighbor slot indices
        self._adjacency: list[list[int]] = []
        # freed slots available for reuse
        self._free_slots: list[int] = []

    # --- Arena ---

    def add_position(self, position: GridPosition) -> int:
        """Insert a position without neighbors if missing; return its slot index."""
        index = self._index.get(position)
        if index is not None:
            return index

        if self._free_slots:
            index = self._free_slots.pop()
            self._positions[index] = position
            self._adjacency[index] = []
        else:
            index = len(self._positions)
            self._positions.append(position)
            self._adjacency.append([])

        self._index[position] = index
        return index

    def index_of(self, position: GridPosition) -> Optional[int]:
        """Return the slot index of a position, or None if absent."""
        return self._index.get(position)

    def position_at(self, index: int) -> GridPosition:
        """Return the position stored in a live slot."""
        position = self._positions[index]
        if position is None:
            raise KeyError(f"Slot {index} is not in use")
        return position

    def adjacency_indices(self) -> list[list[int]]:
        """
        Slot-indexed view of the adjacency lists.

        Freed slots hold empty lists. The returned lists are the graph's
        own storage and must be treated as read-only.
        """
        return self._adjacency

    def slot_count(self) -> int:
        """Number of slots in the arena, including freed ones."""
        return len(self._positions)

    # --- Edges ---

    def link(self, a: GridPosition, b: GridPosition) -> bool:
        """
        Link two positions as mutual neighbors.

        Missing positions are inserted. Self-loops and already present
        edges are ignored.

        Returns:
            True if a new edge was added.
        """
        if a == b:
            self.add_position(a)
            return False

        index_a = self.add_position(a)
        index_b = self.add_position(b)

        added = False
        if index_b not in self._adjacency[index_a]:
            self._adjacency[index_a].append(index_b)
            added = True
        if index_a not in self._adjacency[index_b]:
            self._adjacency[index_b].append(index_a)
            added = True
        return added

    def neighbors(self, position: GridPosition) -> list[GridPosition]:
        """Return the neighbors of a position in insertion order (empty if absent)."""
        index = self._index.get(position)
        if index is None:
            return []
        return [self._positions[n] for n in self._adjacency[index]]

    def is_linked(self, a: GridPosition, b: GridPosition) -> bool:
        index_a = self._index.get(a)
        index_b = self._index.get(b)
        if index_a is None or index_b is None:
            return False
        return index_b in self._adjacency[index_a]

    # --- Removal ---

    def remove_positions(self, positions: Iterable[GridPosition]) -> int:
        """
        Remove positions and every edge touching them.

        Positions not in the graph are ignored.

        Returns:
            Number of positions removed.
        """
        removed = set()
        for position in positions:
            index = self._index.pop(position, None)
            if index is not None:
                removed.add(index)

        if not removed:
            return 0

        # Unlink surviving neighbors so adjacency stays symmetric
        for index in removed:
            for neighbor in self._adjacency[index]:
                if neighbor not in removed:
                    self._adjacency[neighbor].remove(index)

        for index in removed:
            self._positions[index] = None
            self._adjacency[index] = []
            self._free_slots.append(index)

        logger.debug("Removed %d wire points", len(removed))
        return len(removed)

    def clear(self) -> None:
        """Remove every position."""
        self._index.clear()
        self._positions.clear()
        self._adjacency.clear()
        self._free_slots.clear()

    # --- Views ---

    def to_dict(self) -> dict[GridPosition, list[GridPosition]]:
        """Return a position -> neighbor list mapping."""
        return {position: self.neighbors(position) for position in self._index}

    def copy(self) -> "WireGraph":
        """Return an independent copy sharing no mutable state."""
        graph = WireGraph()
        graph._index = dict(self._index)
        graph._positions = list(self._positions)
        graph._adjacency = [list(neighbors) for neighbors in self._adjacency]
        graph._free_slots = list(self._free_slots)
        return graph

    def __contains__(self, position: object) -> bool:
        return position in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[GridPosition]:
        return iter(list(self._index))

    def __repr__(self) -> str:
        edges = sum(len(n) for n in self._adjacency) // 2
        return f"WireGraph(points={len(self._index)}, edges={edges})"
