"""
Node grouping - partition of the wire graph into electrical nodes.

This module contains no Qt dependencies. Grouping is recomputed from
scratch after every topology edit: a multi-seed breadth-first scan that
starts from the wire anchors. That is O(V + E) per call, fine at
interactive scale; an incremental union-find could replace it if
schematics grow large.
"""

import logging
from collections import deque
from typing import Sequence

from .grid import GridPosition
from .wire_graph import WireGraph

logger = logging.getLogger(__name__)


def group_wires_into_nodes(graph: WireGraph,
                           anchors: Sequence[GridPosition]) -> list[frozenset[GridPosition]]:
    """
    Split the wire graph into connected node groups.

    Seeds are taken from a working copy of the anchor list, last anchor
    first. Every anchor reached while traversing is consumed so it does
    not start a second group. Positions no anchor reaches (a wire whose
    anchors went away with a deleted element) are then seeded in slot
    order, so the groups always cover the whole graph.

    Args:
        graph: The wire graph to scan. Not modified.
        anchors: Wire end points used as traversal seeds. Not modified.

    Returns:
        Node groups in discovery order.
    """
    adjacency = graph.adjacency_indices()
    visited = [False] * graph.slot_count()

    # Anchor slots, duplicates and stale anchors dropped, order kept
    pending: list[int] = []
    seen: set[int] = set()
    for anchor in anchors:
        index = graph.index_of(anchor)
        if index is None:
            logger.debug("Anchor %s is not on any wire; skipped", anchor)
            continue
        if index not in seen:
            seen.add(index)
            pending.append(index)

    groups: list[frozenset[GridPosition]] = []

    def collect(seed: int) -> None:
        visited[seed] = True
        queue = deque([seed])
        members = [seed]
        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if visited[neighbor]:
                    continue
                visited[neighbor] = True
                members.append(neighbor)
                queue.append(neighbor)
        groups.append(frozenset(graph.position_at(i) for i in members))

    while pending:
        seed = pending.pop()
        if not visited[seed]:
            collect(seed)

    for seed in sorted(graph.index_of(p) for p in graph):
        if not visited[seed]:
            logger.debug("Wire point %s has no anchor; seeding from it", graph.position_at(seed))
            collect(seed)

    logger.debug("Grouped %d wire points into %d nodes", len(graph), len(groups))
    return groups
