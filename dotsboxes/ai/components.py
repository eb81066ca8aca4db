"""Chain and loop detection for Dots and Boxes.

Two decompositions of the box-adjacency graph are provided:

- *hot* components: connected runs of boxes with three filled sides, i.e.
  captures that are available right now;
- *cold* components: connected runs of boxes with two filled sides, i.e.
  the chains and loops that will exist once the safe moves run out.

A third helper, :func:`free_edge_regions`, groups the free edges into the
independent regions the board has been cut into.

Both traversals visit seed boxes in increasing id order so identical boards
always produce identical component lists.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..board import BoardLike
from .edges import count_filled


@dataclass(frozen=True)
class Component:
    """A chain or loop found by traversal.

    Attributes:
        length: Number of boxes visited.
        edge: A playable edge belonging to the component.
        is_loop: True when the traversal found no open end.
        boxes: Visited box ids in traversal order.
        entry_edges: Open boundary edges (cold components only).
    """
    length: int
    edge: int | None
    is_loop: bool
    boxes: tuple[int, ...]
    entry_edges: tuple[int, ...] = ()

    @property
    def kind(self) -> str:
        return "loop" if self.is_loop else "chain"


def _other_box(board: BoardLike, edge: int, box: int) -> int | None:
    adjacent = board.edge_boxes(edge)
    if len(adjacent) < 2:
        return None
    return adjacent[1] if adjacent[0] == box else adjacent[0]


def collect_hot(board: BoardLike) -> list[Component]:
    """Find runs of boxes with exactly three filled sides."""
    components: list[Component] = []
    seen: set[int] = set()

    for seed in range(board.num_boxes):
        if seed in seen or count_filled(board, seed) != 3:
            continue

        boxes: list[int] = []
        representative: int | None = None
        ends = 0
        box: int | None = seed
        while box is not None:
            seen.add(box)
            boxes.append(box)
            empty = next(e for e in board.box_edges(box) if not board.is_filled(e))
            if representative is None:
                representative = empty
            neighbour = _other_box(board, empty, box)
            if (
                neighbour is not None
                and neighbour not in seen
                and count_filled(board, neighbour) == 3
            ):
                box = neighbour
            else:
                ends += 1
                box = None

        components.append(
            Component(
                length=len(boxes),
                edge=representative,
                is_loop=ends == 0,
                boxes=tuple(boxes),
            )
        )
    return components


def collect_cold(board: BoardLike) -> list[Component]:
    """Find runs of boxes with exactly two filled sides.

    Unfilled edges leading to the border or to a box that is not at two
    filled sides are the component's entry edges. A component without
    entry edges is a loop.
    """
    components: list[Component] = []
    seen: set[int] = set()

    for seed in range(board.num_boxes):
        if seed in seen or count_filled(board, seed) != 2:
            continue

        boxes: list[int] = []
        entries: list[int] = []
        entry_set: set[int] = set()
        first_empty: int | None = None
        stack = [seed]
        seen.add(seed)
        while stack:
            box = stack.pop()
            boxes.append(box)
            for edge in board.box_edges(box):
                if board.is_filled(edge):
                    continue
                if first_empty is None:
                    first_empty = edge
                neighbour = _other_box(board, edge, box)
                if neighbour is not None and count_filled(board, neighbour) == 2:
                    if neighbour not in seen:
                        seen.add(neighbour)
                        stack.append(neighbour)
                elif edge not in entry_set:
                    entry_set.add(edge)
                    entries.append(edge)

        is_loop = not entries
        components.append(
            Component(
                length=len(boxes),
                edge=first_empty if is_loop else entries[0],
                is_loop=is_loop,
                boxes=tuple(boxes),
                entry_edges=tuple(entries),
            )
        )
    return components



def free_edge_regions(board: BoardLike) -> list[tuple[int, ...]]:
    """Split the free edges into regions connected through shared boxes.

    Two free edges are in the same region when some box has both of them as
    sides. A board with more than one region has been cut into independent
    games. Regions are returned in order of their lowest edge id, each
    sorted ascending.
    """
    regions: list[tuple[int, ...]] = []
    seen: set[int] = set()
    for seed in board.free_edges():
        if seed in seen:
            continue
        seen.add(seed)
        region: list[int] = []
        stack = [seed]
        while stack:
            edge = stack.pop()
            region.append(edge)
            for box in board.edge_boxes(edge):
                for other in board.box_edges(box):
                    if other not in seen and not board.is_filled(other):
                        seen.add(other)
                        stack.append(other)
        regions.append(tuple(sorted(region)))
    return regions
