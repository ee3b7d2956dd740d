"""Village road network.

The village is a fixed set of places joined by two-way roads. Roads are
declared as ``"Place-Place"`` strings and expanded into an adjacency map
where every road is recorded in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple

ROAD_SEPARATOR = "-"

ROADS: Tuple[str, ...] = (
    "Alice's House-Bob's House",
    "Alice's House-Cabin",
    "Alice's House-Post Office",
    "Bob's House-Town Hall",
    "Daria's House-Ernie's House",
    "Daria's House-Town Hall",
    "Ernie's House-Grete's House",
    "Grete's House-Farm",
    "Grete's House-Shop",
    "Marketplace-Farm",
    "Marketplace-Post Office",
    "Marketplace-Shop",
    "Marketplace-Town Hall",
    "Shop-Town Hall",
)


@dataclass(frozen=True)
class RoadGraph:
    """Read-only adjacency map between village places.

    ``adjacency`` is copied into a ``MappingProxyType`` with tuple values, so a
    graph shared between callers cannot be rewired after construction.
    """

    adjacency: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType(
            {place: tuple(neighbors) for place, neighbors in self.adjacency.items()}
        )
        object.__setattr__(self, "adjacency", frozen)

    def __hash__(self) -> int:
        return hash(tuple(self.adjacency.items()))

    def neighbors(self, place: str) -> Tuple[str, ...]:
        return self.adjacency.get(place, ())

    def has_place(self, place: str) -> bool:
        return place in self.adjacency

    def is_adjacent(self, place: str, destination: str) -> bool:
        return destination in self.neighbors(place)

    @property
    def places(self) -> Tuple[str, ...]:
        """Places in the order they were first seen while reading the roads."""
        return tuple(self.adjacency)

    def __getitem__(self, place: str) -> Tuple[str, ...]:
        return self.adjacency[place]

    def __contains__(self, place: object) -> bool:
        return place in self.adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)


def build_graph(roads: Iterable[str] = ROADS) -> RoadGraph:
    """Expand ``roads`` into a symmetric adjacency map.

    Each road contributes both directions. Neighbours keep the order in which
    their roads appear, so the same road list always yields the same graph.
    """

    graph: Dict[str, list[str]] = {}

    def add_edge(origin: str, target: str) -> None:
        # First road touching a place creates its neighbour list.
        graph.setdefault(origin, []).append(target)

    for road in roads:
        origin, target = road.split(ROAD_SEPARATOR)
        add_edge(origin, target)
        add_edge(target, origin)

    return RoadGraph(adjacency=graph)


@lru_cache(maxsize=1)
def road_graph() -> RoadGraph:
    """Return the village graph, built from ``ROADS`` on first use."""
    return build_graph(ROADS)
