"""
Transition rules for the village simulation.

A move is a pure function of the current state, the requested destination
and the road graph:

- Destinations that are not directly connected to the robot's place (including
  places the graph has never heard of) are ignored and the same state is
  returned.
- Otherwise parcels lying at the robot's place travel with it, parcels that
  reach their address are dropped from the set, and a new state at the
  destination is returned.

Deciding where to go is left to the caller.
"""

from __future__ import annotations

from typing import Optional

from robot_village.config import Config
from robot_village.logging_utils import log_delivery, log_ignored_move, log_move
from robot_village.roads import RoadGraph, road_graph
from robot_village.schemas import Parcel, VillageState


def is_valid_move(graph: RoadGraph, place: str, destination: str) -> bool:
    """Check whether a road leads directly from ``place`` to ``destination``.

    Unknown places have no neighbours, so they are never a valid origin or
    destination.
    """
    return graph.is_adjacent(place, destination)


def move(
    state: VillageState,
    destination: str,
    graph: Optional[RoadGraph] = None,
) -> VillageState:
    """Compute the state after the robot drives to ``destination``.

    Args:
        state: Current village state. Never modified.
        destination: Place the robot should drive to.
        graph: Road graph to consult. Defaults to the cached village graph.

    Returns:
        ``state`` itself if no road connects the two places, otherwise a new
        ``VillageState`` located at ``destination``.
    """
    graph = graph if graph is not None else road_graph()

    if not is_valid_move(graph, state.place, destination):
        if Config.LOG_MOVES:
            log_ignored_move(state.place, destination)
        return state

    # Carried parcels are re-created at the destination, the rest are kept as-is.
    carried = [
        Parcel(place=destination, address=parcel.address) if parcel.place == state.place else parcel
        for parcel in state.parcels
    ]
    remaining = tuple(parcel for parcel in carried if parcel.place != parcel.address)

    if Config.LOG_MOVES:
        log_move(state.place, destination)
        delivered = len(carried) - len(remaining)
        if delivered:
            log_delivery(destination, delivered, len(remaining))

    return VillageState(place=destination, parcels=remaining)
