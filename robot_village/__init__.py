"""
Robot Village - immutable delivery-robot simulation core.

A robot drives around a small village, picking up parcels where it finds
them and dropping them off at their addresses. The world is a frozen
value; every move returns a new one.

No file I/O. No routing policy. Callers decide where the robot goes.
"""

__version__ = "0.1.0"

from .roads import ROADS, ROAD_SEPARATOR, RoadGraph, build_graph, road_graph
from .schemas import Parcel, VillageState
from .rules import is_valid_move, move
from .config import Config

__all__ = [
    # Road network
    "ROADS",
    "ROAD_SEPARATOR",
    "RoadGraph",
    "build_graph",
    "road_graph",
    # Schemas
    "Parcel",
    "VillageState",
    # Transitions
    "is_valid_move",
    "move",
    # Configuration
    "Config",
]
