"""
Pydantic schemas for the village simulation.

The whole world is condensed to two values: where the robot is, and which
parcels are still undelivered. Both models are frozen, so a state can be
shared freely and a move always produces a new state instead of editing
the old one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from robot_village.roads import RoadGraph


class Parcel(BaseModel):
    """An undelivered parcel lying at ``place`` and addressed to ``address``."""

    model_config = ConfigDict(frozen=True)

    place: str = Field(..., description="Where the parcel currently is")
    address: str = Field(..., description="Where the parcel has to go")


class VillageState(BaseModel):
    """Snapshot of the robot location and the parcels still to deliver.

    ``parcels`` accepts any sequence of ``Parcel`` objects or plain dicts and
    is stored as a tuple. Equality is structural: two states with the same
    place and the same parcels in the same order compare equal.
    """

    model_config = ConfigDict(frozen=True)

    place: str = Field(..., description="Current robot location")
    parcels: Tuple[Parcel, ...] = Field(
        default_factory=tuple,
        description="Undelivered parcels, in their original order",
    )

    def move(self, destination: str, graph: Optional["RoadGraph"] = None) -> "VillageState":
        """Return the state after driving to ``destination``.

        Thin wrapper over :func:`robot_village.rules.move`.
        """
        from robot_village.rules import move

        return move(self, destination, graph)
