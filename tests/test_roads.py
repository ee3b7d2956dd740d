"""Tests for the village road graph."""

from dataclasses import FrozenInstanceError

import pytest

from robot_village.roads import ROADS, ROAD_SEPARATOR, RoadGraph, build_graph, road_graph
from robot_village.schemas import VillageState


def test_graph_is_symmetric_for_every_road():
    graph = build_graph()

    for road in ROADS:
        origin, target = road.split(ROAD_SEPARATOR)
        assert target in graph[origin]
        assert origin in graph[target]


def test_each_neighbor_listed_once():
    graph = build_graph()

    for place in graph:
        neighbors = graph.neighbors(place)
        assert len(neighbors) == len(set(neighbors))

    # 14 roads, two directions each
    assert sum(len(graph[place]) for place in graph) == 2 * len(ROADS)


def test_neighbors_keep_road_order():
    graph = build_graph()

    assert graph["Alice's House"] == ("Bob's House", "Cabin", "Post Office")
    assert graph["Bob's House"] == ("Alice's House", "Town Hall")
    assert graph["Marketplace"] == ("Farm", "Post Office", "Shop", "Town Hall")
    assert graph.places[:4] == ("Alice's House", "Bob's House", "Cabin", "Post Office")
    assert len(graph) == 11


def test_unknown_place_has_no_neighbors():
    graph = build_graph()

    assert graph.neighbors("Lighthouse") == ()
    assert graph.has_place("Lighthouse") is False
    assert "Lighthouse" not in graph
    assert graph.is_adjacent("Lighthouse", "Cabin") is False
    with pytest.raises(KeyError):
        graph["Lighthouse"]


def test_build_graph_is_idempotent_and_accepts_custom_roads():
    assert build_graph() == build_graph()

    graph = build_graph(["Dock-Mill", "Mill-Bakery"])
    assert graph["Mill"] == ("Dock", "Bakery")
    assert graph.is_adjacent("Bakery", "Mill") is True
    assert graph.is_adjacent("Dock", "Bakery") is False


def test_road_graph_is_cached_and_frozen():
    graph = road_graph()

    assert road_graph() is graph
    assert graph == build_graph(ROADS)
    assert isinstance(graph, RoadGraph)
    with pytest.raises(FrozenInstanceError):
        graph.adjacency = {}  # type: ignore[misc]


def test_shared_graph_cannot_be_rewired():
    graph = road_graph()

    with pytest.raises(TypeError):
        graph.adjacency["Bob's House"] = ("Cabin",)  # type: ignore[index]
    assert graph.is_adjacent("Bob's House", "Cabin") is False
    assert VillageState(place="Bob's House").move("Cabin").place == "Bob's House"


def test_graph_copies_caller_mapping_and_is_hashable():
    adjacency = {"Dock": ["Mill"], "Mill": ["Dock"]}
    graph = RoadGraph(adjacency=adjacency)

    adjacency["Dock"].append("Bakery")
    adjacency["Bakery"] = ["Dock"]

    assert graph["Dock"] == ("Mill",)
    assert "Bakery" not in graph
    assert hash(graph) == hash(RoadGraph(adjacency={"Dock": ("Mill",), "Mill": ("Dock",)}))
    assert hash(road_graph()) == hash(build_graph())
