# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides graph builders shared by the decomposition tests.
Every graph is built leg by leg so slot order (and therefore traversal
order) is fixed by the order of the shots listed here.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from cavenet.constants import JSON_ENCODING
from cavenet.network.graph import StationGraph


# =============================================================================
# Graph Builders
# =============================================================================


def build_graph(
    shots: list[tuple[str, str]],
    fixed: set[str] | frozenset[str] = frozenset(),
) -> StationGraph:
    """Build a graph from ``(from, to)`` pairs, stations in first-use order."""
    graph = StationGraph()
    for from_name, to_name in shots:
        for name in (from_name, to_name):
            if name not in graph:
                graph.add_station(name, fixed=name in fixed)
        graph.connect(graph.index(from_name), graph.index(to_name))
    return graph


#: Single loop through the fixed point F::
#:
#:     F --- a
#:     |     |
#:     c --- b
CYCLE_SHOTS = [("F", "a"), ("a", "b"), ("b", "c"), ("c", "F")]

#: Two loops joined through the bridging station B.  F is fixed::
#:
#:     F --- a         c
#:     |     |        / |
#:     b --- X - B - Y  |
#:                    \ |
#:                     d
DUMBBELL_SHOTS = [
    ("F", "a"),
    ("a", "X"),
    ("X", "b"),
    ("b", "F"),
    ("X", "B"),
    ("B", "Y"),
    ("Y", "c"),
    ("c", "d"),
    ("d", "Y"),
]

#: A spur F-a into loop a-b-c, from which the bridge c-d leads to the
#: loop d-e-f::
#:
#:     F - a --- b      e
#:          \   /      / |
#:            c --- d    |
#:                     \ |
#:                       f
NESTED_LOOP_SHOTS = [
    ("F", "a"),
    ("a", "b"),
    ("b", "c"),
    ("c", "a"),
    ("c", "d"),
    ("d", "e"),
    ("e", "f"),
    ("f", "d"),
]


def build_chain(n_stations: int) -> StationGraph:
    """Chain ``s0 - s1 - ... - s(n-1)`` with ``s0`` fixed."""
    graph = StationGraph()
    prev = graph.add_station("s0", fixed=True)
    for i in range(1, n_stations):
        idx = graph.add_station(f"s{i}")
        graph.connect(prev, idx)
        prev = idx
    return graph


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def make_graph() -> Callable[..., StationGraph]:
    """Return the graph builder."""
    return build_graph


@pytest.fixture
def make_chain() -> Callable[[int], StationGraph]:
    """Return the chain builder."""
    return build_chain


@pytest.fixture
def dumbbell_shots() -> list[tuple[str, str]]:
    return list(DUMBBELL_SHOTS)


@pytest.fixture
def cycle_graph() -> StationGraph:
    return build_graph(CYCLE_SHOTS, fixed={"F"})


@pytest.fixture
def dumbbell_graph() -> StationGraph:
    return build_graph(DUMBBELL_SHOTS, fixed={"F"})


@pytest.fixture
def nested_loop_graph() -> StationGraph:
    return build_graph(NESTED_LOOP_SHOTS, fixed={"F"})


@pytest.fixture
def network_document(tmp_path: Path) -> Path:
    """Write the dumbbell network as a JSON document and return its path."""
    path = tmp_path / "dumbbell.json"
    document = {
        "version": "1.0",
        "format": "cavenet_network",
        "fixed": ["F"],
        "shots": [{"from": a, "to": b} for a, b in DUMBBELL_SHOTS],
    }
    path.write_text(json.dumps(document, indent=2), encoding=JSON_ENCODING)
    return path
