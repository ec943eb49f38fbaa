# -*- coding: utf-8 -*-
"""Cave survey network decomposition.

Splits a cave survey's station/leg graph into components and
articulations so a least-squares solver can adjust one small chunk at a
time, each depending only on stations already solved.

Usage:
    from cavenet import StationGraph, SurveyNetwork, NetworkShot, articulate

    network = SurveyNetwork(
        shots=[NetworkShot("A1", "A2"), NetworkShot("A2", "A3")],
        anchors={"A1"},
    )
    decomposition = articulate(StationGraph.from_network(network))
    for component in decomposition:
        for articulation in component.articulations:
            print(decomposition.names(articulation.stations))

    # Or straight from a JSON network document
    from cavenet import NetworkInterface
    document = NetworkInterface.load_network_json(Path("cave.json"))
    decomposition = NetworkInterface.decompose(document)
"""

__version__ = "0.1.0"

# Constants
from cavenet.constants import JSON_ENCODING
from cavenet.constants import MAX_LEGS

# Enums
from cavenet.enums import ColourState
from cavenet.enums import FormatIdentifier
from cavenet.enums import ListKind
from cavenet.enums import ReportFormat
from cavenet.errors import DecompositionError
from cavenet.errors import NetworkConsistencyError
from cavenet.errors import NoFixedPointError
from cavenet.interface import NetworkInterface
from cavenet.models import ArticulationReport
from cavenet.models import ComponentReport
from cavenet.models import DecompositionReport
from cavenet.models import NetworkDocument
from cavenet.models import ShotModel
from cavenet.network import Articulation
from cavenet.network import Component
from cavenet.network import Decomposition
from cavenet.network import NetworkShot
from cavenet.network import StationGraph
from cavenet.network import SurveyNetwork
from cavenet.network import articulate

__all__ = [
    # Constants
    "JSON_ENCODING",
    "MAX_LEGS",
    # Network
    "Articulation",
    # Report Models
    "ArticulationReport",
    # Enums
    "ColourState",
    "Component",
    "ComponentReport",
    "Decomposition",
    # Errors
    "DecompositionError",
    "DecompositionReport",
    "FormatIdentifier",
    "ListKind",
    "NetworkConsistencyError",
    # Document Models
    "NetworkDocument",
    # I/O
    "NetworkInterface",
    "NetworkShot",
    "NoFixedPointError",
    "ReportFormat",
    "ShotModel",
    "StationGraph",
    "SurveyNetwork",
    "articulate",
]
