# -*- coding: utf-8 -*-
"""Network decomposition for survey adjustment.

Usage::

    from cavenet.network import StationGraph
    from cavenet.network import SurveyNetwork
    from cavenet.network import articulate

    graph = StationGraph.from_network(network)
    decomposition = articulate(graph)
    order = decomposition.station_order()

The graph is split into *components* (everything reachable from one
cluster of fixed points), each an ordered list of *articulations*
(cut-free chunks separated at cut stations).  A least-squares solver
can then process one chunk at a time, treating stations of earlier
chunks as known.
"""

from cavenet.network.graph import Leg
from cavenet.network.graph import Station
from cavenet.network.graph import StationGraph
from cavenet.network.lists import StationLists
from cavenet.network.models import Articulation
from cavenet.network.models import Component
from cavenet.network.models import Decomposition
from cavenet.network.models import NetworkShot
from cavenet.network.models import SurveyNetwork
from cavenet.network.partition import articulate
from cavenet.network.session import DecompositionSession
from cavenet.network.traversal import visit

__all__ = [
    "Articulation",
    "Component",
    "Decomposition",
    "DecompositionSession",
    "Leg",
    "NetworkShot",
    "Station",
    "StationGraph",
    "StationLists",
    "SurveyNetwork",
    "articulate",
    "visit",
]
