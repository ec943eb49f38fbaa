# -*- coding: utf-8 -*-
"""Split a station graph into components and articulations.

Usage::

    from cavenet.network import StationGraph
    from cavenet.network import articulate

    graph = StationGraph.from_network(network)
    decomposition = articulate(graph)

    for component in decomposition:
        for articulation in component.articulations:
            solve(articulation.stations)

A component is everything reachable from one cluster of fixed points.
Its first articulation holds the fixed points; every later articulation
hangs from a single cut station of an earlier one, so a solver can
process the chunks in order, each one depending only on stations it has
already solved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cavenet.enums import ColourState
from cavenet.enums import ListKind
from cavenet.errors import NoFixedPointError
from cavenet.network.models import Decomposition
from cavenet.network.session import DecompositionSession
from cavenet.network.traversal import visit

if TYPE_CHECKING:
    from cavenet.network.graph import StationGraph

logger = logging.getLogger(__name__)


def articulate(graph: StationGraph) -> Decomposition:
    """Decompose *graph* into components of articulations.

    Raises:
        NoFixedPointError: If no station is fixed.
        NetworkConsistencyError: If the graph is malformed or stations
            are not connected to any fixed point.
    """
    graph.check()
    session = DecompositionSession(graph)

    if session.fixed_count == 0:
        raise NoFixedPointError

    while (root := session.lists.head(ListKind.FIXED_PENDING)) is not None:
        # A root that is still fixed was not reached from an earlier root:
        # it anchors a fresh component.
        if session.state[root] is ColourState.FIXED:
            session.start_component(root)

        for slot, leg in enumerate(graph.stations[root].legs):
            match session.state[leg.to]:
                case ColourState.FIXED:
                    session.fold(leg.to)
                case ColourState.UNVISITED:
                    before = session.counter
                    visit(session, leg.to, graph.reverse_leg(root, slot))
                    logger.debug(
                        "Visited %d station(s) from `%s`",
                        session.counter - before,
                        graph.name(root),
                    )

        session.append(root)

    session.finish_component()
    session.check_complete()

    decomposition = Decomposition(graph=graph, components=session.components)
    logger.info(
        "Decomposed %d station(s) (%d fixed) into %d component(s), "
        "%d articulation(s)",
        len(graph),
        session.fixed_count,
        len(decomposition),
        decomposition.articulation_count,
    )
    return decomposition
