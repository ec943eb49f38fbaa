# -*- coding: utf-8 -*-
"""State of a single decomposition pass.

A ``DecompositionSession`` is created for one graph, threaded through
every traversal and discarded afterwards.  It owns everything a pass
mutates: the colour state of each station, the visitation counter, the
work lists and the articulations built so far.  The graph topology is
only read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cavenet.enums import ColourState
from cavenet.enums import ListKind
from cavenet.errors import NetworkConsistencyError
from cavenet.network.lists import StationLists
from cavenet.network.models import Articulation
from cavenet.network.models import Component

if TYPE_CHECKING:
    from cavenet.network.graph import StationGraph

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """Resumption frame of the iterative traversal."""

    station: int
    entry: int  # slot leading back to the parent
    order: int  # visitation order
    low: int  # running low-link
    mark: int  # accumulation length when the station was entered
    slot: int = 0  # next leg slot to examine


class DecompositionSession:
    """Mutable context of one decomposition pass over *graph*.

    Fixed stations get the ordinals ``1 .. F`` and join the fixed-pending
    list; the visitation counter continues from ``F``, so every fixed
    ordinal is lower than every visitation order.
    """

    def __init__(self, graph: StationGraph) -> None:
        self.graph = graph
        size = len(graph)
        self.state: list[ColourState] = [ColourState.UNVISITED] * size
        self.colour: list[int] = [0] * size
        self.lists = StationLists(size)
        self.counter = 0

        self.accumulation: list[int] = []
        self.sealed: list[Articulation] = []
        self.components: list[Component] = []
        self._in_component = False

        for index, station in enumerate(graph.stations):
            if station.fixed:
                self.state[index] = ColourState.FIXED
                self.colour[index] = self.next_colour()
                self.lists.append(index, ListKind.FIXED_PENDING)
            else:
                self.lists.append(index, ListKind.UNPROCESSED)
        self.fixed_count = self.counter

    def next_colour(self) -> int:
        self.counter += 1
        return self.counter

    # -------------------------------------------------------------------------
    # Station transitions
    # -------------------------------------------------------------------------

    def fold(self, index: int) -> int:
        """Fold a fixed point into the current component.

        The station is moved to the front of the fixed-pending list so it
        is used as the next root, before any fresh anchor.

        Returns:
            Its fixed ordinal, now its colour.
        """
        self.state[index] = ColourState.VISITED
        self.lists.move(index, ListKind.FIXED_PENDING, front=True)
        return self.colour[index]

    def enter(self, index: int, entry: int) -> Frame:
        """Colour an unvisited station and open its traversal frame."""
        order = self.next_colour()
        self.state[index] = ColourState.VISITED
        self.colour[index] = order
        return Frame(
            station=index,
            entry=entry,
            order=order,
            low=order,
            mark=len(self.accumulation),
        )

    def append(self, index: int) -> None:
        """Add a finished station to the in-progress articulation."""
        self.lists.move(index, ListKind.SEALED)
        self.accumulation.append(index)

    def seal(self, mark: int, attach: int) -> Articulation:
        """Split the accumulation from *mark* on into a new articulation."""
        art = Articulation(stations=self.accumulation[mark:], attach=attach)
        del self.accumulation[mark:]
        self.sealed.append(art)
        logger.debug(
            "Sealed articulation of %d station(s) at `%s`",
            len(art),
            self.graph.name(attach),
        )
        return art

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def start_component(self, root: int) -> None:
        """Begin a new component rooted at an unfolded fixed point."""
        self.finish_component()
        self.state[root] = ColourState.VISITED
        self._in_component = True
        logger.debug(
            "`%s` is root of component %d", self.graph.name(root), len(self.components)
        )

    def finish_component(self) -> None:
        """Close the current component, if any.

        The remaining accumulation holds the fixed point(s) and becomes the
        first articulation; the sealed ones follow in reverse seal order.
        """
        if not self._in_component:
            return
        root = Articulation(stations=self.accumulation)
        self.components.append(Component(articulations=[root, *reversed(self.sealed)]))
        self.accumulation = []
        self.sealed = []
        self._in_component = False

    def check_complete(self) -> None:
        """Post-condition of a finished pass.

        Raises:
            NetworkConsistencyError: If a station is uncoloured or was never
                placed in an articulation.
        """
        if not self.lists.is_empty(ListKind.FIXED_PENDING):
            raise NetworkConsistencyError(
                f"{self.lists.count(ListKind.FIXED_PENDING)} fixed station(s) "
                "left unprocessed"
            )
        if not self.lists.is_empty(ListKind.UNPROCESSED):
            first = self.lists.head(ListKind.UNPROCESSED)
            raise NetworkConsistencyError(
                f"{self.lists.count(ListKind.UNPROCESSED)} station(s) not "
                "connected to any fixed point",
                station=self.graph.name(first),
            )
        placed = sum(len(comp) for comp in self.components)
        if placed != len(self.graph) or self.accumulation:
            raise NetworkConsistencyError(
                f"{placed} of {len(self.graph)} station(s) placed in articulations"
            )
        if any(state is not ColourState.VISITED for state in self.state):
            raise NetworkConsistencyError("Station left uncoloured")
