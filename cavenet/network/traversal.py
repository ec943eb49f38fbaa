# -*- coding: utf-8 -*-
"""Iterative low-link traversal.

Cave networks are often long, nearly linear chains of passage, tens of
thousands of stations deep.  The depth-first traversal therefore keeps
its own stack of :class:`~cavenet.network.session.Frame` objects instead
of recursing, so its depth is bounded by memory, not by the interpreter's
recursion limit.

Algorithm
---------
Each station gets the next visitation order as its colour.  Its legs,
except the one it was entered by, are examined in slot order:

* an unfolded fixed point is folded into the component and its ordinal
  is a low-link candidate;
* a coloured station is a low-link candidate;
* an unvisited station is entered (a frame is pushed).

When a station is done its colour becomes its low-link and it is
appended to the session's accumulation (post-order).  Back at the
parent, a child whose low-link equals the parent's order closed a loop
at the parent: the parent is a cut vertex and the child's unsealed
stations are sealed into an articulation.  A child whose low-link is
above the parent's order hangs off a bridge and stays in the parent's
chunk.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cavenet.enums import ColourState

if TYPE_CHECKING:
    from cavenet.network.session import DecompositionSession
    from cavenet.network.session import Frame

logger = logging.getLogger(__name__)


def visit(session: DecompositionSession, start: int, entry: int) -> int:
    """Explore everything reachable from *start* without re-crossing *entry*.

    Args:
        session: The decomposition pass.
        start: Unvisited station to start from.
        entry: Leg slot of *start* it was reached through.

    Returns:
        The low-link of *start*.

    Raises:
        NetworkConsistencyError: If a reverse leg lookup fails.
    """
    graph = session.graph
    state = session.state
    colour = session.colour

    stack: list[Frame] = [session.enter(start, entry)]

    while True:
        frame = stack[-1]
        legs = graph.stations[frame.station].legs

        if frame.slot < len(legs):
            slot = frame.slot
            frame.slot += 1
            if slot == frame.entry:
                continue

            to = legs[slot].to
            match state[to]:
                case ColourState.UNVISITED:
                    back = graph.reverse_leg(frame.station, slot)
                    stack.append(session.enter(to, back))
                case ColourState.FIXED:
                    frame.low = min(frame.low, session.fold(to))
                case ColourState.VISITED:
                    frame.low = min(frame.low, colour[to])
            continue

        # All legs done: unwind.
        stack.pop()
        colour[frame.station] = frame.low
        session.append(frame.station)

        if not stack:
            return frame.low

        parent = stack[-1]
        if frame.low == parent.order:
            session.seal(frame.mark, attach=parent.station)
        elif frame.low < parent.low:
            parent.low = frame.low
