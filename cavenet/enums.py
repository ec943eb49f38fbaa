# -*- coding: utf-8 -*-
"""Enumerations used by the network decomposition."""

from enum import Enum


class ColourState(str, Enum):
    """Traversal state of a graph station.

    Attributes:
        UNVISITED: Not reached by any traversal yet
        FIXED: Fixed point not yet folded into a component.  The colour
            value holds its fixed ordinal.
        VISITED: Coloured.  The colour value holds the visitation order
            while the station is being explored and its low-link once done.
    """

    UNVISITED = "unvisited"
    FIXED = "fixed"
    VISITED = "visited"


class ListKind(str, Enum):
    """Work lists a station moves through during one decomposition pass.

    Attributes:
        UNPROCESSED: Free stations not yet placed in an articulation
        FIXED_PENDING: Fixed stations waiting to be used as a root
        SEALED: Stations placed in an articulation
    """

    UNPROCESSED = "unprocessed"
    FIXED_PENDING = "fixed_pending"
    SEALED = "sealed"


class FormatIdentifier(str, Enum):
    """Format identifiers used in JSON files.

    Attributes:
        NETWORK: Survey network document
        DECOMPOSITION: Decomposition report
    """

    NETWORK = "cavenet_network"
    DECOMPOSITION = "cavenet_decomposition"


class ReportFormat(str, Enum):
    """Output formats of the ``decompose`` command."""

    JSON = "json"
    TEXT = "text"
