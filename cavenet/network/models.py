# -*- coding: utf-8 -*-
"""Data structures for the network decomposition.

Nothing here knows about survey file formats or coordinates: a network
is station names and shots, a decomposition is graph indices.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Iterator

if TYPE_CHECKING:
    from cavenet.network.graph import StationGraph


# ---------------------------------------------------------------------------
# Survey network (builder input)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NetworkShot:
    """A single shot between two survey stations.

    Direction does not matter to the decomposition; the shot is used as
    an undirected leg.
    """

    from_name: str
    to_name: str


@dataclass
class SurveyNetwork:
    """The survey network handed to the graph builder.

    Attributes:
        stations: Station names.  Stations mentioned by a shot do not
            have to be listed; listing them fixes their order.
        shots: Every shot in the network, in survey order.
        anchors: Station names whose coordinates are *fixed* (e.g.
            GPS-tied entrances).
    """

    stations: list[str] = field(default_factory=list)
    shots: list[NetworkShot] = field(default_factory=list)
    anchors: set[str] = field(default_factory=set)

    @property
    def station_names(self) -> list[str]:
        """All station names: listed ones first, then shot endpoints."""
        names = dict.fromkeys(self.stations)
        for shot in self.shots:
            names.setdefault(shot.from_name)
            names.setdefault(shot.to_name)
        return list(names)


# ---------------------------------------------------------------------------
# Decomposition result
# ---------------------------------------------------------------------------


@dataclass
class Articulation:
    """A cut-free chunk of stations.

    Attributes:
        stations: Graph indices in the order they finished traversal
            (post-order).
        attach: Index of the cut station this chunk hangs from.  It lives
            in an earlier articulation of the same component, so it is
            already solved when this chunk is processed.  ``None`` for
            the first articulation of a component.
    """

    stations: list[int] = field(default_factory=list)
    attach: int | None = None

    def __len__(self) -> int:
        return len(self.stations)


@dataclass
class Component:
    """All stations reachable from one cluster of fixed points.

    ``articulations[0]`` holds the fixed point(s).  Every later
    articulation comes after the one holding its ``attach`` station.
    """

    articulations: list[Articulation] = field(default_factory=list)

    def stations(self) -> list[int]:
        """Concatenate the articulations into one solve-ordered list."""
        return [idx for art in self.articulations for idx in art.stations]

    def __len__(self) -> int:
        return sum(len(art) for art in self.articulations)


@dataclass
class Decomposition:
    """Result of decomposing a station graph.

    Attributes:
        graph: The decomposed graph (topology is never modified).
        components: Components in construction order.
    """

    graph: StationGraph
    components: list[Component] = field(default_factory=list)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @property
    def articulation_count(self) -> int:
        return sum(len(comp.articulations) for comp in self.components)

    def station_order(self) -> list[int]:
        """Linearised station sequence handed to the solver."""
        return [idx for comp in self.components for idx in comp.stations()]

    def names(self, indices: list[int]) -> list[str]:
        return [self.graph.name(idx) for idx in indices]

    def locate(self, index: int) -> tuple[int, int]:
        """Return ``(component, articulation)`` positions of a station.

        Raises:
            KeyError: If the station is not part of the decomposition.
        """
        for c_pos, comp in enumerate(self.components):
            for a_pos, art in enumerate(comp.articulations):
                if index in art.stations:
                    return c_pos, a_pos
        raise KeyError(index)

    def cut_stations(self) -> set[int]:
        """Stations at which an articulation was split off."""
        return {
            art.attach
            for comp in self.components
            for art in comp.articulations
            if art.attach is not None
        }

    def dump(self) -> str:
        """Human-readable dump of the component tree."""
        lines = [f"Dump of {len(self.components)} component(s):"]
        for c_pos, comp in enumerate(self.components):
            lines.append(f"Component {c_pos}:")
            for a_pos, art in enumerate(comp.articulations):
                header = f"  Articulation {a_pos}"
                if art.attach is not None:
                    header += f" (attached at {self.graph.name(art.attach)})"
                lines.append(f"{header}:")
                for idx in art.stations:
                    station = self.graph.stations[idx]
                    marker = "*" if station.fixed else " "
                    lines.append(f"    {marker} {station.name}")
        return "\n".join(lines)
