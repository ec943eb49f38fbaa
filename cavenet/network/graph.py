# -*- coding: utf-8 -*-
"""Station/leg graph consumed by the decomposition.

Stations live in an arena (``StationGraph.stations``) and are addressed
by stable integer indices.  Each station carries at most ``MAX_LEGS``
leg slots; a leg records the far station and the slot the far station
uses to come back, which is the reverse-direction lookup the traversal
relies on.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Iterator
from typing import NamedTuple

from cavenet.constants import MAX_LEGS
from cavenet.constants import SPLIT_STATION_FORMAT
from cavenet.errors import NetworkConsistencyError

if TYPE_CHECKING:
    from cavenet.network.models import SurveyNetwork

logger = logging.getLogger(__name__)


class Leg(NamedTuple):
    """One leg slot of a station."""

    to: int
    reverse: int  # slot at ``to`` leading back


@dataclass
class Station:
    """A graph station (node).

    Attributes:
        name: Unique name within the graph.
        fixed: Whether the station has externally known coordinates.
        legs: Leg slots, at most ``MAX_LEGS``.
        origin: Survey station this node was created for.  Differs from
            ``name`` only for the extra stations of a split junction.
    """

    name: str
    fixed: bool = False
    legs: list[Leg] = field(default_factory=list)
    origin: str | None = None

    def __post_init__(self) -> None:
        if self.origin is None:
            self.origin = self.name

    @property
    def degree(self) -> int:
        return len(self.legs)


class StationGraph:
    """Arena of stations connected by legs.

    Example::

        graph = StationGraph()
        a = graph.add_station("A", fixed=True)
        b = graph.add_station("B")
        graph.connect(a, b)
    """

    def __init__(self) -> None:
        self.stations: list[Station] = []
        self._index: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.stations)

    def __iter__(self) -> Iterator[Station]:
        return iter(self.stations)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_station(
        self,
        name: str,
        *,
        fixed: bool = False,
        origin: str | None = None,
    ) -> int:
        """Add a station and return its index.

        Raises:
            NetworkConsistencyError: If the name is already taken.
        """
        if name in self._index:
            raise NetworkConsistencyError("Duplicate station", station=name)
        index = len(self.stations)
        self.stations.append(Station(name=name, fixed=fixed, origin=origin))
        self._index[name] = index
        return index

    def connect(self, a: int, b: int) -> tuple[int, int]:
        """Join two stations with a leg.

        Returns:
            The slot used at ``a`` and the slot used at ``b``.

        Raises:
            NetworkConsistencyError: For a self loop or when either
                station already has ``MAX_LEGS`` legs.
        """
        stn_a = self.stations[a]
        stn_b = self.stations[b]
        if a == b:
            raise NetworkConsistencyError("Leg from a station to itself", station=stn_a.name)
        for stn in (stn_a, stn_b):
            if stn.degree >= MAX_LEGS:
                raise NetworkConsistencyError(
                    f"Station already has {MAX_LEGS} legs", station=stn.name
                )
        slot_a = stn_a.degree
        slot_b = stn_b.degree
        stn_a.legs.append(Leg(to=b, reverse=slot_b))
        stn_b.legs.append(Leg(to=a, reverse=slot_a))
        return slot_a, slot_b

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def index(self, name: str) -> int:
        """Index of the station called *name*.

        Raises:
            KeyError: If no such station exists.
        """
        return self._index[name]

    def name(self, index: int) -> str:
        return self.stations[index].name

    def fixed_stations(self) -> list[int]:
        return [idx for idx, stn in enumerate(self.stations) if stn.fixed]

    def reverse_leg(self, index: int, slot: int) -> int:
        """Slot the far end of ``stations[index].legs[slot]`` uses to come back.

        Raises:
            NetworkConsistencyError: If the slot is empty or the far end
                does not lead back through it.
        """
        station = self.stations[index]
        if not 0 <= slot < station.degree:
            raise NetworkConsistencyError(f"No leg in slot {slot}", station=station.name)
        leg = station.legs[slot]
        far = self.stations[leg.to]
        if not 0 <= leg.reverse < far.degree:
            raise NetworkConsistencyError(
                f"Reverse lookup of leg {slot} found no leg", station=station.name
            )
        back = far.legs[leg.reverse]
        if back.to != index or back.reverse != slot:
            raise NetworkConsistencyError(
                f"Reverse lookup of leg {slot} does not lead back", station=station.name
            )
        return leg.reverse

    def check(self) -> None:
        """Assert the shape the decomposition relies on.

        Raises:
            NetworkConsistencyError: On a station with no legs or more than
                ``MAX_LEGS`` legs, or a failing reverse lookup.
        """
        for index, station in enumerate(self.stations):
            if station.degree == 0:
                raise NetworkConsistencyError("Station has no legs", station=station.name)
            if station.degree > MAX_LEGS:
                raise NetworkConsistencyError(
                    f"Station has {station.degree} legs (max {MAX_LEGS})",
                    station=station.name,
                )
            for slot in range(station.degree):
                self.reverse_leg(index, slot)

    # -------------------------------------------------------------------------
    # Builder
    # -------------------------------------------------------------------------

    @classmethod
    def from_network(cls, network: SurveyNetwork) -> StationGraph:
        """Build a graph from a survey network.

        A junction with more than ``MAX_LEGS`` shots is split into a chain
        of stations joined by link legs; every part keeps the junction's
        fixed flag and has it as ``origin``.  Shots from a station to
        itself, stations without any shot and anchors naming no station
        are skipped with a warning.
        """
        shots = []
        for shot in network.shots:
            if shot.from_name == shot.to_name:
                logger.warning("Skipping shot from `%s` to itself", shot.from_name)
                continue
            shots.append(shot)

        degree: Counter[str] = Counter()
        for shot in shots:
            degree[shot.from_name] += 1
            degree[shot.to_name] += 1

        graph = cls()
        ports: dict[str, Iterator[int]] = {}
        station_names = network.station_names
        reserved = set(station_names)

        for anchor in sorted(set(network.anchors) - reserved):
            logger.warning("Skipping anchor `%s`: no such station", anchor)

        for name in station_names:
            n_legs = degree[name]
            if n_legs == 0:
                logger.warning("Skipping station `%s`: no shots", name)
                continue
            fixed = name in network.anchors
            ports[name] = iter(graph._add_junction(name, n_legs, fixed, reserved))

        for shot in shots:
            graph.connect(next(ports[shot.from_name]), next(ports[shot.to_name]))

        split = len(graph) - len(ports)
        if split:
            logger.debug("Split junctions into %d extra station(s)", split)

        return graph

    def _add_junction(
        self,
        name: str,
        n_legs: int,
        fixed: bool,
        reserved: set[str],
    ) -> list[int]:
        """Create the station(s) for one survey station.

        Extra parts of a split junction skip any name in *reserved* (the
        survey's own station names) or already in the graph.

        Returns one index per free leg slot, in the order shots should
        be attached.
        """
        if n_legs <= MAX_LEGS:
            return [self.add_station(name, fixed=fixed)] * n_legs

        # A chain of k parts offers k + 2 free slots: two at each end and
        # one on every inner part.
        n_parts = n_legs - (MAX_LEGS - 1)
        parts = [self.add_station(name, fixed=fixed)]
        suffix = 0
        for _ in range(1, n_parts):
            suffix += 1
            part_name = SPLIT_STATION_FORMAT.format(name=name, part=suffix)
            while part_name in reserved or part_name in self:
                suffix += 1
                part_name = SPLIT_STATION_FORMAT.format(name=name, part=suffix)
            parts.append(self.add_station(part_name, fixed=fixed, origin=name))
            self.connect(parts[-2], parts[-1])

        slots = [parts[0], parts[0]]
        slots.extend(parts[1:-1])
        slots.extend([parts[-1], parts[-1]])
        return slots
