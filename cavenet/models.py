# -*- coding: utf-8 -*-
"""Pydantic models for network documents and decomposition reports.

- ShotModel / NetworkDocument: a survey network as read from JSON
- ArticulationReport / ComponentReport / DecompositionReport: the result
  of a decomposition, by station name, ready to hand to a solver
"""

from __future__ import annotations

from typing import Annotated
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from cavenet.constants import DOCUMENT_VERSION
from cavenet.enums import FormatIdentifier
from cavenet.network.models import Decomposition
from cavenet.network.models import NetworkShot
from cavenet.network.models import SurveyNetwork

StationName = Annotated[str, Field(min_length=1)]


class ShotModel(BaseModel):
    """A shot between two stations."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    from_station_name: StationName = Field(alias="from")
    to_station_name: StationName = Field(alias="to")

    @model_validator(mode="after")
    def validate_endpoints(self) -> ShotModel:
        if self.from_station_name == self.to_station_name:
            raise ValueError(
                f"Shot must join two different stations, got "
                f"`{self.from_station_name}` twice"
            )
        return self


class NetworkDocument(BaseModel):
    """A survey network: shots plus the names of its fixed stations."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = DOCUMENT_VERSION
    format: Literal["cavenet_network"] = FormatIdentifier.NETWORK.value
    stations: list[StationName] = Field(default_factory=list)
    fixed: list[StationName] = Field(default_factory=list)
    shots: list[ShotModel] = Field(default_factory=list)

    def to_network(self) -> SurveyNetwork:
        return SurveyNetwork(
            stations=list(self.stations),
            shots=[
                NetworkShot(
                    from_name=shot.from_station_name,
                    to_name=shot.to_station_name,
                )
                for shot in self.shots
            ],
            anchors=set(self.fixed),
        )


class ArticulationReport(BaseModel):
    """One articulation, by station name."""

    stations: list[str]
    attach: str | None = None


class ComponentReport(BaseModel):
    """One component: its fixed stations and articulations."""

    fixed: list[str]
    articulations: list[ArticulationReport]


class DecompositionReport(BaseModel):
    """Full decomposition of a network, by station name."""

    version: str = DOCUMENT_VERSION
    format: Literal["cavenet_decomposition"] = FormatIdentifier.DECOMPOSITION.value
    components: list[ComponentReport] = Field(default_factory=list)
    station_order: list[str] = Field(default_factory=list)

    @property
    def articulation_count(self) -> int:
        return sum(len(comp.articulations) for comp in self.components)

    @classmethod
    def from_decomposition(cls, decomposition: Decomposition) -> DecompositionReport:
        graph = decomposition.graph
        components = []
        for comp in decomposition:
            components.append(
                ComponentReport(
                    fixed=[
                        graph.name(idx)
                        for idx in comp.stations()
                        if graph.stations[idx].fixed
                    ],
                    articulations=[
                        ArticulationReport(
                            stations=decomposition.names(art.stations),
                            attach=(
                                None if art.attach is None else graph.name(art.attach)
                            ),
                        )
                        for art in comp.articulations
                    ],
                )
            )
        return cls(
            components=components,
            station_order=decomposition.names(decomposition.station_order()),
        )
