# -*- coding: utf-8 -*-
"""Unified interface for network documents and decomposition reports.

Reading follows the pattern JSON -> ``model_validate_json()`` -> model,
writing ``model_dump_json()`` -> file.  The decomposition itself only
sees a :class:`~cavenet.network.graph.StationGraph`.
"""

from pathlib import Path

from cavenet.constants import JSON_ENCODING
from cavenet.models import DecompositionReport
from cavenet.models import NetworkDocument
from cavenet.network.graph import StationGraph
from cavenet.network.models import Decomposition
from cavenet.network.partition import articulate


class NetworkInterface:
    """File I/O and decomposition entry point for network documents.

    Example:
        document = NetworkInterface.load_network_json(Path("cave.json"))
        decomposition = NetworkInterface.decompose(document)
        report = DecompositionReport.from_decomposition(decomposition)
        NetworkInterface.save_report(report, Path("cave.decomposed.json"))
    """

    @classmethod
    def load_network_json(cls, path: Path) -> NetworkDocument:
        """Load a network document from JSON.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the document is malformed
        """
        json_str = path.read_text(encoding=JSON_ENCODING)
        return NetworkDocument.model_validate_json(json_str)

    @classmethod
    def save_network_json(cls, document: NetworkDocument, path: Path) -> None:
        json_str = document.model_dump_json(indent=2, by_alias=True)
        path.write_text(json_str, encoding=JSON_ENCODING)

    @classmethod
    def decompose(cls, document: NetworkDocument) -> Decomposition:
        """Build the station graph of *document* and decompose it.

        Raises:
            DecompositionError: If the network cannot be decomposed
        """
        graph = StationGraph.from_network(document.to_network())
        return articulate(graph)

    @classmethod
    def save_report(cls, report: DecompositionReport, path: Path) -> None:
        json_str = report.model_dump_json(indent=2)
        path.write_text(json_str, encoding=JSON_ENCODING)

    @classmethod
    def load_report(cls, path: Path) -> DecompositionReport:
        json_str = path.read_text(encoding=JSON_ENCODING)
        return DecompositionReport.model_validate_json(json_str)
