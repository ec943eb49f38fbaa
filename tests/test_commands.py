# -*- coding: utf-8 -*-
"""Tests for the decompose command."""

import json
from importlib.metadata import EntryPoint
from importlib.metadata import EntryPoints

import pytest

from cavenet.commands.decompose import _decompose
from cavenet.commands.decompose import decompose
from cavenet.commands.main import main
from cavenet.constants import JSON_ENCODING
from cavenet.enums import ReportFormat


class TestDecomposeFunction:
    def test_json_to_string(self, network_document):
        result = _decompose(network_document)
        data = json.loads(result)
        assert data["format"] == "cavenet_decomposition"
        assert len(data["components"]) == 1
        assert data["components"][0]["articulations"][1]["attach"] == "Y"

    def test_text_to_string(self, network_document):
        result = _decompose(network_document, report_format=ReportFormat.TEXT)
        assert result.startswith("Dump of 1 component(s):")

    def test_to_file(self, network_document, tmp_path):
        output = tmp_path / "report.json"
        assert _decompose(network_document, output_path=output) is None
        data = json.loads(output.read_text(encoding=JSON_ENCODING))
        assert len(data["station_order"]) == 8

    def test_unknown_format(self, network_document):
        with pytest.raises(ValueError):
            _decompose(network_document, report_format="dxf")

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            _decompose(tmp_path / "missing.json")


class TestDecomposeCommand:
    def test_stdout(self, network_document, capsys):
        assert decompose(["-i", str(network_document)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["station_order"][0] == "b"

    def test_text_format(self, network_document, capsys):
        assert decompose(["-i", str(network_document), "-f", "text"]) == 0
        assert "Articulation 1 (attached at Y)" in capsys.readouterr().out

    def test_output_file(self, network_document, tmp_path, capsys):
        output = tmp_path / "out.json"
        assert decompose(["-i", str(network_document), "-o", str(output)]) == 0
        assert output.exists()
        assert capsys.readouterr().out == ""

    def test_missing_input(self, tmp_path):
        assert decompose(["-i", str(tmp_path / "missing.json")]) == 1

    def test_no_fixed_point(self, tmp_path):
        path = tmp_path / "floating.json"
        path.write_text(
            json.dumps({"shots": [{"from": "1", "to": "2"}]}),
            encoding=JSON_ENCODING,
        )
        assert decompose(["-i", str(path)]) == 1

    def test_invalid_document(self, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text(
            json.dumps({"shots": [{"from": "1", "to": "1"}]}),
            encoding=JSON_ENCODING,
        )
        assert decompose(["-i", str(path)]) == 1

    def test_bad_arguments(self):
        with pytest.raises(SystemExit):
            decompose(["-f", "json"])


_ACTIONS = EntryPoints(
    [
        EntryPoint(
            name="decompose",
            value="cavenet.commands.decompose:decompose",
            group="cavenet.actions",
        )
    ]
)


class TestMain:
    @pytest.fixture(autouse=True)
    def _registered_actions(self, monkeypatch):
        monkeypatch.setattr(
            "cavenet.commands.main.entry_points", lambda group: _ACTIONS
        )

    def test_dispatch(self, network_document, capsys):
        assert main(["decompose", "-i", str(network_document), "-f", "text"]) == 0
        assert "Component 0:" in capsys.readouterr().out

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            main(["convert"])
