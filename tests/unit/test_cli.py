"""Tests for the figma-api CLI."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
import requests
from typer.testing import CliRunner

from figma_api.cli import app
from tests.unit.payloads import make_file_response, make_user

runner = CliRunner()


def _write(tmp_path: Path, data: Any, name: str = "response.json") -> str:
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return str(path)


def test_swatches_lists_colours_in_document_order(tmp_path: Path) -> None:
    path = _write(tmp_path, make_file_response())

    result = runner.invoke(app, ["swatches", "KEY", "--input", path])

    assert result.exit_code == 0, result.output
    lines = [line for line in result.stdout.splitlines() if line.startswith("#")]
    assert lines == [
        "#e6e6e6  (first seen on 1:0)",
        "#ffffff  (first seen on 1:1)",
        "#ff0000  (first seen on 1:1:1)",
        "#000000  (first seen on 1:1:2)",
    ]


def test_swatches_json_output(tmp_path: Path) -> None:
    path = _write(tmp_path, make_file_response())

    result = runner.invoke(app, ["swatches", "KEY", "-i", path, "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert [entry["hex"] for entry in data] == ["#e6e6e6", "#ffffff", "#ff0000", "#000000"]
    assert data[0] == {"hex": "#e6e6e6", "alpha": 1.0, "node_id": "1:0"}


def test_outline_with_max_depth(tmp_path: Path) -> None:
    path = _write(tmp_path, make_file_response())

    result = runner.invoke(app, ["outline", "KEY", "-i", path, "--max-depth", "1"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "- DOCUMENT 'Document' (0:0)",
        "    - CANVAS 'Page 1' (1:0)",
        "        - ... (1 more child, id=1:0)",
        "    - CANVAS 'Page 2' (2:0)",
        "        - ... (1 more child, id=2:0)",
    ]


def test_outline_from_node(tmp_path: Path) -> None:
    path = _write(tmp_path, make_file_response())

    result = runner.invoke(app, ["outline", "KEY", "-i", path, "--node", "2:1"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "- FRAME 'Frame 2' (2:1)"
    assert len(lines) == 4


def test_outline_unknown_node_exits_nonzero(tmp_path: Path) -> None:
    path = _write(tmp_path, make_file_response())

    result = runner.invoke(app, ["outline", "KEY", "-i", path, "--node", "9:9"])

    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_invalid_document_exits_nonzero(tmp_path: Path) -> None:
    raw = make_file_response()
    raw["document"]["children"][0]["type"] = "STICKY"
    path = _write(tmp_path, raw)

    result = runner.invoke(app, ["swatches", "KEY", "-i", path])

    assert result.exit_code == 1
    assert "#" not in result.stdout


def test_input_that_is_not_json_exits_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    result = runner.invoke(app, ["outline", "KEY", "-i", str(path)])

    assert result.exit_code == 1


def test_missing_input_file_exits_nonzero(tmp_path: Path) -> None:
    result = runner.invoke(app, ["outline", "KEY", "-i", str(tmp_path / "nope.json")])
    assert result.exit_code == 1


def test_missing_token_exits_nonzero(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FIGMA_OAUTH_TOKEN", raising=False)
    monkeypatch.delenv("FIGMA_TOKEN", raising=False)
    monkeypatch.setattr("figma_api.config.API_TOKEN_FILES", [tmp_path / "token.txt"])

    result = runner.invoke(app, ["versions", "KEY"])

    assert result.exit_code == 1



def test_network_failure_exits_nonzero(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIGMA_TOKEN", "t")
    with patch(
        "figma_api.api.requests.Session.get",
        side_effect=requests.ConnectionError("connection refused"),
    ):
        result = runner.invoke(app, ["swatches", "KEY"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_versions_lists_labels(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "versions": [
                {
                    "id": "2",
                    "created_at": "2024-03-02T09:00:00Z",
                    "label": "Release",
                    "description": None,
                    "user": make_user(),
                },
                {
                    "id": 1,
                    "created_at": "2024-03-01T08:30:00Z",
                    "label": None,
                    "description": None,
                    "user": make_user("bob"),
                },
            ]
        },
    )

    result = runner.invoke(app, ["versions", "KEY", "-i", path])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "2  2024-03-02 09:00  ada  Release",
        "1  2024-03-01 08:30  bob  (autosave)",
    ]


def _comment(comment_id: str, message: str, **extra: Any) -> dict[str, Any]:
    return {
        "id": comment_id,
        "message": message,
        "file_key": "KEY",
        "user": make_user(),
        "created_at": "2024-03-01T10:00:00Z",
        "resolved_at": None,
        "parent_id": "",
        **extra,
    }


def test_comments_indent_replies_and_filter_resolved(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "comments": [
                _comment("1", "Looks good\nsecond line"),
                _comment("2", "Thanks", parent_id="1"),
                _comment("3", "Old", resolved_at="2024-03-02T10:00:00Z"),
            ]
        },
    )

    result = runner.invoke(app, ["comments", "KEY", "-i", path])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["[ada] Looks good", "  [ada] Thanks", "[ada] Old"]

    result = runner.invoke(app, ["comments", "KEY", "-i", path, "--unresolved"])
    assert result.exit_code == 0, result.output
    assert "[ada] Old" not in result.stdout.splitlines()
