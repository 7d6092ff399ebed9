"""Tests for ``python -m rdebugger``."""

from __future__ import annotations

import json

import pytest

from rdebugger.__main__ import EXIT_FATAL
from rdebugger.__main__ import EXIT_UNRESOLVED
from rdebugger.__main__ import load_configuration
from rdebugger.__main__ import main


def _write(tmp_path, data) -> str:
    path = tmp_path / "launch.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_initial_templates(capsys) -> None:
    assert main(["templates", "--initial"]) == 0

    templates = json.loads(capsys.readouterr().out)
    assert [t["name"] for t in templates][-1] == "Attach to R process"
    assert len(templates) == 5


def test_dynamic_templates_for_package(tmp_path, capsys) -> None:
    (tmp_path / "DESCRIPTION").write_text("Package: demo\n")

    assert main(["--workspace", str(tmp_path), "templates"]) == 0

    names = [t["name"] for t in json.loads(capsys.readouterr().out)]
    assert names == ["Launch R-Workspace", "Debug R-Package", "Attach to R process"]


def test_resolve_without_configuration(tmp_path, capsys) -> None:
    script = tmp_path / "a.R"

    assert main(["--file", str(script), "resolve"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["tag"] == "FileLaunch"
    assert output["configuration"]["workingDirectory"] == "${fileDirname}"


def test_resolve_launch_json_document(tmp_path, capsys) -> None:
    path = _write(
        tmp_path,
        {"version": "0.2.0", "configurations": [{"type": "R-Debugger", "request": "attach", "name": "a"}]},
    )

    assert main(["resolve", path, "--port", "5000"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["tag"] == "Attach"
    assert output["configuration"]["customPort"] == 5000


def test_transport_for_attach(tmp_path, capsys) -> None:
    path = _write(tmp_path, {"request": "attach", "name": "a", "port": 2222})

    assert main(["transport", path]) == 0

    assert json.loads(capsys.readouterr().out) == {"kind": "server", "port": 2222, "host": "localhost"}


def test_startup_arguments(tmp_path, capsys) -> None:
    path = _write(tmp_path, {"request": "launch", "name": "w", "debugMode": "workspace", "workingDirectory": "/w"})

    assert main(["startup", path, "--r-path", "/usr/bin/R"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["path"] == "/usr/bin/R"
    assert output["cwd"] == "/w"


def test_unresolved_configuration_exit_code(tmp_path) -> None:
    path = _write(tmp_path, {"request": "launch", "name": "x", "debugMode": "invalid"})
    assert main(["resolve", path]) == EXIT_UNRESOLVED


def test_invalid_request_exit_code(tmp_path) -> None:
    path = _write(tmp_path, {"request": "restart", "name": "x"})
    assert main(["resolve", path]) == EXIT_FATAL


def test_missing_file_exit_code(tmp_path) -> None:
    assert main(["resolve", str(tmp_path / "missing.json")]) == EXIT_FATAL


def test_load_configuration_rejects_non_objects(tmp_path) -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        load_configuration(_write(tmp_path, [1, 2]))


def test_load_configuration_empty_document(tmp_path) -> None:
    assert load_configuration(_write(tmp_path, {"configurations": []})) == {}
    assert load_configuration(None) == {}


def test_load_configuration_rejects_non_object_entry(tmp_path) -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        load_configuration(_write(tmp_path, {"configurations": [42]}))


def test_non_object_entry_exit_code(tmp_path) -> None:
    path = _write(tmp_path, {"version": "0.2.0", "configurations": [42, {"request": "launch"}]})
    assert main(["resolve", path]) == EXIT_FATAL
