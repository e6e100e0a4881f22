from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote userstore seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from userstore import cli  # noqa: E402
from userstore.core import config as core_config  # noqa: E402
from userstore.core.errors import MissingParameterError  # noqa: E402


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    for name in ("USERSTORE_FILE_MODE", "USERSTORE_LOG_LEVEL", "USERSTORE_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_resolve_accepts_single_and_double_dash():
    args = cli.resolve_arguments(["-operation", "findById", "--fileName", "u.json", "-id", "7"])
    assert args == {"operation": "findById", "fileName": "u.json", "item": "", "id": "7"}


def test_resolve_defaults_to_empty_strings():
    assert cli.resolve_arguments([]) == {"operation": "", "fileName": "", "item": "", "id": ""}


def test_end_to_end_add_list_find(tmp_path):
    target = tmp_path / "users.json"
    item = json.dumps({"id": "1", "email": "a@b.c", "age": 30})

    cli.main(["-operation", "add", "-fileName", str(target), "-item", item], sink=io.BytesIO())

    sink = io.BytesIO()
    cli.main(["-operation", "list", "-fileName", str(target)], sink=sink)
    assert sink.getvalue() == b'[{"id":"1","email":"a@b.c","age":30}]'

    sink = io.BytesIO()
    cli.main(["-operation", "findById", "-fileName", str(target), "-id", "1"], sink=sink)
    assert sink.getvalue() == b'{"id":"1","email":"a@b.c","age":30}'
    assert target.read_bytes() == b""


def test_validation_happens_before_touching_file(tmp_path):
    target = tmp_path / "users.json"
    with pytest.raises(MissingParameterError):
        cli.main(["-operation", "remove", "-fileName", str(target)], sink=io.BytesIO())
    assert not target.exists()


def test_run_exits_with_status_one_on_error(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "nope.json"
    monkeypatch.setattr(sys, "argv", ["userstore", "-operation", "list", "-fileName", str(missing)])
    with pytest.raises(SystemExit) as info:
        cli.run()
    assert info.value.code == 1
    assert "error: could not open" in capsys.readouterr().err


def test_run_rejects_unknown_operation(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["userstore", "-operation", "update", "-fileName", "u.json"])
    with pytest.raises(SystemExit) as info:
        cli.run()
    assert info.value.code == 1
    assert "Operation update not allowed!" in capsys.readouterr().err


def test_run_writes_status_to_stdout(tmp_path, monkeypatch, capsysbinary):
    target = tmp_path / "users.json"
    target.write_bytes(b"[]")
    monkeypatch.setattr(sys, "argv", ["userstore", "-operation", "remove", "-fileName", str(target), "-id", "5"])
    cli.run()
    assert capsysbinary.readouterr().out == b"Item with id 5 not found"
