# tests/core/test_config.py
"""
Tests for the Config class and machine identity lookup.
"""

import pytest

from decisionmaker.core.config import Config
from decisionmaker.utils.machine_id import get_machine_id


def test_proc_root_follows_environment(monkeypatch):
    monkeypatch.setenv("PROC_ROOT", "/host/proc")

    assert Config().PROC_ROOT == "/host/proc"


def test_proc_root_defaults_to_proc(monkeypatch):
    monkeypatch.delenv("PROC_ROOT", raising=False)

    assert Config().PROC_ROOT == "/proc"


def test_empty_proc_root_is_rejected(monkeypatch):
    monkeypatch.setenv("PROC_ROOT", "")

    with pytest.raises(ValueError):
        Config().validate_instance()


def test_machine_id_override_wins(tmp_path):
    assert get_machine_id("explicit", paths=[str(tmp_path / "missing")]) == "explicit"


def test_machine_id_read_from_file(tmp_path):
    machine_id_file = tmp_path / "machine-id"
    machine_id_file.write_text("0123456789abcdef\n")

    assert get_machine_id("", paths=[str(tmp_path / "missing"), str(machine_id_file)]) == "0123456789abcdef"


def test_machine_id_falls_back_to_hostname(tmp_path, mocker):
    mocker.patch("decisionmaker.utils.machine_id.socket.gethostname", return_value="worker-7")

    assert get_machine_id(None, paths=[str(tmp_path / "missing")]) == "worker-7"
