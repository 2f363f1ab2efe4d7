from __future__ import annotations

import pytest

from fast_gate import EnvInvalidException
from fast_gate.utils import logging as gate_logging
from fast_gate.utils.logging import get_log_file_path, setup_logging


def test_logging_uses_custom_file_name(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_FILE_NAME", raising=False)
    monkeypatch.chdir(tmp_path)

    setup_logging("module_x.log")

    path = get_log_file_path()
    assert path is not None
    assert path.name == "module_x.log"
    assert path.parent == tmp_path / "log"
    assert path.exists()


def test_logging_rejects_unknown_level(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    monkeypatch.setattr(gate_logging, "_logging_configured", False)

    with pytest.raises(EnvInvalidException):
        setup_logging("other.log", log_dir=tmp_path)
