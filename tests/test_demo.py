from __future__ import annotations

import logging

import pytest

from rollbuf.core import RollingBuffer
from rollbuf.tools.demo import main, run


def test_demo_reports_wrapped_buffer(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--capacity", "20", "--count", "40", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "capacity: 20 | len: 20 | full: True" in out
    assert f"values: {list(range(20, 40))}" in out
    assert "runtime:" in out


def test_demo_reads_capacity_from_config(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "buffer.yaml"
    cfg.write_text("buffer:\n  capacity: 5\n", encoding="utf-8")
    assert main(["--config", str(cfg), "--count", "7", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert "values: [2, 3, 4, 5, 6]" in out


def test_demo_rejects_zero_capacity() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--capacity", "0"])
    assert excinfo.value.code == 2


def test_run_logs_each_insertion(caplog: pytest.LogCaptureFixture) -> None:
    buff: RollingBuffer[int] = RollingBuffer(3)
    with caplog.at_level(logging.INFO, logger="rollbuf.tools.demo"):
        assert run(buff, 4) is True
    messages = [r.getMessage() for r in caplog.records if r.name == "rollbuf.tools.demo"]
    assert messages[0] == "len: 1 - [0]"
    assert messages[-1] == "len: 3 - [1, 2, 3]"


def test_demo_capacity_flag_skips_config(
    tmp_path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("- 1\n- 2\n", encoding="utf-8")
    monkeypatch.setenv("ROLLBUF_CONFIG", str(bad))
    assert main(["--capacity", "3", "--count", "5", "--log-level", "WARNING"]) == 0
    assert "values: [2, 3, 4]" in capsys.readouterr().out


@pytest.mark.parametrize("text", ["- 1\n- 2\n", "capacity: [unclosed\n", "capacity: 2.7\n"])
def test_demo_reports_bad_config_as_usage_error(tmp_path, text: str) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(bad), "--log-level", "WARNING"])
    assert excinfo.value.code == 2
