import os

import pytest

from workshare.external_exec import main, run_program


def _script(directory, name, body):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(0o755)
    return path


def test_run_program_returns_exit_status(tmp_path):
    script = _script(tmp_path, "fail.sh", "exit 3")
    assert run_program(script) == 3


def test_run_program_success(tmp_path):
    script = _script(tmp_path, "ok.sh", "exit 0")
    assert run_program(str(script)) == 0


def test_run_program_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_program(tmp_path / "missing")


def test_run_program_does_not_search_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        run_program("sh")


def test_run_program_relative_name_uses_current_directory(tmp_path, monkeypatch):
    _script(tmp_path, "local.sh", "exit 4")
    monkeypatch.chdir(tmp_path)
    assert run_program("local.sh") == 4


def test_main_runs_program_and_reports(tmp_path, capfd):
    script = _script(tmp_path, "hello.sh", "echo hello-from-child")
    assert main([str(script), "--delay", "0"]) == 0
    out, _ = capfd.readouterr()
    assert "hello-from-child" in out
    assert f"executing '{script}'" in out
    assert f"Parent (PID {os.getpid()}): child process finished" in out


def test_main_reports_failure_to_start(tmp_path, capfd):
    missing = tmp_path / "nothing-here"
    assert main([str(missing), "--delay", "0"]) == 0
    out, err = capfd.readouterr()
    assert "Error executing" in err
    assert "child process finished" in out