import subprocess
from unittest import mock

import pytest

from practicekit import tasks


def _ok(args, check=False):
    return subprocess.CompletedProcess(args, 0)


def test_help_text_missing_task():
    assert tasks.help_text(None) == "Missing task. To execute a task run `cargo xtask [task]`."


def test_help_text_unrecognized_task():
    text = tasks.help_text("frobnicate")
    assert text.startswith("Unrecognized task 'frobnicate'. Available tasks:")
    assert "install-tools" in text


def test_execute_task_without_task_raises_help():
    with pytest.raises(tasks.TaskError) as info:
        tasks.execute_task([])
    assert str(info.value) == tasks.help_text(None)


def test_execute_task_unknown_task_raises_help():
    with pytest.raises(tasks.TaskError) as info:
        tasks.execute_task(["bogus"])
    assert str(info.value) == tasks.help_text("bogus")


@mock.patch("practicekit.tasks.subprocess.run", side_effect=_ok)
def test_install_tools_runs_every_install(run, capsys):
    tasks.install_tools("cargo")
    assert "Installing project tools..." in capsys.readouterr().out
    assert run.call_count == len(tasks.INSTALL_ARGS)
    first = run.call_args_list[0].args[0]
    assert first == ["cargo", "install", "mdbook", "--locked", "--version", "0.4.44"]
    last = run.call_args_list[-1].args[0]
    assert last == ["cargo", "install", "--path", "mdbook-course", "--locked"]


@mock.patch("practicekit.tasks.subprocess.run")
def test_install_tools_stops_on_failure(run):
    run.side_effect = lambda args, check=False: subprocess.CompletedProcess(args, 3)
    with pytest.raises(tasks.TaskError) as info:
        tasks.install_tools("cargo")
    assert str(info.value) == (
        "Command 'cargo install mdbook --locked --version 0.4.44' exited with status code: 3"
    )
    assert run.call_count == 1


@mock.patch("practicekit.tasks.subprocess.run", side_effect=FileNotFoundError("missing"))
def test_install_tools_reports_spawn_failure(run):
    with pytest.raises(tasks.TaskError, match="Failed to execute cargo install"):
        tasks.install_tools("cargo")


@mock.patch("practicekit.tasks.subprocess.run", side_effect=_ok)
def test_execute_task_uses_cargo_from_environment(run, monkeypatch, capsys):
    monkeypatch.setenv("CARGO", "/opt/bin/cargo")
    tasks.execute_task(["install-tools"])
    assert "Installing project tools..." in capsys.readouterr().out
    assert {call.args[0][0] for call in run.call_args_list} == {"/opt/bin/cargo"}


def test_main_reports_error(capsys):
    assert tasks.main(["bogus"]) == -1
    assert "Unrecognized task 'bogus'" in capsys.readouterr().err


@mock.patch("practicekit.tasks.subprocess.run", side_effect=_ok)
def test_main_install_tools_succeeds(run, capsys):
    assert tasks.main(["install-tools"]) == 0
    assert "Installing project tools..." in capsys.readouterr().out