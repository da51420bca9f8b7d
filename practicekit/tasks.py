"""Project maintenance tasks, run as ``tasks <task>``."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Optional, Sequence

INSTALL_ARGS: tuple[tuple[str, ...], ...] = (
    # --locked keeps builds reproducible and the tool versions in step.
    ("mdbook", "--locked", "--version", "0.4.44"),
    ("mdbook-svgbob", "--locked", "--version", "0.2.1"),
    ("mdbook-pandoc", "--locked", "--version", "0.9.3"),
    ("mdbook-i18n-helpers", "--locked", "--version", "0.3.5"),
    ("i18n-report", "--locked", "--version", "0.2.0"),
    # These packages live in this repository.
    ("--path", "mdbook-exerciser", "--locked"),
    ("--path", "mdbook-course", "--locked"),
)


class TaskError(Exception):
    """Raised when a task is unknown or fails."""


def help_text(task: Optional[str]) -> str:
    """Return the message shown for a missing or unrecognised task."""
    if task is not None:
        return (
            f"Unrecognized task '{task}'. Available tasks:\n"
            "\n"
            "install-tools            Installs the tools the project depends on."
        )
    return "Missing task. To execute a task run `cargo xtask [task]`."


def install_tools(cargo: Optional[str] = None) -> None:
    """Install every tool the project depends on with ``cargo install``."""
    if cargo is None:
        cargo = os.environ.get("CARGO", "cargo")
    print("Installing project tools...")
    for args in INSTALL_ARGS:
        try:
            completed = subprocess.run([cargo, "install", *args], check=False)
        except OSError as err:
            raise TaskError(f"Failed to execute cargo install: {err}") from err
        if completed.returncode != 0:
            raise TaskError(
                f"Command 'cargo install {' '.join(args)}' exited with status code: "
                f"{completed.returncode}"
            )


def execute_task(args: Sequence[str]) -> None:
    """Run the task named by the first argument."""
    task = args[0] if args else None
    if task == "install-tools":
        install_tools()
    else:
        raise TaskError(help_text(task))


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        execute_task(argv)
    except TaskError as err:
        print(err, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())