"""Loggers that filter messages by verbosity."""

from __future__ import annotations

import abc
import argparse
import sys
from dataclasses import dataclass, field


class Logger(abc.ABC):
    @abc.abstractmethod
    def log(self, verbosity: int, message: str) -> None:
        """Log a message at the given verbosity level."""


class StderrLogger(Logger):
    """Writes every message to standard error."""

    def log(self, verbosity: int, message: str) -> None:
        print(f"verbosity={verbosity}: {message}", file=sys.stderr)


@dataclass
class VerbosityFilter(Logger):
    """Only passes on messages up to the given verbosity level."""

    max_verbosity: int
    inner: Logger = field(default_factory=StderrLogger)

    def log(self, verbosity: int, message: str) -> None:
        if verbosity <= self.max_verbosity:
            self.inner.log(verbosity, message)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Log through a verbosity filter.").parse_args(argv)
    logger = VerbosityFilter(max_verbosity=3)
    logger.log(5, "FYI")
    logger.log(2, "Uhoh")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())