"""Software package descriptions and a builder for them."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field
from typing import Optional


class Language(enum.Enum):
    RUST = "Rust"
    JAVA = "Java"
    PERL = "Perl"


@dataclass(frozen=True)
class Dependency:
    name: str
    version_expression: str


@dataclass
class Package:
    """A representation of a software package."""

    name: str
    version: str = "0.1"
    authors: list[str] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    language: Optional[Language] = None

    def as_dependency(self) -> Dependency:
        """Return this package as a dependency of another package."""
        return Dependency(name=self.name, version_expression=self.version)


class PackageBuilder:
    """A builder for a Package. Call ``build()`` to obtain the Package."""

    def __init__(self, name: str) -> None:
        self._package = Package(name=name)

    def version(self, version: str) -> PackageBuilder:
        """Set the package version."""
        self._package.version = version
        return self

    def authors(self, authors: list[str]) -> PackageBuilder:
        """Set the package authors."""
        self._package.authors = list(authors)
        return self

    def dependency(self, dependency: Dependency) -> PackageBuilder:
        """Add an additional dependency."""
        self._package.dependencies.append(dependency)
        return self

    def language(self, language: Language) -> PackageBuilder:
        """Set the language; without this it stays None."""
        self._package.language = language
        return self

    def build(self) -> Package:
        return self._package


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Build some sample packages.").parse_args(argv)
    base64 = PackageBuilder("base64").version("0.13").build()
    print(f"base64 = {base64!r}")
    log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    print(f"log = {log!r}")
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    print(f"serde = {serde!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())