"""Package selections in the style of pip's ``--no-binary`` and ``--only-binary``.

Each flag value is ``:all:``, ``:none:`` or package names. Repeated values
are folded left to right into one selection.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from packaging.utils import InvalidName, canonicalize_name


class InvalidNameError(ValueError):
    """Raised when a token is not a valid package name."""


class Directive(Enum):
    """Select every package or none of them."""

    ALL = ":all:"
    NONE = ":none:"


@dataclass(frozen=True)
class Package:
    """A single package, by canonical name."""

    name: str


@dataclass(frozen=True)
class Packages:
    """An explicit list of packages, in the order given, duplicates kept."""

    names: tuple[str, ...]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return canonicalize_name(name) in self.names


PackageNameSpecifier = Directive | Package
PackageNameSpecifiers = Directive | Packages


def parse_specifier(token: str) -> PackageNameSpecifier:
    """Parse one token: ``:all:``, ``:none:`` or a package name.

    Raises:
        InvalidNameError: If the token is not a valid package name.
    """
    match token:
        case ":all:":
            return Directive.ALL
        case ":none:":
            return Directive.NONE
    try:
        return Package(canonicalize_name(token, validate=True))
    except InvalidName as e:
        raise InvalidNameError(f"Not a valid package name: {token!r}") from e


def parse_argument(value: str) -> list[PackageNameSpecifier]:
    """Parse one flag value, which may hold several comma-separated tokens.

    ``"numpy,scipy"`` gives two packages; blank pieces are skipped.
    """
    return [parse_specifier(token.strip()) for token in value.split(",") if token.strip()]


def collapse(specifiers: Iterable[PackageNameSpecifier]) -> PackageNameSpecifiers:
    """Fold specifiers, in the order given, into a single selection.

    ``:none:`` clears everything seen so far. ``:all:`` selects every
    package until the next ``:none:``, whether names come before or after
    it. Names accumulate in order, without deduplication.
    """
    packages: list[str] = []
    all_seen = False

    for specifier in specifiers:
        match specifier:
            case Directive.NONE:
                packages.clear()
                all_seen = False
            case Directive.ALL:
                all_seen = True
            case Package(name=name):
                packages.append(name)
            case _:
                assert_never(specifier)

    if all_seen:
        return Directive.ALL
    if not packages:
        return Directive.NONE
    return Packages(tuple(packages))


def selects(selection: PackageNameSpecifiers, name: str) -> bool:
    """Return True if ``selection`` covers the package ``name``."""
    match selection:
        case Directive.ALL:
            return True
        case Directive.NONE:
            return False
        case Packages():
            return name in selection
        case _:
            assert_never(selection)
