"""CLI interface for distsource."""

import json as json_lib
import logging
import sys
from pathlib import Path
from typing import Annotated

import tyro

from .config import load_settings, resolve_selection
from .source import UrlDistribution, classify_url, package_url, to_direct_url, to_url
from .source.direct_url import to_dict
from .source.source import Git, RegistryUrl, RemoteUrl
from .specifiers import Directive, PackageNameSpecifiers, Packages
from .url import Url


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _fail(error: Exception) -> None:
    print(f"Error: {error}")
    sys.exit(1)


def describe(selection: PackageNameSpecifiers) -> str:
    """Render a collapsed selection the way it would be written on the command line."""
    if isinstance(selection, Packages):
        return ",".join(selection.names)
    return selection.value


def classify(
    url: tyro.conf.Positional[str],
    name: str | None = None,
    json: bool = False,
    verbose: bool = False,
) -> None:
    """Classify a direct URL and show its canonical URL and direct_url.json record.

    Args:
        url: Direct URL, e.g. "git+https://example.com/repo.git@v1.0#subdirectory=pkg"
        name: Package name; when given, also print the package URL (PURL)
        json: Print a single JSON object instead of text
        verbose: Enable debug logging
    """
    _setup_logging(verbose)

    try:
        parsed = Url.parse(url)
        source = classify_url(parsed)
        record = to_dict(to_direct_url(source))
        purl = package_url(UrlDistribution(name, parsed)).to_string() if name else None
    except ValueError as e:
        _fail(e)
        return

    match source:
        case Git(subdirectory=subdirectory):
            kind = "git"
        case RemoteUrl(subdirectory=subdirectory):
            kind = "remote"
        case RegistryUrl():
            kind, subdirectory = "registry", None

    if json:
        output = {"source": kind, "url": str(to_url(source)), "direct_url": record}
        if purl:
            output["purl"] = purl
        print(json_lib.dumps(output, indent=2, ensure_ascii=False))
        return

    print(f"Source: {kind}")
    print(f"URL: {to_url(source)}")
    if subdirectory is not None:
        print(f"Subdirectory: {subdirectory}")
    if purl:
        print(f"PURL: {purl}")
    print("\ndirect_url.json:")
    print(json_lib.dumps(record, indent=2, ensure_ascii=False))


def select(
    no_binary: Annotated[list[str], tyro.conf.UseAppendAction] = [],
    only_binary: Annotated[list[str], tyro.conf.UseAppendAction] = [],
    root: Path | None = None,
    verbose: bool = False,
) -> None:
    """Show the binary selection produced by project settings and flags.

    Values from pyproject.toml come first, then the flags, in the order given.
    Each flag may be repeated; every occurrence is kept.

    Args:
        no_binary: ":all:", ":none:" or package names (comma-separated allowed)
        only_binary: ":all:", ":none:" or package names (comma-separated allowed)
        root: Directory holding pyproject.toml (default: current directory)
        verbose: Enable debug logging
    """
    _setup_logging(verbose)

    try:
        settings = load_settings(root)
        no_binary_selection = resolve_selection(settings.no_binary, no_binary)
        only_binary_selection = resolve_selection(settings.only_binary, only_binary)
    except ValueError as e:
        _fail(e)
        return

    print(f"no-binary: {describe(no_binary_selection)}")
    print(f"only-binary: {describe(only_binary_selection)}")
    if no_binary_selection is Directive.ALL and only_binary_selection is Directive.ALL:
        print("\nWarning: every package is excluded from both binary and source installs")


def _print_usage() -> None:
    print("Usage: distsource <command> [options]")
    print("\nCommands:")
    print("  classify <url>    Classify a direct URL and show its provenance record")
    print("  select            Show --no-binary / --only-binary selections")
    print("\nRun 'distsource <command> --help' for command options.")


def main() -> None:
    """distsource - classify dependency sources."""
    if len(sys.argv) < 2:
        _print_usage()
        sys.exit(1)

    if sys.argv[1] in ("-h", "--help"):
        _print_usage()
        return

    command = sys.argv[1]
    commands = {"classify": classify, "select": select}

    if command in commands:
        tyro.cli(commands[command], args=sys.argv[2:])
    else:
        print(f"Unknown command: {command}")
        print("Use 'distsource --help' for usage information")
        sys.exit(1)


if __name__ == "__main__":
    main()
