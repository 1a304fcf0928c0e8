"""Package URL (PURL) identities for distribution references."""

from __future__ import annotations

from typing import assert_never

from packageurl import PackageURL

from .reference import DistributionReference, RegistryDistribution, UrlDistribution
from .source import Git, RemoteUrl, classify_url

PURL_TYPE = "pypi"


def package_url(reference: DistributionReference) -> PackageURL:
    """Build the PURL for a reference.

    Index distributions are identified by name and version. Direct URLs keep
    their location in the ``download_url`` or ``vcs_url`` qualifier, and
    their subdirectory as the PURL subpath.

    Raises:
        UrlParseError: If a ``git+`` URL is malformed.
        VcsLocatorError: If a ``git+`` URL is not a usable repository locator.
    """
    match reference:
        case RegistryDistribution(name=name, version=version):
            return PackageURL(type=PURL_TYPE, name=name, version=version)
        case UrlDistribution(name=name, url=url):
            source = classify_url(url)
            match source:
                case RemoteUrl(url=remote, subdirectory=subdirectory):
                    qualifiers = {"download_url": str(remote.with_fragment(None))}
                case Git(git=git, subdirectory=subdirectory):
                    qualifiers = {"vcs_url": f"git+{git.to_url()}"}
                case _:
                    assert_never(source)
            return PackageURL(type=PURL_TYPE, name=name, qualifiers=qualifiers, subpath=subdirectory or None)
        case _:
            assert_never(reference)
