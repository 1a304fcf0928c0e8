"""Distribution source classification and direct-URL provenance."""

from .direct_url import ArchiveInfo as ArchiveInfo
from .direct_url import ArchiveUrl as ArchiveUrl
from .direct_url import DirectUrl as DirectUrl
from .direct_url import DirectUrlHandle as DirectUrlHandle
from .direct_url import DirInfo as DirInfo
from .direct_url import InvalidDirectUrlError as InvalidDirectUrlError
from .direct_url import LocalDirectory as LocalDirectory
from .direct_url import VcsInfo as VcsInfo
from .direct_url import VcsKind as VcsKind
from .direct_url import VcsUrl as VcsUrl
from .direct_url import from_json as from_json
from .direct_url import to_json as to_json
from .purl import package_url as package_url
from .reference import DistributionReference as DistributionReference
from .reference import RegistryDistribution as RegistryDistribution
from .reference import RegistryFile as RegistryFile
from .reference import UrlDistribution as UrlDistribution
from .source import Git as Git
from .source import NotDirectError as NotDirectError
from .source import RegistryUrl as RegistryUrl
from .source import RemoteUrl as RemoteUrl
from .source import Source as Source
from .source import classify as classify
from .source import classify_url as classify_url
from .source import to_direct_url as to_direct_url
from .source import to_url as to_url
from .types import DirectUrlDict as DirectUrlDict

__all__ = [
    "ArchiveInfo",
    "ArchiveUrl",
    "DirInfo",
    "DirectUrl",
    "DirectUrlDict",
    "DirectUrlHandle",
    "DistributionReference",
    "Git",
    "InvalidDirectUrlError",
    "LocalDirectory",
    "NotDirectError",
    "RegistryDistribution",
    "RegistryFile",
    "RegistryUrl",
    "RemoteUrl",
    "Source",
    "UrlDistribution",
    "VcsInfo",
    "VcsKind",
    "VcsUrl",
    "classify",
    "classify_url",
    "from_json",
    "package_url",
    "to_direct_url",
    "to_json",
    "to_url",
]
