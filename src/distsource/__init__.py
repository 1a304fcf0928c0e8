"""distsource - Classify where dependencies come from and record their provenance."""

from .config import (
    ConfigError as ConfigError,
    Settings as Settings,
    SettingsHandle as SettingsHandle,
    load_settings as load_settings,
    resolve_selection as resolve_selection,
)
from .file import File as File
from .git import GitUrl as GitUrl, VcsLocatorError as VcsLocatorError
from .source import (
    ArchiveUrl as ArchiveUrl,
    DirectUrl as DirectUrl,
    DirectUrlHandle as DirectUrlHandle,
    Git as Git,
    InvalidDirectUrlError as InvalidDirectUrlError,
    NotDirectError as NotDirectError,
    RegistryDistribution as RegistryDistribution,
    RegistryFile as RegistryFile,
    RegistryUrl as RegistryUrl,
    RemoteUrl as RemoteUrl,
    Source as Source,
    UrlDistribution as UrlDistribution,
    VcsKind as VcsKind,
    VcsUrl as VcsUrl,
    classify as classify,
    classify_url as classify_url,
    from_json as from_json,
    package_url as package_url,
    to_direct_url as to_direct_url,
    to_json as to_json,
    to_url as to_url,
)
from .specifiers import (
    Directive as Directive,
    InvalidNameError as InvalidNameError,
    Package as Package,
    Packages as Packages,
    collapse as collapse,
    parse_argument as parse_argument,
    parse_specifier as parse_specifier,
    selects as selects,
)
from .url import Url as Url, UrlParseError as UrlParseError
from . import source as source

__version__ = "0.1.0"
