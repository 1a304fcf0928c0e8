"""Tests for source classification."""

import pytest

from distsource import (
    ArchiveUrl,
    Git,
    GitUrl,
    NotDirectError,
    RegistryDistribution,
    RegistryFile,
    RegistryUrl,
    RemoteUrl,
    Url,
    UrlDistribution,
    UrlParseError,
    VcsKind,
    VcsLocatorError,
    VcsUrl,
    classify,
    classify_url,
    package_url,
    to_direct_url,
    to_url,
)
from distsource.source.direct_url import ArchiveInfo

REQUESTS_WHEEL = RegistryFile(
    filename="requests-2.31.0-py3-none-any.whl",
    url="https://files.pythonhosted.org/packages/70/8e/requests-2.31.0-py3-none-any.whl",
    requires_python=">=3.7",
)


class TestClassifyUrl:
    """Test classification of direct URLs."""

    def test_remote_with_subdirectory(self):
        source = classify_url("https://example.com/pkg.tar.gz#subdirectory=dir")
        assert isinstance(source, RemoteUrl)
        assert source.subdirectory == "dir"

    def test_subdirectory_among_other_tokens(self):
        source = classify_url("https://example.com/pkg.tar.gz#a=1&subdirectory=pkg&b=2")
        assert source.subdirectory == "pkg"

    def test_first_subdirectory_wins(self):
        source = classify_url("https://example.com/pkg.tar.gz#subdirectory=x&subdirectory=y")
        assert source.subdirectory == "x"

    def test_no_fragment_means_no_subdirectory(self):
        assert classify_url("https://example.com/pkg.tar.gz").subdirectory is None
        assert classify_url("https://example.com/pkg.tar.gz#egg=pkg").subdirectory is None

    def test_subdirectory_kept_verbatim(self):
        """Test that empty and Windows-style values are not normalized."""
        assert classify_url("https://example.com/pkg.tar.gz#subdirectory=").subdirectory == ""
        assert classify_url("https://example.com/pkg.tar.gz#subdirectory=a\\b").subdirectory == "a\\b"
        assert classify_url("https://example.com/pkg.tar.gz#subdirectory=a%26b").subdirectory == "a%26b"

    def test_key_must_match_exactly(self):
        source = classify_url("https://example.com/pkg.tar.gz#my_subdirectory=x&subdirectoryx=y")
        assert source.subdirectory is None

    def test_remote_keeps_original_url(self):
        url = Url.parse("https://example.com/pkg.tar.gz#egg=pkg")
        source = classify_url(url)
        assert isinstance(source, RemoteUrl)
        assert source.url is url

    def test_git(self):
        source = classify_url("git+https://example.com/r.git")
        assert isinstance(source, Git)
        assert str(source.git.repository) == "https://example.com/r.git"
        assert source.subdirectory is None

    def test_git_with_revision_and_subdirectory(self):
        source = classify_url("git+https://github.com/pypa/pip.git@v24.0#egg=pip&subdirectory=src")
        assert isinstance(source, Git)
        assert source.git.reference == "v24.0"
        assert source.subdirectory == "src"

    def test_git_invalid_url(self):
        with pytest.raises(UrlParseError):
            classify_url("git+not a url")

    def test_git_invalid_remainder_does_not_fall_back(self):
        """Test that a bad URL after 'git+' fails instead of becoming a remote file."""
        url = Url.parse("git+http://")
        with pytest.raises(UrlParseError):
            classify_url(url)

    def test_git_unsupported_transport(self):
        with pytest.raises(VcsLocatorError):
            classify_url("git+svn://example.com/repo")


class TestClassifyReference:
    """Test classification of distribution references."""

    def test_registry(self):
        source = classify(RegistryDistribution("requests", "2.31.0", REQUESTS_WHEEL))
        assert source == RegistryUrl(Url.parse(REQUESTS_WHEEL.url))

    def test_registry_malformed_url(self):
        file = RegistryFile(filename="pkg-1.0.tar.gz", url="pkg-1.0.tar.gz")
        with pytest.raises(UrlParseError):
            classify(RegistryDistribution("pkg", "1.0", file))

    def test_registry_git_url_is_still_registry(self):
        """Test that registry files are never reinterpreted as Git URLs."""
        file = RegistryFile(filename="pkg.tar.gz", url="git+https://example.com/pkg.git")
        assert isinstance(classify(RegistryDistribution("pkg", "1.0", file)), RegistryUrl)

    def test_direct_url(self):
        url = Url.parse("git+https://github.com/pypa/pip.git@main")
        source = classify(UrlDistribution("pip", url))
        assert isinstance(source, Git)
        assert source.git.reference == "main"


class TestToUrl:
    """Test converting sources back to URLs."""

    def test_registry_unchanged(self):
        url = Url.parse(REQUESTS_WHEEL.url)
        assert to_url(RegistryUrl(url)) is url

    def test_remote_subdirectory(self):
        source = classify_url("https://example.com/pkg.tar.gz#subdirectory=dir")
        url = to_url(source)
        assert url.fragment == "subdirectory=dir"

    def test_remote_subdirectory_drops_other_tokens(self):
        source = classify_url("https://example.com/pkg.tar.gz#egg=pkg&subdirectory=dir")
        assert str(to_url(source)) == "https://example.com/pkg.tar.gz#subdirectory=dir"

    def test_remote_without_subdirectory_keeps_fragment(self):
        source = classify_url("https://example.com/pkg.tar.gz#egg=pkg")
        assert str(to_url(source)) == "https://example.com/pkg.tar.gz#egg=pkg"

    def test_remote_empty_subdirectory(self):
        source = RemoteUrl(Url.parse("https://example.com/pkg.tar.gz"), "")
        assert str(to_url(source)) == "https://example.com/pkg.tar.gz#subdirectory="

    def test_git(self):
        source = classify_url("git+https://github.com/pypa/pip.git@v24.0#egg=pip&subdirectory=src")
        assert str(to_url(source)) == "git+https://github.com/pypa/pip.git@v24.0#subdirectory=src"

    def test_git_without_subdirectory(self):
        source = classify_url("git+https://github.com/pypa/pip.git@v24.0#egg=pip")
        assert str(to_url(source)) == "git+https://github.com/pypa/pip.git@v24.0"

    def test_git_pinned(self, pip_repo, commit):
        source = Git(pip_repo.with_precise(commit), "src")
        assert str(to_url(source)) == f"git+https://github.com/pypa/pip.git@{commit}#subdirectory=src"

    def test_git_round_trip(self):
        url = Url.parse("git+ssh://git@github.com/pypa/pip.git@main#subdirectory=src")
        assert to_url(classify_url(url)) == url


class TestToDirectUrl:
    """Test building direct_url.json records from sources."""

    def test_registry_is_not_direct(self):
        with pytest.raises(NotDirectError, match="Registry dependencies have no direct URL"):
            to_direct_url(RegistryUrl(Url.parse(REQUESTS_WHEEL.url)))

    def test_remote(self):
        source = classify_url("https://example.com/pkg.tar.gz#egg=pkg&subdirectory=dir")
        record = to_direct_url(source)
        assert record == ArchiveUrl(
            url="https://example.com/pkg.tar.gz#egg=pkg&subdirectory=dir",
            archive_info=ArchiveInfo(),
            subdirectory="dir",
        )
        assert record.archive_info.hash is None
        assert record.archive_info.hashes is None

    def test_git_unresolved(self, pip_repo):
        record = to_direct_url(Git(pip_repo, "pkg"))
        assert isinstance(record, VcsUrl)
        assert record.url == "https://github.com/pypa/pip.git"
        assert record.subdirectory == "pkg"
        assert record.vcs_info.vcs is VcsKind.GIT
        assert record.vcs_info.commit_id is None
        assert record.vcs_info.requested_revision == "v24.0"

    def test_git_resolved(self, pip_repo, commit):
        record = to_direct_url(Git(pip_repo.with_precise(commit), "pkg"))
        assert record.subdirectory == "pkg"
        assert record.vcs_info.commit_id == commit
        assert record.vcs_info.requested_revision == "v24.0"

    def test_git_default_branch(self):
        record = to_direct_url(classify_url("git+https://github.com/pypa/pip.git"))
        assert record.vcs_info.commit_id is None
        assert record.vcs_info.requested_revision is None
        assert record.subdirectory is None


class TestPackageUrl:
    """Test PURL identities for references."""

    def test_registry(self):
        purl = package_url(RegistryDistribution("Requests", "2.31.0", REQUESTS_WHEEL))
        assert purl.to_string() == "pkg:pypi/requests@2.31.0"

    def test_remote(self):
        url = Url.parse("https://example.com/pkg.tar.gz#egg=pkg&subdirectory=dir")
        purl = package_url(UrlDistribution("pkg", url))
        assert purl.type == "pypi"
        assert purl.version is None
        assert purl.qualifiers["download_url"] == "https://example.com/pkg.tar.gz"
        assert purl.subpath == "dir"

    def test_git(self):
        url = Url.parse("git+https://github.com/pypa/pip.git@v24.0")
        purl = package_url(UrlDistribution("pip", url))
        assert purl.qualifiers["vcs_url"] == "git+https://github.com/pypa/pip.git@v24.0"
        assert purl.subpath is None

    def test_invalid_git(self):
        with pytest.raises(VcsLocatorError):
            package_url(UrlDistribution("pkg", Url.parse("git+svn://example.com/repo")))


def test_sources_are_values(pip_repo):
    """Test that sources compare by value."""
    assert Git(pip_repo, "src") == Git(GitUrl.from_url(Url.parse("https://github.com/pypa/pip.git@v24.0")), "src")
    assert Git(pip_repo, "src") != Git(pip_repo, None)
