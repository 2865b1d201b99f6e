"""Tests for RenderContext composition and derivation."""

from __future__ import annotations

import pytest

from webbuilder.models import News, SiteConfig, Version
from webbuilder.rendering.context import RenderContext, with_version


@pytest.fixture
def parts():
    config = SiteConfig(maxNews=2, title="Site")
    versions = [
        Version(versionFull="18.0.0", versionShort="18.0", isLatest=True),
        Version(versionFull="17.0.1", versionShort="17.0"),
    ]
    news = [News(title="Hello", body="World", displayDate="01 May")]
    return config, versions, news


@pytest.fixture
def base(parts):
    config, versions, news = parts
    return RenderContext.build(config, versions, versions[0], news)


def test_build_exposes_named_values(base, parts):
    config, versions, news = parts

    assert set(base) == {"config", "versions", "version", "news"}
    assert len(base) == 4
    assert base["config"] is config
    assert base["version"] is versions[0]
    assert list(base["versions"]) == versions
    assert list(base["news"]) == news


def test_build_snapshots_sequences(base, parts):
    _, versions, _ = parts

    versions.append(Version(versionFull="1.0.0", versionShort="1.0"))

    assert len(base.versions) == 2


def test_with_version_replaces_only_version(base, parts):
    _, versions, _ = parts

    derived = base.with_version(versions[1])

    assert derived["version"] is versions[1]
    assert derived["config"] is base["config"]
    assert derived["versions"] is base["versions"]
    assert derived["news"] is base["news"]


def test_with_version_leaves_base_untouched(base, parts):
    _, versions, _ = parts

    with_version(base, versions[1])

    assert base["version"] is versions[0]


def test_context_is_read_only(base):
    with pytest.raises(AttributeError):
        base.version = None
    with pytest.raises(TypeError):
        base["version"] = None  # type: ignore[index]


def test_dict_conversion(base):
    assert dict(base) == {
        "config": base.config,
        "versions": base.versions,
        "version": base.version,
        "news": base.news,
    }


@pytest.mark.parametrize("missing", ["config", "versions", "default_version", "news"])
def test_build_requires_every_input(parts, missing):
    config, versions, news = parts
    kwargs = {"config": config, "versions": versions, "default_version": versions[0], "news": news}
    kwargs[missing] = None

    with pytest.raises(ValueError, match=missing):
        RenderContext.build(**kwargs)


def test_with_version_requires_version(base):
    with pytest.raises(ValueError):
        base.with_version(None)
