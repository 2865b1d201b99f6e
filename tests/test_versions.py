"""Tests for the version catalog and its ordering strategies."""

from __future__ import annotations

from datetime import date

import pytest

from tests.sitefiles import write_json, write_text
from webbuilder.catalog.versions import (
    ORDERINGS,
    VersionCatalog,
    load_versions,
    release_date_key,
    semantic_version_key,
)
from webbuilder.errors import BuildIOError, DataError, EmptyCatalogError
from webbuilder.models import Version


def _version(full: str, short: str | None = None, **extra) -> Version:
    return Version(versionFull=full, versionShort=short or full, **extra)


def _write_versions(directory, *pairs):
    for index, (full, short) in enumerate(pairs):
        write_json(directory / f"v{index}.json", {"versionFull": full, "versionShort": short})


def test_latest_version_sorts_first(tmp_path):
    _write_versions(tmp_path, ("17.0.1", "17.0"), ("18.0.0", "18.0"), ("9.0.3", "9.0"))

    versions = load_versions(tmp_path)

    assert [v.version_full for v in versions] == ["18.0.0", "17.0.1", "9.0.3"]


def test_exactly_one_latest_at_index_zero(tmp_path):
    _write_versions(tmp_path, ("1.0.0", "1.0"), ("2.0.0", "2.0"), ("1.5.0", "1.5"))

    versions = load_versions(tmp_path)

    assert [v.is_latest for v in versions] == [True, False, False]


def test_authored_is_latest_is_overwritten(tmp_path):
    write_json(tmp_path / "old.json", {"versionFull": "1.0.0", "versionShort": "1.0", "isLatest": True})
    write_json(tmp_path / "new.json", {"versionFull": "2.0.0", "versionShort": "2.0"})

    versions = load_versions(tmp_path)

    assert sum(v.is_latest for v in versions) == 1
    assert versions[0].version_full == "2.0.0"
    assert versions[0].is_latest


def test_extra_fields_are_kept(tmp_path):
    write_json(
        tmp_path / "a.json",
        {"versionFull": "1.0.0", "versionShort": "1.0", "blogUrl": "https://example.org/1.0"},
    )

    (version,) = load_versions(tmp_path)

    assert version.blogUrl == "https://example.org/1.0"


def test_only_json_files_are_loaded(tmp_path):
    _write_versions(tmp_path, ("1.0.0", "1.0"))
    write_text(tmp_path / "README.md", "not a descriptor")
    (tmp_path / "nested.json").mkdir()

    assert len(load_versions(tmp_path)) == 1


def test_empty_catalog(tmp_path):
    write_text(tmp_path / "notes.txt", "nothing here")

    with pytest.raises(EmptyCatalogError):
        load_versions(tmp_path)


def test_missing_directory(tmp_path):
    with pytest.raises(BuildIOError):
        load_versions(tmp_path / "versions")


@pytest.mark.parametrize(
    "payload,desc",
    [
        ("{broken", "malformed JSON"),
        ('{"versionShort": "1.0"}', "versionFull missing"),
        ('{"versionFull": "1.0.0"}', "versionShort missing"),
        ('["1.0.0"]', "not an object"),
        ('{"versionFull": "2.0.0", "versionShort": ".."}', "versionShort is a parent reference"),
        ('{"versionFull": "2.0.0", "versionShort": "2.0/../x"}', "versionShort contains a separator"),
        ('{"versionFull": "2.0.0", "versionShort": ""}', "versionShort empty"),
    ],
)
def test_bad_descriptor_aborts_load(tmp_path, payload, desc):
    _write_versions(tmp_path, ("1.0.0", "1.0"))
    bad = write_text(tmp_path / "zz-bad.json", payload)

    with pytest.raises(DataError) as excinfo:
        load_versions(tmp_path)
    assert excinfo.value.path == bad, f"Failed {desc}"


def test_semantic_order_handles_qualifiers():
    versions = [
        _version("18.0.0-rc1"),
        _version("18.0.0"),
        _version("17.0.10"),
        _version("18.0.0-rc2"),
        _version("17.0.9"),
        _version("18.0.0.Beta1"),
    ]

    ordered = sorted(versions, key=semantic_version_key, reverse=True)

    assert [v.version_full for v in ordered] == [
        "18.0.0",
        "18.0.0-rc2",
        "18.0.0-rc1",
        "18.0.0.Beta1",
        "17.0.10",
        "17.0.9",
    ]


def test_semantic_order_treats_final_as_release():
    assert semantic_version_key(_version("4.0.0.Final")) == semantic_version_key(_version("4.0.0"))


def test_semantic_order_pads_short_versions():
    assert semantic_version_key(_version("18.0")) == semantic_version_key(_version("18.0.0"))


def test_semantic_order_rejects_non_numeric_versions():
    with pytest.raises(DataError):
        semantic_version_key(_version("nightly"))


def test_release_date_order(tmp_path):
    write_json(tmp_path / "a.json", {"versionFull": "2.0.0", "versionShort": "2.0", "releaseDate": "2020-01-01"})
    write_json(tmp_path / "b.json", {"versionFull": "1.9.9", "versionShort": "1.9", "releaseDate": "2021-06-30"})

    versions = VersionCatalog(order=release_date_key).load(tmp_path)

    assert versions[0].version_full == "1.9.9"
    assert versions[0].release_date == date(2021, 6, 30)
    assert versions[0].is_latest


def test_release_date_order_requires_dates():
    with pytest.raises(DataError):
        release_date_key(_version("1.0.0"))


def test_custom_order_is_injected(tmp_path):
    _write_versions(tmp_path, ("2.0.0", "2.0"), ("1.0.0", "1.0"))

    versions = load_versions(tmp_path, order=lambda v: -semantic_version_key(v)[0][0])

    assert versions[0].version_full == "1.0.0"


def test_equal_keys_keep_file_order(tmp_path):
    write_json(tmp_path / "a.json", {"versionFull": "1.0.0", "versionShort": "first"})
    write_json(tmp_path / "b.json", {"versionFull": "1.0.0", "versionShort": "second"})

    versions = load_versions(tmp_path)

    assert [v.version_short for v in versions] == ["first", "second"]


def test_orderings_registry():
    assert ORDERINGS["semver"] is semantic_version_key
    assert ORDERINGS["date"] is release_date_key
