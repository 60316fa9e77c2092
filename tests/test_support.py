from __future__ import annotations

import pytest

from cani.datasource import DataStore
from cani.model import Feature
from cani.support import current_support, features_for, support_in, support_legend


def _feature(support: dict[tuple[str, str], str]) -> Feature:
    return Feature(name="f", title="F", status="wd", percent=1.0, support=support)


def test_support_in_exact_version(store: DataStore) -> None:
    flexbox = store.features[0]
    assert support_in(flexbox, "ie", "6") == "n"
    assert support_in(flexbox, "IE", "11") == "x"
    assert support_in(flexbox, "ios_saf", "4.0-4.1") == "y"


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("10", "a"),
        ("12", "a"),
        ("15", "a"),
        ("16", "y"),
        ("99.1", "y"),
        ("4.2.1", "n"),
        ("4.3", "n"),
    ],
)
def test_support_in_version_ranges(version: str, expected: str) -> None:
    feature = _feature({("safari", "10-15"): "a", ("safari", "16+"): "y", ("safari", "4.2-4.3"): "n"})
    assert support_in(feature, "safari", version) == expected


@pytest.mark.parametrize(
    ("browser", "version"),
    [
        ("safari", "9"),
        ("safari", "TP"),
        ("safari", ""),
        ("chrome", "16"),
    ],
)
def test_support_in_uncovered_version_is_unknown(browser: str, version: str) -> None:
    feature = _feature({("safari", "10-15"): "a", ("safari", "16+"): "y"})
    assert support_in(feature, browser, version) == "u"


def test_features_for_groups_in_dataset_order(store: DataStore) -> None:
    ie = store.find_browser("ie")
    assert ie is not None

    grouped = features_for(store.features, ie, "6")

    assert list(grouped) == ["n"]
    assert [summary.title for summary in grouped["n"]] == [
        "CSS Flexible Box Layout Module",
        "Border-radius (rounded corners)",
        ":has() CSS relational pseudo-class",
    ]


def test_features_for_unknown_version(store: DataStore) -> None:
    chrome = store.find_browser("chrome")
    assert chrome is not None

    grouped = features_for(store.features, chrome, "200")

    assert list(grouped) == ["u"]
    assert len(grouped["u"]) == 3


def test_current_support_latest_versions(store: DataStore) -> None:
    flexbox = store.features[0]
    browsers = store.browsers_named(["ie", "chrome", "ios_saf"])

    assert current_support(flexbox, browsers) == ["@ie", "+chr", "+saf.ios"]
    assert current_support(flexbox, browsers, versions=2) == ["-@ie", "++chr", "++saf.ios"]


def test_current_support_pads_missing_stats(store: DataStore) -> None:
    border_radius = store.features[1]
    browsers = store.browsers_named(["ios_saf"])

    assert current_support(border_radius, browsers, versions=2) == ["  saf.ios"]


def test_support_legend_lists_every_type() -> None:
    assert support_legend() == (
        "supported(+) partial(~) unsupported(-) polyfill(#) unknown(?) prefix(@) flag(!)"
    )
