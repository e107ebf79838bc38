# tests/core/test_selector.py

import pytest

from kubedash.core.selector import filter_by_selector, is_selector_matching
from kubedash.models.meta import ObjectMeta


@pytest.mark.parametrize(
    "selector, labels, expected",
    [
        ({}, {"app": "x"}, False),
        ({}, {}, False),
        (None, {"app": "x"}, False),
        ({"app": "x"}, {"app": "x", "tier": "web"}, True),
        ({"app": "x"}, {"app": "x"}, True),
        ({"app": "x", "tier": "db"}, {"app": "x"}, False),
        ({"app": "x"}, {"app": "y"}, False),
        ({"app": "x"}, {}, False),
        ({"app": "x"}, None, False),
        ({"app": "X"}, {"app": "x"}, False),
        ({"app": "x*"}, {"app": "xyz"}, False),
        ({"app.kubernetes.io/name": "web"}, {"app.kubernetes.io/name": "web"}, True),
    ],
)
def test_is_selector_matching(selector, labels, expected):
    assert is_selector_matching(selector, labels) is expected


@pytest.mark.parametrize(
    "selector, labels",
    [
        ({"app": "x"}, {"app": "x"}),
        ({"app": "x"}, {"app": "y"}),
        ({"app": "x", "tier": "db"}, {"tier": "db"}),
        ({}, {"app": "x"}),
    ],
)
def test_extra_labels_do_not_change_result(selector, labels):
    with_extra = dict(labels, **{"pod-template-hash": "5d8f7"})

    assert is_selector_matching(selector, labels) == is_selector_matching(selector, with_extra)


def test_is_selector_matching_does_not_mutate_inputs():
    selector = {"app": "x"}
    labels = {"app": "x", "tier": "web"}

    is_selector_matching(selector, labels)

    assert selector == {"app": "x"}
    assert labels == {"app": "x", "tier": "web"}


def test_filter_by_selector_keeps_order():
    pods = [
        ObjectMeta(name="web-1", labels={"app": "web", "tier": "frontend"}),
        ObjectMeta(name="db-1", labels={"app": "db"}),
        ObjectMeta(name="web-2", labels={"app": "web"}),
        ObjectMeta(name="bare"),
    ]

    selected = filter_by_selector({"app": "web"}, pods)

    assert [meta.name for meta in selected] == ["web-1", "web-2"]


def test_filter_by_selector_empty_selector_selects_nothing():
    pods = [ObjectMeta(name="web-1", labels={"app": "web"})]

    assert filter_by_selector({}, pods) == []
