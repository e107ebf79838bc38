# src/kubedash/core/selector.py
"""
Label selector matching, used to find the objects (usually pods) targeted by
a service or a controller.
"""

from typing import Iterable, List, Mapping, Optional

from ..models.meta import ObjectMeta


def is_selector_matching(
    label_selector: Optional[Mapping[str, str]],
    tested_object_labels: Optional[Mapping[str, str]],
) -> bool:
    """
    Returns True when an object with the given selector targets the tested
    object, i.e. every selector entry is present with the same value in the
    tested object's labels. Extra labels on the tested object are ignored.
    """
    # An object without a selector targets nothing.
    if not label_selector:
        return False

    labels = tested_object_labels or {}
    for label, value in label_selector.items():
        if label not in labels or labels[label] != value:
            return False
    return True


def filter_by_selector(
    label_selector: Optional[Mapping[str, str]], metas: Iterable[ObjectMeta]
) -> List[ObjectMeta]:
    """Returns the objects matched by the selector, in their original order."""
    return [meta for meta in metas if is_selector_matching(label_selector, meta.labels)]
