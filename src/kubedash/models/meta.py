# src/kubedash/models/meta.py
"""
Normalized projections of Kubernetes object metadata.

Every resource view served by the dashboard embeds an ObjectMeta and a
TypeMeta, and every list view embeds a ListMeta. They are built once per
fetch from the raw metadata returned by the Kubernetes client and are
read-only afterwards.
"""

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from kubernetes_asyncio.client import V1ObjectMeta
from pydantic import Field, field_serializer, field_validator

from ..utils.date_utils import format_rfc3339, parse_rfc3339
from .base import ViewModel
from .resource_kind import ResourceKind


class ObjectMeta(ViewModel):
    """Metadata about an instance of a resource."""

    name: str = Field("", description="Unique within a namespace.")
    namespace: str = Field(
        "",
        description="Namespace of the object. Empty for cluster-scoped objects; never rewritten to 'default'.",
    )
    labels: Mapping[str, str] = Field(
        default_factory=lambda: MappingProxyType({}), description="Key/value pairs used for selection."
    )
    annotations: Mapping[str, str] = Field(
        default_factory=lambda: MappingProxyType({}), description="Unstructured key/value data."
    )
    creation_timestamp: Optional[datetime] = Field(
        None, description="Server time at which the object was created."
    )

    @field_validator("labels", "annotations")
    @classmethod
    def freeze_mapping(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("labels", "annotations", mode="wrap")
    def serialize_mapping(self, value, handler):
        return handler(dict(value))

    @field_serializer("creation_timestamp", when_used="json-unless-none")
    def serialize_creation_timestamp(self, value: datetime) -> str:
        return format_rfc3339(value)


class TypeMeta(ViewModel):
    """Carries the resource kind so generic consumers can dispatch on it."""

    kind: str = Field("", description="Lowercase resource kind, see ResourceKind.")

    @field_validator("kind", mode="before")
    @classmethod
    def kind_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value


class ListMeta(ViewModel):
    """Pagination information for a list of objects."""

    _always_emit: ClassVar = frozenset({"total_items", "totalItems"})

    total_items: int = Field(0, ge=0, description="Total number of items, independent of the current page.")
def _read(raw: Any, attribute: str, key: str) -> Any:
    # Raw API payloads are dicts with camelCase keys; client models expose snake_case attributes.
    if isinstance(raw, Mapping):
        return raw.get(key)
    return getattr(raw, attribute, None)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _text_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, Mapping):
        return {}
    return {_text(key): _text(item) for key, item in value.items()}


def _timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_rfc3339(value)
    return None


def new_object_meta(raw: Union[V1ObjectMeta, Mapping[str, Any], None]) -> ObjectMeta:
    """
    Creates an ObjectMeta from Kubernetes object metadata.

    Args:
        raw: A ``kubernetes_asyncio`` ``V1ObjectMeta`` (or any object with the
            same attributes) or the ``metadata`` dict of a raw API response.

    Returns:
        An ObjectMeta holding copies of the name, namespace, labels,
        annotations and creation timestamp. Missing values become empty,
        null label values become "" and other values are converted to
        strings; an unparsable timestamp becomes None. Never raises.
    """
    if raw is None:
        return ObjectMeta()

    return ObjectMeta(
        name=_text(_read(raw, "name", "name")),
        namespace=_text(_read(raw, "namespace", "namespace")),
        labels=_text_map(_read(raw, "labels", "labels")),
        annotations=_text_map(_read(raw, "annotations", "annotations")),
        creation_timestamp=_timestamp(_read(raw, "creation_timestamp", "creationTimestamp")),
    )


def new_type_meta(kind: Union[ResourceKind, str]) -> TypeMeta:
    """Creates a TypeMeta for the given resource kind."""
    return TypeMeta(kind=kind)


def new_list_meta(total_items: int) -> ListMeta:
    return ListMeta(total_items=total_items)
