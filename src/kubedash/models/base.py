# src/kubedash/models/base.py
"""
Common base for every view model exposed to dashboard renderers.

View models are immutable once built and render to the camelCase wire shape
consumed by the frontend. Empty or absent fields are dropped from the
rendered output unless the model lists them in ``_always_emit``.
"""

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

_EMPTY_VALUES = (None, "", {}, [], ())


class ViewModel(BaseModel):
    """Frozen pydantic model with camelCase wire aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    # Keys (field name and wire alias) rendered even when empty.
    _always_emit: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler) -> Dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if key in self._always_emit or value not in _EMPTY_VALUES}

    def to_dict(self) -> Dict[str, Any]:
        """Render the JSON-compatible wire representation."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
