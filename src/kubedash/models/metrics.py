# src/kubedash/models/metrics.py
"""
This module defines the Pydantic data models for pod resource usage shown by
the dashboard: timestamped samples, the per-pod usage snapshot with its short
history, and the namespace/pod keyed lookup table built for a batch of pods.

The models only describe the shape of the data. Assembling them from raw
samples is done by ``kubedash.core.metrics_builder``.
"""

from datetime import datetime
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Tuple

from pydantic import Field, NonNegativeInt, field_serializer, field_validator

from ..utils.date_utils import as_utc, format_rfc3339
from .base import ViewModel


class MetricResult(ViewModel):
    """
    A sample measurement of a non-negative integer quantity, for example the
    memory usage in bytes observed at some moment.
    """

    timestamp: datetime = Field(..., description="When the sample was observed (UTC).")
    value: NonNegativeInt = Field(..., description="The observed quantity.")

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value: datetime) -> datetime:
        return as_utc(value)

    @field_serializer("timestamp", when_used="json")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_rfc3339(value)


class PodMetrics(ViewModel):
    """
    CPU and memory usage of a single pod.

    A usage of ``None`` means the pod has not been measured yet, which is not
    the same as a measured usage of 0.
    """

    cpu_usage: Optional[NonNegativeInt] = Field(
        None, description="Most recent CPU usage on all cores, in nanoseconds."
    )
    memory_usage: Optional[NonNegativeInt] = Field(None, description="Most recent memory usage, in bytes.")
    cpu_usage_history: Tuple[MetricResult, ...] = Field(
        default_factory=tuple, description="CPU usage samples over a short period, oldest first."
    )
    memory_usage_history: Tuple[MetricResult, ...] = Field(
        default_factory=tuple, description="Memory usage samples over a short period, oldest first."
    )

    @field_validator("cpu_usage_history", "memory_usage_history")
    @classmethod
    def check_chronological(cls, history: Tuple[MetricResult, ...]) -> Tuple[MetricResult, ...]:
        for previous, current in zip(history, history[1:]):
            if current.timestamp < previous.timestamp:
                raise ValueError(
                    f"history samples must be in non-decreasing timestamp order "
                    f"({current.timestamp.isoformat()} follows {previous.timestamp.isoformat()})"
                )
        return history


PodMetricsMap = Mapping[str, Mapping[str, PodMetrics]]


class MetricsByPod(ViewModel):
    """Pod metrics keyed by namespace, then by pod name."""

    _always_emit: ClassVar = frozenset({"metrics_map", "metricsMap"})

    metrics_map: PodMetricsMap = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("metrics_map")
    @classmethod
    def freeze_metrics_map(cls, value: PodMetricsMap) -> PodMetricsMap:
        return MappingProxyType({namespace: MappingProxyType(dict(pods)) for namespace, pods in value.items()})

    @field_serializer("metrics_map", mode="wrap")
    def serialize_metrics_map(self, value, handler):
        return handler({namespace: dict(pods) for namespace, pods in value.items()})

    def get(self, namespace: str, pod_name: str) -> Optional[PodMetrics]:
        """Returns the metrics of a pod, or None when no data was returned for it."""
        return self.metrics_map.get(namespace, {}).get(pod_name)

    @property
    def pod_count(self) -> int:
        return sum(len(pods) for pods in self.metrics_map.values())
