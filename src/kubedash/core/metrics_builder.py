# src/kubedash/core/metrics_builder.py
"""
Assembles MetricsByPod from raw usage samples returned by the metrics
backend for a batch of pods.

Input series use the Prometheus query result shape:

    {"metric": {"namespace": "prod", "pod": "web-1", ...},
     "values": [[1700000000, "1024"], [1700000060, "2048"], ...]}

Instant query items carrying a single ``"value"`` pair are accepted as well.
"""

import logging
import math
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..models.metrics import MetricResult, MetricsByPod, PodMetrics
from ..utils.date_utils import from_epoch
from .config import config

logger = logging.getLogger(__name__)

PodKey = Tuple[str, str]

_NAMESPACE_LABELS = ("namespace", "kubernetes_namespace", "k8s_namespace")
_POD_LABELS = ("pod", "pod_name", "kubernetes_pod_name")


def _first_label(metric: Mapping[str, Any], names: Tuple[str, ...]) -> Optional[str]:
    for name in names:
        if metric.get(name):
            return metric[name]
    return None


def _parse_sample(sample: Any) -> Optional[Tuple[datetime, int]]:
    """
    Parses a ``[<epoch>, "<value>"]`` pair.
    Returns None for missing, NaN, infinite or negative values.
    """
    try:
        ts, value_str = sample
        number = float(value_str)
        timestamp = from_epoch(ts)
    except (TypeError, ValueError, OverflowError, OSError):
        return None

    # Checked before truncation so that -0.5 is dropped rather than kept as 0.
    if not math.isfinite(number) or number < 0:
        return None
    return timestamp, int(number)


def _collect_samples(series: Optional[Iterable[Mapping[str, Any]]], resource: str) -> Dict[PodKey, Dict[datetime, int]]:
    """
    Groups the samples of every series by pod. Series belonging to the same
    pod (one per container, typically) are summed per timestamp.
    """
    by_pod: Dict[PodKey, Dict[datetime, int]] = defaultdict(lambda: defaultdict(int))
    non_pod_skipped = 0
    malformed_series_count = 0
    malformed_series_examples: List[Any] = []
    malformed_count = 0
    malformed_examples: List[Any] = []

    for item in series or []:
        if not isinstance(item, Mapping):
            malformed_series_count += 1
            if len(malformed_series_examples) < 3:
                malformed_series_examples.append(item)
            continue

        metric = item.get("metric") or {}
        if not isinstance(metric, Mapping):
            metric = {}
        namespace = _first_label(metric, _NAMESPACE_LABELS)
        pod = _first_label(metric, _POD_LABELS)
        if not namespace or not pod:
            logger.debug("Skipping non-pod %s series: %s", resource, metric)
            non_pod_skipped += 1
            continue

        samples = item.get("values")
        if samples is None and item.get("value") is not None:
            samples = [item["value"]]
        if samples is not None and not isinstance(samples, (list, tuple)):
            malformed_series_count += 1
            if len(malformed_series_examples) < 3:
                malformed_series_examples.append(item)
            continue

        for sample in samples or []:
            parsed = _parse_sample(sample)
            if parsed is None:
                malformed_count += 1
                if len(malformed_examples) < 3:
                    malformed_examples.append({"namespace": namespace, "pod": pod, "sample": sample})
                continue
            timestamp, value = parsed
            by_pod[(namespace, pod)][timestamp] += value

    if non_pod_skipped:
        logger.info("Skipped %d %s series without pod/namespace labels.", non_pod_skipped, resource)
    if malformed_series_count:
        logger.warning(
            "Skipped %d malformed %s series. Examples: %s",
            malformed_series_count,
            resource,
            malformed_series_examples,
        )
    if malformed_count:
        logger.warning(
            "Skipped %d malformed %s sample(s). Examples: %s",
            malformed_count,
            resource,
            malformed_examples,
        )
    return by_pod


def _to_history(samples: Optional[Dict[datetime, int]], history_length: int) -> List[MetricResult]:
    if not samples:
        return []
    ordered = sorted(samples.items())[-history_length:]
    return [MetricResult(timestamp=timestamp, value=value) for timestamp, value in ordered]


def build_metrics_by_pod(
    cpu_series: Optional[Iterable[Mapping[str, Any]]] = None,
    memory_series: Optional[Iterable[Mapping[str, Any]]] = None,
    history_length: Optional[int] = None,
) -> MetricsByPod:
    """
    Builds the metrics lookup table for a batch of pods.

    Args:
        cpu_series: CPU usage series (nanoseconds of CPU time).
        memory_series: Memory usage series (bytes).
        history_length: Number of most recent samples kept per history.
            Defaults to ``config.METRICS_HISTORY_LENGTH``.

    Returns:
        A MetricsByPod with one PodMetrics per pod that returned at least one
        usable sample. The current usage of each resource is its most recent
        sample, or None when the pod returned no sample for it.
    """
    if history_length is None:
        history_length = config.METRICS_HISTORY_LENGTH
    if history_length < 1:
        raise ValueError(f"history_length must be at least 1, got {history_length}")

    cpu_by_pod = _collect_samples(cpu_series, "CPU")
    memory_by_pod = _collect_samples(memory_series, "memory")

    metrics_map: Dict[str, Dict[str, PodMetrics]] = {}
    for namespace, pod in sorted(set(cpu_by_pod) | set(memory_by_pod)):
        cpu_history = _to_history(cpu_by_pod.get((namespace, pod)), history_length)
        memory_history = _to_history(memory_by_pod.get((namespace, pod)), history_length)
        metrics_map.setdefault(namespace, {})[pod] = PodMetrics(
            cpu_usage=cpu_history[-1].value if cpu_history else None,
            memory_usage=memory_history[-1].value if memory_history else None,
            cpu_usage_history=cpu_history,
            memory_usage_history=memory_history,
        )

    result = MetricsByPod(metrics_map=metrics_map)
    logger.debug(
        "Assembled metrics for %d pod(s) across %d namespace(s).",
        result.pod_count,
        len(metrics_map),
    )
    return result
