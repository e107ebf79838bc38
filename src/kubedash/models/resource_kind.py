# src/kubedash/models/resource_kind.py

from enum import Enum


class ResourceKind(str, Enum):
    """
    Unique name for each resource category supported by the dashboard.

    Generic code (a deleter, a renderer) dispatches on these values, so the
    lowercase strings are part of the wire contract.
    """

    CONFIG_MAP = "configmap"
    DAEMON_SET = "daemonset"
    DEPLOYMENT = "deployment"
    EVENT = "event"
    HORIZONTAL_POD_AUTOSCALER = "horizontalpodautoscaler"
    INGRESS = "ingress"
    JOB = "job"
    LIMIT_RANGE = "limitrange"
    NAMESPACE = "namespace"
    NODE = "node"
    PERSISTENT_VOLUME_CLAIM = "persistentvolumeclaim"
    PERSISTENT_VOLUME = "persistentvolume"
    POD = "pod"
    REPLICA_SET = "replicaset"
    REPLICATION_CONTROLLER = "replicationcontroller"
    RESOURCE_QUOTA = "resourcequota"
    SECRET = "secret"
    SERVICE = "service"
    STATEFUL_SET = "statefulset"
