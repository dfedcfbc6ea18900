"""Kubernetes resource models."""

from enum import Enum
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field


class ResourceKind(str, Enum):
    """Resource kinds kubefind can search, in collection order."""

    PODS = "Pods"
    CONFIG_MAPS = "ConfigMaps"
    DEPLOYMENTS = "Deployments"
    STATEFUL_SETS = "StatefulSets"
    CRON_JOBS = "CronJobs"

    @property
    def resource(self) -> str:
        """kubectl resource name used to list this kind."""
        return _KUBECTL_RESOURCES[self]


_KUBECTL_RESOURCES: Dict[ResourceKind, str] = {
    ResourceKind.PODS: "pods",
    ResourceKind.CONFIG_MAPS: "configmaps",
    ResourceKind.DEPLOYMENTS: "deployments.apps",
    ResourceKind.STATEFUL_SETS: "statefulsets.apps",
    ResourceKind.CRON_JOBS: "cronjobs.batch",
}


class K8sResource(BaseModel):
    """Raw Kubernetes object as returned by the API server."""

    body: Dict[str, Any] = Field(default_factory=dict)

    @property
    def metadata(self) -> Dict[str, Any]:
        return self.body.get("metadata") or {}

    @property
    def name(self) -> str:
        """Get resource name."""
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> str:
        """Get resource namespace."""
        return self.metadata.get("namespace") or ""

    def to_text(self) -> str:
        """Serialize the whole object, keeping the server's key order."""
        return yaml.safe_dump(
            self.body, default_flow_style=False, sort_keys=False, allow_unicode=True
        )


class KubernetesObject(BaseModel):
    """Uniform, searchable representation of a collected resource."""

    kind: str
    name: str = Field(min_length=1)
    namespace: str = ""
    text: str = ""

    @property
    def exclusion_key(self) -> str:
        """Key tested against the exclude pattern."""
        return f"{self.namespace}/{self.name}"

    @classmethod
    def from_resource(cls, kind: ResourceKind, resource: K8sResource) -> "KubernetesObject":
        return cls(
            kind=kind.value,
            name=resource.name,
            namespace=resource.namespace,
            text=resource.to_text(),
        )
