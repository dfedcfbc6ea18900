"""Data models for kubefind."""

from .kubernetes import K8sResource, KubernetesObject, ResourceKind
from .search import ReportFormat, SearchConfig, SearchMatch
from .store import ObjectStore

__all__ = [
    "K8sResource",
    "KubernetesObject",
    "ResourceKind",
    "ReportFormat",
    "SearchConfig",
    "SearchMatch",
    "ObjectStore",
]
