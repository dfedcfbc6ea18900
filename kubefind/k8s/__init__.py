"""Kubernetes interaction module."""

from .client import K8sClient
from .collector import ResourceCollector
from .provider import ResourceProvider
from .selector import ResourceSelector

__all__ = ["K8sClient", "ResourceCollector", "ResourceProvider", "ResourceSelector"]
