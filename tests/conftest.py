"""Test configuration and fixtures."""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from kubefind.k8s.provider import ResourceProvider
from kubefind.model.kubernetes import K8sResource, KubernetesObject, ResourceKind
from kubefind.model.store import ObjectStore


def make_item(name: str, namespace: str = "default", **fields: Any) -> Dict[str, Any]:
    """Build a decoded API object with the given metadata."""
    item = {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": {"name": name, "namespace": namespace},
    }
    item.update(fields)
    return item


class FakeProvider(ResourceProvider):
    """In-memory provider recording every list call."""

    def __init__(
        self,
        items: Optional[Dict[ResourceKind, List[Dict[str, Any]]]] = None,
        failures: Optional[Dict[ResourceKind, Exception]] = None,
    ):
        self.items = items or {}
        self.failures = failures or {}
        self.calls: List[Tuple[ResourceKind, Optional[str]]] = []

    def list_objects(
        self, kind: ResourceKind, namespace: Optional[str] = None
    ) -> List[K8sResource]:
        self.calls.append((kind, namespace))
        if kind in self.failures:
            raise self.failures[kind]
        return [K8sResource(body=item) for item in self.items.get(kind, [])]

    @property
    def called_kinds(self) -> List[ResourceKind]:
        return [kind for kind, _ in self.calls]


@pytest.fixture
def fake_provider():
    """Provider returning two objects for every kind."""
    items = {
        kind: [
            make_item(f"{kind.value.lower()}-a", "ns1", data={"image": "nginx:1.21"}),
            make_item(f"{kind.value.lower()}-b", "ns2", data={"image": "redis:7"}),
        ]
        for kind in ResourceKind
    }
    return FakeProvider(items)


@pytest.fixture
def sample_store():
    """Store holding the single object from the basic search scenario."""
    return ObjectStore(
        [KubernetesObject(kind="Pods", name="p1", namespace="ns1", text="foo BAR foo")]
    )
