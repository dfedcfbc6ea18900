"""Interface for anything that can list cluster resources."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..model.kubernetes import K8sResource, ResourceKind


class ResourceProvider(ABC):
    """Lists raw objects of one kind in a namespace."""

    @abstractmethod
    def list_objects(
        self, kind: ResourceKind, namespace: Optional[str] = None
    ) -> List[K8sResource]:
        """Return the objects in server order; raise on any failure."""
        pass

