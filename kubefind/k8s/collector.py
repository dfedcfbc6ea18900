"""Collects resources of the selected kinds into an object store."""

from typing import Optional

from ..errors import CollectionError
from ..model.kubernetes import KubernetesObject, ResourceKind
from ..model.store import ObjectStore
from ..utils.logger import get_logger
from .provider import ResourceProvider
from .selector import ResourceSelector

logger = get_logger(__name__)


class ResourceCollector:
    """Fetches every eligible kind, one after another, into a store."""

    def __init__(
        self,
        provider: ResourceProvider,
        selector: ResourceSelector,
        namespace: Optional[str] = None,
        store: Optional[ObjectStore] = None,
    ):
        self.provider = provider
        self.selector = selector
        self.namespace = namespace or ""
        self.store = store if store is not None else ObjectStore()

    def collect(self) -> ObjectStore:
        """Collect all kinds in precedence order.

        The first failing kind aborts the run; objects collected before it
        stay in the store.
        """
        for kind in ResourceKind:
            self.collect_kind(kind)

        logger.debug(f"Collected {len(self.store)} objects")
        return self.store

    def collect_kind(self, kind: ResourceKind) -> int:
        """Collect a single kind and return how many objects were added."""
        if not self.selector.is_eligible(kind):
            return 0

        logger.info(f"Getting {kind.value} ...")

        try:
            resources = self.provider.list_objects(kind, self.namespace or None)
            count = 0
            for resource in resources:
                self.store.append(KubernetesObject.from_resource(kind, resource))
                count += 1
        except Exception as e:
            raise CollectionError(kind.value, e) from e

        return count
