"""Search run: validate settings, connect, collect and report."""

from typing import List, Optional

from ..errors import ConfigurationError
from ..k8s.client import K8sClient
from ..k8s.collector import ResourceCollector
from ..k8s.provider import ResourceProvider
from ..k8s.selector import WILDCARD, ResourceSelector
from ..model.search import DEFAULT_CONTEXT_RADIUS, SearchConfig, SearchMatch
from ..model.store import ObjectStore
from ..utils.logger import get_logger
from .matcher import ObjectMatcher

logger = get_logger(__name__)


class Application:
    """Single search run over one cluster.

    ``validate`` and ``init`` must succeed before ``run``; every failure is
    raised to the caller and nothing is retried.
    """

    def __init__(
        self,
        kubeconfig: Optional[str] = None,
        where: str = WILDCARD,
        find: str = "",
        namespace: Optional[str] = None,
        exclude: Optional[str] = None,
        context: Optional[str] = None,
        context_radius: int = DEFAULT_CONTEXT_RADIUS,
    ):
        self.kubeconfig = kubeconfig
        self.where = where
        self.find = find
        self.namespace = namespace or ""
        self.exclude = exclude or ""
        self.context = context
        self.context_radius = context_radius

        self.config: Optional[SearchConfig] = None
        self.provider: Optional[ResourceProvider] = None
        self.store = ObjectStore()

    def validate(self) -> None:
        """Check required settings before touching the cluster."""
        if not self.kubeconfig:
            raise ConfigurationError("kubeconfig is required")

        if not self.where:
            raise ConfigurationError("where-to-search is required")

        if not self.find:
            raise ConfigurationError("what-to-search is required")

    def init(self, provider: Optional[ResourceProvider] = None) -> None:
        """Compile patterns and build the cluster client.

        A ``provider`` may be passed in place of the kubectl client.
        """
        self.config = SearchConfig.compile(self.find, self.exclude, self.context_radius)
        self.provider = provider or K8sClient(
            kubeconfig=self.kubeconfig, context=self.context, namespace=self.namespace or None
        )

    def run(self) -> List[SearchMatch]:
        """Collect every eligible kind into a fresh store, then report matches."""
        if self.config is None or self.provider is None:
            raise ConfigurationError("application is not initialized")

        selector = ResourceSelector(self.where)
        kinds = ", ".join(kind.value for kind in selector.eligible_kinds())
        logger.debug(f"Kinds to search: {kinds or 'none'}")

        self.store = ObjectStore()
        collector = ResourceCollector(
            provider=self.provider,
            selector=selector,
            namespace=self.namespace,
            store=self.store,
        )
        collector.collect()

        logger.debug(
            f"Searching {len(self.store)} objects of {self.store.kinds()} for {self.find!r}"
        )
        return ObjectMatcher(self.config).report(self.store)
