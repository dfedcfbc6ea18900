"""Resource kind selection."""

from typing import FrozenSet, List, Union

from ..model.kubernetes import ResourceKind

WILDCARD = "*"


class ResourceSelector:
    """Decides which resource kinds take part in a search.

    The scope is a comma-separated, case-insensitive list of kind names such as
    ``"pods,cronjobs"``. ``*`` selects every kind. Names that are not known
    kinds are ignored.
    """

    def __init__(self, scope: str):
        self.scope = scope
        self.tokens: FrozenSet[str] = frozenset(
            token.strip() for token in scope.lower().split(",") if token.strip()
        )

    @property
    def wildcard(self) -> bool:
        return WILDCARD in self.tokens

    def is_eligible(self, kind: Union[ResourceKind, str]) -> bool:
        """Check whether ``kind`` should be collected."""
        if self.wildcard:
            return True

        name = kind.value if isinstance(kind, ResourceKind) else kind
        return name.lower() in self.tokens

    def eligible_kinds(self) -> List[ResourceKind]:
        return [kind for kind in ResourceKind if self.is_eligible(kind)]
