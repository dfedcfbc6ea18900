"""In-memory store of collected objects."""

from typing import Iterable, Iterator, List

from .kubernetes import KubernetesObject


class ObjectStore:
    """Ordered, append-only collection of collected objects.

    Objects keep the order they were fetched in. Nothing is deduplicated, so a
    provider returning the same object twice yields two entries.
    """

    def __init__(self, objects: Iterable[KubernetesObject] = ()):
        self._objects: List[KubernetesObject] = list(objects)

    def append(self, obj: KubernetesObject) -> None:
        self._objects.append(obj)

    def extend(self, objects: Iterable[KubernetesObject]) -> None:
        self._objects.extend(objects)

    def kinds(self) -> List[str]:
        """Distinct kinds present, in first-seen order."""
        seen: List[str] = []
        for obj in self._objects:
            if obj.kind not in seen:
                seen.append(obj.kind)
        return seen

    def __iter__(self) -> Iterator[KubernetesObject]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __getitem__(self, index: int) -> KubernetesObject:
        return self._objects[index]

    def __repr__(self) -> str:
        return f"ObjectStore({len(self._objects)} objects)"
