from __future__ import annotations

from typing import Dict, Iterable, List, Set

from routegraph.models import Entity


class AttributeNetwork:
    """Connects entities that share an attribute value.

    Each group of entities with the same (exact) attribute becomes a clique;
    entities in different groups are never connected.
    """

    def __init__(self, entities: Iterable[Entity]):
        self.entities: List[Entity] = list(entities)
        self.groups: Dict[str, List[Entity]] = {}
        self._connect_by_attribute()

    def _connect_by_attribute(self) -> None:
        for entity in self.entities:
            self.groups.setdefault(entity.attribute, []).append(entity)

        for members in self.groups.values():
            for i, a in enumerate(members):
                for b in members[i + 1:]:
                    a.add_connection(b)
                    b.add_connection(a)


class ConnectivityDetector:
    """Collects entities reachable inside a target attribute group.

    ``visited`` lives as long as the detector: an entity reached by one call
    is never returned again until ``reset()`` is called.
    """

    def __init__(self) -> None:
        self.visited: Set[int] = set()

    def reset(self) -> None:
        self.visited.clear()

    def find_connected(self, entities: Iterable[Entity], target: str) -> Set[Entity]:
        target = (target or "").strip().casefold()
        connected: Set[Entity] = set()
        for entity in entities:
            if entity.id in self.visited:
                continue
            if entity.attribute.casefold() == target:
                self._dfs(entity, connected)
        return connected

    def _dfs(self, root: Entity, connected: Set[Entity]) -> None:
        # explicit stack; large groups would overflow the recursion limit
        self.visited.add(root.id)
        stack = [root]
        while stack:
            x = stack.pop()
            connected.add(x)
            for y in x.connections:
                if y.id not in self.visited:
                    self.visited.add(y.id)
                    stack.append(y)
