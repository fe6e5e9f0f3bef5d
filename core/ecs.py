"""
core/ecs.py — Entity-Component-System

Entities are ints. Components are any object, stored by type.
Query by component types to get matching entities.

    w = World()
    e = w.spawn()
    w.add(e, Position(32.0, 64.0))
    w.add(e, Collider(8, 8))

    for eid, pos, col in w.query(Position, Collider):
        pos.x += 1

Singletons (the camera, the tileset, debug flags) are *resources*:
one instance per type, set with ``set_res`` and read with ``res``.
They live apart from the component stores, so no query ever sees them.

Entities are created once at startup and live for the whole run;
there is no despawn.
"""

from __future__ import annotations
from typing import Any, Iterator


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}
        self._resources: dict[type, Any] = {}

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._stores.setdefault(type(comp), {})[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    def has(self, eid: int, comp_type: type) -> bool:
        return eid in self._stores.get(comp_type, {})

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for entities that have ALL types.

        Entities come out in spawn order.
        """
        if not types:
            return
        first, *rest = (self._stores.get(t, {}) for t in types)
        for eid, comp in first.items():
            if all(eid in store for store in rest):
                yield (eid, comp, *(store[eid] for store in rest))

    def query_one(self, *types: type) -> tuple | None:
        """Return first match or None."""
        return next(self.query(*types), None)

    def all_of(self, comp_type: type) -> Iterator[tuple[int, Any]]:
        """Yield (eid, component) for every entity with this type."""
        yield from self._stores.get(comp_type, {}).items()

    # -- Resources --

    def set_res(self, resource: Any):
        self._resources[type(resource)] = resource

    def res(self, res_type: type) -> Any | None:
        return self._resources.get(res_type)
