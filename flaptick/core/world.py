"""World - entity and component storage with queries."""

from __future__ import annotations

from typing import Any, Generator, TypeVar, cast

from flaptick.core.types import DeadEntityError, EntityId, MissingSingletonError

T = TypeVar("T")


class World:
    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()

    def spawn(self, *components: Any) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        for component in components:
            self.attach(eid, component)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._alive.discard(entity_id)
        for store in self._components.values():
            store.pop(entity_id, None)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to dead entity {entity_id}",
            )
        self._components.setdefault(ctype, {})[entity_id] = component

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        store = self._components.get(component_type)
        if store is not None:
            store.pop(entity_id, None)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._alive:
            raise DeadEntityError(
                entity_id, f"Entity {entity_id} is not alive"
            )
        store = self._components.get(component_type)
        if store is None or entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id])

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        if entity_id not in self._alive:
            return False
        store = self._components.get(component_type)
        return store is not None and entity_id in store

    def query(
        self, *ctypes: type
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]:
        if not ctypes:
            return

        base_store = self._components.get(ctypes[0])
        if base_store is None:
            return

        for eid in list(base_store):
            if eid not in self._alive:
                continue
            components: list[Any] = []
            for ctype in ctypes:
                store = self._components.get(ctype)
                if store is None or eid not in store:
                    break
                components.append(store[eid])
            else:
                yield eid, tuple(components)

    def single(self, *ctypes: type) -> tuple[EntityId, tuple[Any, ...]]:
        """Return the one entity matching ``ctypes``.

        Raises MissingSingletonError when zero or several entities match.
        """
        matches = list(self.query(*ctypes))
        names = ", ".join(c.__name__ for c in ctypes)
        if not matches:
            raise MissingSingletonError(f"No entity has ({names})")
        if len(matches) > 1:
            raise MissingSingletonError(
                f"Expected one entity with ({names}), found {len(matches)}"
            )
        return matches[0]

    def count(self, *ctypes: type) -> int:
        return sum(1 for _ in self.query(*ctypes))

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._alive)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._alive
