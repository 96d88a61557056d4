import logging
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterable, Mapping, Optional, TypeVar

from relation_materializer.entity_types.access import Access
from relation_materializer.entity_types.house import House
from relation_materializer.entity_types.person import Person
from relation_materializer.materializer.link import Link
from relation_materializer.materializer.relation_views import RelationViews

logger = logging.getLogger(__name__)

T = TypeVar("T")


def keep_first(existing: T, incoming: T) -> T:
    """Tie-break for entities sharing an id: the first one seen wins."""
    return existing


def entity_id(entity: Any) -> Hashable:
    return entity.id


def require_input(name: str, value: Optional[Iterable]) -> None:
    if value is None:
        raise ValueError(f"{name} must be a collection, got None")


def build_index(
    entities: Iterable[T],
    key: Callable[[T], Hashable] = entity_id,
    merge: Callable[[T, T], T] = keep_first,
) -> dict[Hashable, T]:
    index: dict[Hashable, T] = {}
    for entity in entities:
        k = key(entity)
        if k in index:
            index[k] = merge(index[k], entity)
        else:
            index[k] = entity
    return index


def add_to_view(view: dict[Any, dict[Any, None]], key: Any, value: Any) -> None:
    # dict values act as insertion-ordered sets
    view.setdefault(key, {})[value] = None


def ensure_keys(view: dict[Any, dict[Any, None]], entities: Iterable[Any]) -> None:
    for entity in entities:
        view.setdefault(entity, {})


def freeze(view: dict[Any, dict[Any, None]]) -> Mapping[Any, tuple]:
    return MappingProxyType({k: tuple(v) for k, v in view.items()})


def materialize(
    entities_a: Iterable[Any],
    entities_b: Iterable[Any],
    links: Iterable[Link],
) -> RelationViews:
    """
    Materialize a many-to-many relation as two one-to-many views.

    Links are resolved against id indexes of both entity collections. A link
    whose a_id or b_id is unknown is dropped without error. Every input entity
    ends up as a key of its view, with an empty tuple when it has no links.
    """
    require_input("entities_a", entities_a)
    require_input("entities_b", entities_b)
    require_input("links", links)

    # inputs may be one-shot iterables; the fix-up pass needs them again
    entities_a = list(entities_a)
    entities_b = list(entities_b)

    # 1) index both sides by id, first occurrence wins
    index_a = build_index(entities_a)
    index_b = build_index(entities_b)

    # 2) resolve links in input order
    forward: dict[Any, dict[Any, None]] = {}
    reverse: dict[Any, dict[Any, None]] = {}
    seen = dropped = 0
    for link in links:
        seen += 1
        a = index_a.get(link.a_id)
        b = index_b.get(link.b_id)
        if a is None or b is None:
            dropped += 1
            logger.debug("dropping dangling link a_id=%r b_id=%r", link.a_id, link.b_id)
            continue
        add_to_view(forward, a, b)
        add_to_view(reverse, b, a)

    # 3) entities without links still get an (empty) entry
    ensure_keys(forward, entities_a)
    ensure_keys(reverse, entities_b)

    logger.debug(
        "materialized %d forward and %d reverse keys from %d links (%d dropped)",
        len(forward), len(reverse), seen, dropped,
    )
    return RelationViews(forward=freeze(forward), reverse=freeze(reverse))


def materialize_people_houses(
    people: Iterable[Person],
    houses: Iterable[House],
    accesses: Iterable[Access],
) -> RelationViews:
    require_input("people", people)
    require_input("houses", houses)
    require_input("accesses", accesses)
    return materialize(people, houses, (access.to_link() for access in accesses))
