from dataclasses import dataclass
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class RelationViews:
    forward: Mapping[Any, tuple]    # Entity A → Entity B, ordered and deduplicated
    reverse: Mapping[Any, tuple]    # Entity B → Entity A, ordered and deduplicated

    # read-only mapping proxies are not hashable
    __hash__ = None

    def __iter__(self) -> Iterator[Mapping[Any, tuple]]:
        # allows `forward, reverse = materialize(...)`
        yield self.forward
        yield self.reverse
