from dataclasses import dataclass

from relation_materializer.entity_types.record import Record


@dataclass(frozen=True)
class House(Record):
    address: str
    code: str
