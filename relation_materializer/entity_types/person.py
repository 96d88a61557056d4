from dataclasses import dataclass

from relation_materializer.entity_types.record import Record


@dataclass(frozen=True)
class Person(Record):
    name: str
    last_name: str
