from dataclasses import dataclass

from relation_materializer.materializer.link import Link


@dataclass(frozen=True)
class Access:
    person_id: int
    house_id: int

    def to_link(self) -> Link:
        # person is the forward side, house the reverse side
        return Link(a_id=self.person_id, b_id=self.house_id)
