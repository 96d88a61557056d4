from dataclasses import dataclass
from typing import Hashable


@dataclass(frozen=True)
class Link:
    a_id: Hashable      # id on the forward side
    b_id: Hashable      # id on the reverse side
