"""Poem entity - immutable catalog entry"""

from dataclasses import dataclass
from typing import Optional

from ..value_objects.entity_ids import PoemId


@dataclass(frozen=True)
class Poem:
    id: Optional[PoemId]
    title: str
    slug: str
    year: int
    external_link: str
    context: str
