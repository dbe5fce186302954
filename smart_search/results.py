"""
Maple Search - Result Items
===========================
Rows handed to the presentation layer.
"""

import uuid
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass(eq=False)
class ResultItem:
    """
    One row of the result list.

    Identity is the generated id only; two rows with the same title from
    different searches are different rows.
    """
    icon: str
    title: str
    shortcut: Optional[str]
    action: Callable[[], None]
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def activate(self) -> None:
        self.action()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
