from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from enum import Enum

# A relation is uniquely identified by id + version, not by id alone.
RelationId = int
UserId = int
ChangesetId = int

Tags = dict[str, str]


class MemberType(Enum):
    NODE = "node"
    WAY = "way"
    RELATION = "relation"


def parse_member_type(value: str) -> MemberType:
    match value.lower():
        case MemberType.NODE.value:
            return MemberType.NODE
        case MemberType.WAY.value:
            return MemberType.WAY
        case MemberType.RELATION.value:
            return MemberType.RELATION
        case _:
            raise ValueError(f"Unknown member type: {value}")


@dataclass(frozen=True)
class Member:
    type: MemberType
    ref: int
    role: str = ""


@dataclass
class Relation:
    """A versioned collection of nodes, ways and other relations with its edit attribution."""

    id: RelationId
    version: int
    user: str = ""
    user_id: UserId = 0
    visible: bool = True
    changeset_id: ChangesetId = 0
    timestamp: datetime | None = None
    tags: Tags = field(default_factory=dict)
    # order matters, e.g. the ways forming a route
    members: list[Member] = field(default_factory=list)

    @property
    def id_version(self) -> tuple[RelationId, int]:
        return self.id, self.version
