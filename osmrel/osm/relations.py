from __future__ import annotations

from osmrel.osm.types import Relation
from osmrel.osm.types import RelationId


def id_version_key(relation: Relation) -> tuple[RelationId, int]:
    return relation.id_version


def sort_by_id_version(relations: list[Relation]) -> None:
    """Sort in place by id, then by version.

    Only the positions change; the relation objects themselves are not copied.
    """
    relations.sort(key=id_version_key)


class Relations(list[Relation]):
    def sort_by_id_version(self) -> None:
        sort_by_id_version(self)
