"""
Maps index hits to catalog entity kinds using the configured partition table.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..models.base import EntityKind, PartitionBinding
from ..schemas.search import IndexHit


class HitClassifier:
    def __init__(self, bindings: Iterable[PartitionBinding]):
        self.bindings: List[PartitionBinding] = list(bindings)
        self._table: Dict[Tuple[str, str], EntityKind] = {
            (binding.index, binding.type_tag): binding.kind for binding in self.bindings
        }

    def classify(self, hit: IndexHit) -> Optional[EntityKind]:
        """Entity kind of the hit, or None when (index, type) is not in the table."""
        return self._table.get((hit.index, hit.type))

    def partitions_for(self, kinds: Optional[Iterable[EntityKind]] = None) -> List[str]:
        """Index names bound to the given kinds (all kinds when None), in table order."""
        wanted = set(kinds) if kinds is not None else None
        partitions: List[str] = []
        for binding in self.bindings:
            if wanted is not None and binding.kind not in wanted:
                continue
            if binding.index not in partitions:
                partitions.append(binding.index)
        return partitions
