# File: gwprimer/app/core/primer/mapping.py
# Version: v0.1.0
"""
Locate a spliced CDS inside its parent gene sequence.

Coordinates are 0-based with `end` exclusive.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import AmbiguousMapping, MappingNotFound
from .sequence import search_sequence


@dataclass(frozen=True)
class CdsLocation:
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


def map_cds(gene_seq: str, cds_seq: str, identifier: str = "") -> CdsLocation:
    """Return the unique location of `cds_seq` in `gene_seq`."""
    hits = search_sequence(gene_seq, cds_seq)
    if not hits:
        raise MappingNotFound(identifier)
    if len(hits) > 1:
        raise AmbiguousMapping(identifier, hits)
    end = hits[0]
    return CdsLocation(start=end - len(cds_seq), end=end)
