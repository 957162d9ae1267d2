# File: gwprimer/app/core/primer/designer.py
# Version: v2.0.0
"""
Gateway primer search & pairing.

What this file does
-------------------
- Maps each CDS to its gene sequence (must be unique).
- Builds forward/reverse seed windows according to the fusion modes and turns
  them into Tm-indexed candidate tables (see `generator.py`).
- Pairs forward and reverse Tms with one of two policies:
  * closest: only the combinations with the smallest |Tm_f - Tm_r|
  * within:  every combination with |Tm_f - Tm_r| <= primerTmDifferenceMax
- Expands each selected (Tm_f, Tm_r) into all forward x reverse sequences and
  prefixes the Gateway attB tails.

Failures for one CDS raise a `CdsSkipped` subclass; `design_record` turns
those into warnings and keeps going.

Coordinates
-----------
- CDS `start`/`end` are 0-based, with `end` exclusive, in the gene sequence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from gwprimer.app.core.primer.constants import ADAPTERS
from gwprimer.app.core.primer.errors import CdsSkipped, NoPairFound, NoPrimerFound
from gwprimer.app.core.primer.generator import (
    forward_seed_windows,
    generate_candidates,
    reverse_seed_windows,
)
from gwprimer.app.core.primer.mapping import CdsLocation, map_cds
from gwprimer.app.core.primer.parameters import GatewayDesignParameters
from gwprimer.app.core.records.models import GeneRecord

log = logging.getLogger(__name__)

TmTable = Mapping[float, Sequence[str]]


# --- DTOs ----------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PrimerCandidate:
    seq: str
    tm: float
    side: str                # 'F' or 'R'


@dataclass(frozen=True)
class PrimerPair:
    forward: PrimerCandidate
    reverse: PrimerCandidate

    @property
    def tm_diff(self) -> float:
        return round(self.forward.tm - self.reverse.tm, 2)


@dataclass(frozen=True)
class GatewayPrimerPair:
    identifier: str
    number: int
    full_forward: str
    full_reverse: str
    pair: PrimerPair
    cds_start: int
    cds_end: int


@dataclass
class CdsDesign:
    identifier: str
    protein_id: str
    gene: str
    location: CdsLocation
    pairs: List[GatewayPrimerPair] = field(default_factory=list)


@dataclass(frozen=True)
class SkippedCds:
    identifier: str
    reason: str
    error: str                # exception class name


@dataclass
class RecordDesign:
    accession: str
    gene_sequence: str
    designs: List[CdsDesign] = field(default_factory=list)
    skipped: List[SkippedCds] = field(default_factory=list)

    @property
    def pair_count(self) -> int:
        return sum(len(d.pairs) for d in self.designs)


# --- Pairing -------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PairingPolicy:
    closest_only: bool = False
    max_diff_tm: float = 5.0

    @classmethod
    def closest(cls) -> "PairingPolicy":
        return cls(closest_only=True)

    @classmethod
    def within(cls, max_diff_tm: float) -> "PairingPolicy":
        return cls(closest_only=False, max_diff_tm=max_diff_tm)

    @classmethod
    def from_params(cls, params: GatewayDesignParameters) -> "PairingPolicy":
        return cls(closest_only=params.closestTmOnly, max_diff_tm=params.primerTmDifferenceMax)


def select_pairs(
    forward_tms: Sequence[float],
    reverse_tms: Sequence[float],
    policy: PairingPolicy,
) -> List[Tuple[float, float]]:
    """
    Choose (Tm_f, Tm_r) combinations according to `policy`.

    Diffs are compared at 2-decimal precision; absolute Tm is not re-checked.
    """
    combos = [
        (f, r, round(f - r, 2))
        for f in sorted(forward_tms)
        for r in sorted(reverse_tms)
    ]
    if not combos:
        return []
    if policy.closest_only:
        best = min(abs(d) for _, _, d in combos)
        return [(f, r) for f, r, d in combos if abs(d) == best]
    return [(f, r) for f, r, d in combos if abs(d) <= policy.max_diff_tm]


def expand_pairs(
    selected: Sequence[Tuple[float, float]],
    forward: TmTable,
    reverse: TmTable,
) -> List[PrimerPair]:
    """Cartesian product of the sequences behind each selected Tm pair."""
    out: List[PrimerPair] = []
    for f_tm, r_tm in selected:
        for f in forward[f_tm]:
            for r in reverse[r_tm]:
                out.append(PrimerPair(PrimerCandidate(f, f_tm, "F"), PrimerCandidate(r, r_tm, "R")))
    return out


def forward_adapter(params: GatewayDesignParameters) -> str:
    return ADAPTERS["fusion_n"] if params.nTerminalFusion else ADAPTERS["native_n"]


def reverse_adapter(params: GatewayDesignParameters) -> str:
    return ADAPTERS["fusion_c"] if params.cTerminalFusion else ADAPTERS["native_c"]


# --- Public API ----------------------------------------------------------------------------------

def design_cds(
    identifier: str,
    gene_seq: str,
    cds_seq: str,
    params: Optional[GatewayDesignParameters] = None,
    protein_id: str = "",
    gene: str = "",
) -> CdsDesign:
    """
    Design every acceptable Gateway primer pair for one CDS.

    Raises:
        MappingNotFound / AmbiguousMapping: CDS does not map exactly once
        NoPrimerFound: no forward or no reverse candidate survives filtering
        NoPairFound: no (Tm_f, Tm_r) combination satisfies the pairing policy
    """
    p = params or GatewayDesignParameters()
    loc = map_cds(gene_seq, cds_seq, identifier)
    log.debug("%s: CDS maps to %d..%d", identifier, loc.start, loc.end)

    f_table = generate_candidates(
        forward_seed_windows(cds_seq, p.nTerminalFusion),
        gene_seq, p.primerTmMin, p.primerTmMax, p.conditions,
    )
    if not f_table:
        raise NoPrimerFound("F", identifier, p.primerTmMin, p.primerTmMax)

    r_table = generate_candidates(
        reverse_seed_windows(cds_seq, p.cTerminalFusion),
        gene_seq, p.primerTmMin, p.primerTmMax, p.conditions,
    )
    if not r_table:
        raise NoPrimerFound("R", identifier, p.primerTmMin, p.primerTmMax)
    log.debug("%s: %s", identifier, tm_tables_summary(f_table, r_table))

    policy = PairingPolicy.from_params(p)
    selected = select_pairs(list(f_table), list(r_table), policy)
    if not selected:
        raise NoPairFound(identifier, p.primerTmMin, p.primerTmMax, p.primerTmDifferenceMax, p.closestTmOnly)

    f_tail = forward_adapter(p)
    r_tail = reverse_adapter(p)
    result = CdsDesign(identifier=identifier, protein_id=protein_id, gene=gene, location=loc)
    for n, pair in enumerate(expand_pairs(selected, f_table, r_table), start=1):
        result.pairs.append(
            GatewayPrimerPair(
                identifier=identifier,
                number=n,
                full_forward=f_tail + pair.forward.seq,
                full_reverse=r_tail + pair.reverse.seq,
                pair=pair,
                cds_start=loc.start,
                cds_end=loc.end,
            )
        )
    log.info("%s: %d primer pair(s)", identifier, len(result.pairs))
    return result


def design_record(record: GeneRecord, params: Optional[GatewayDesignParameters] = None) -> RecordDesign:
    """Run `design_cds` for every transcript; per-CDS failures become diagnostics."""
    p = params or GatewayDesignParameters()
    out = RecordDesign(accession=record.accession, gene_sequence=record.gene_sequence)
    for tx in record.transcripts:
        identifier = f"{record.accession}/{tx.protein_id}"
        try:
            out.designs.append(
                design_cds(identifier, record.gene_sequence, tx.sequence, p, protein_id=tx.protein_id, gene=tx.gene)
            )
        except CdsSkipped as e:
            log.warning("%s", e)
            out.skipped.append(SkippedCds(identifier=identifier, reason=str(e), error=type(e).__name__))
    return out


def tm_tables_summary(f_table: Dict[float, List[str]], r_table: Dict[float, List[str]]) -> str:
    """One-line description of candidate tables, for debug logging."""
    nf = sum(len(v) for v in f_table.values())
    nr = sum(len(v) for v in r_table.values())
    return f"forward: {nf} primer(s) over {len(f_table)} Tm(s); reverse: {nr} primer(s) over {len(r_table)} Tm(s)"
