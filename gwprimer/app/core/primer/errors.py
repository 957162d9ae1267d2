# File: gwprimer/app/core/primer/errors.py
# Version: v0.1.0
"""
Exceptions raised by the Gateway primer designer.

Two families:
- RecordError: the record cannot be processed at all (abort this record only).
- CdsSkipped: one coding sequence is skipped; the rest of the record proceeds.
"""

from __future__ import annotations

from typing import List, Sequence


class GatewayDesignError(RuntimeError):
    pass


# --- Fatal for one record -------------------------------------------------------------------------

class RecordError(GatewayDesignError):
    pass


class MultipleAccessionsError(RecordError):
    def __init__(self, accessions: Sequence[str]):
        self.accessions = list(accessions)
        super().__init__("More than one accession:\n" + "\n".join(self.accessions))


class MultipleGeneSequencesError(RecordError):
    def __init__(self, genes: Sequence[str]):
        self.genes = list(genes)
        super().__init__("More than one gene sequence:\n" + "\n".join(self.genes))


class MissingGeneSequenceError(RecordError):
    def __init__(self, accession: str):
        self.accession = accession
        super().__init__(f"No gene feature found in record '{accession}'")


# --- Recoverable per CDS --------------------------------------------------------------------------

class CdsSkipped(GatewayDesignError):
    """Base for per-CDS failures; `identifier` is filled in by the caller when known."""

    identifier: str = ""


class MappingNotFound(CdsSkipped):
    def __init__(self, identifier: str = ""):
        self.identifier = identifier
        super().__init__(f"Could not map CDS to gene sequence for '{identifier}'")


class AmbiguousMapping(CdsSkipped):
    def __init__(self, identifier: str = "", hits: Sequence[int] = ()):
        self.identifier = identifier
        self.hits: List[int] = list(hits)
        super().__init__(
            f"More than one mapping position for CDS in gene sequence for '{identifier}' "
            f"({len(self.hits)} hits) - skipping"
        )


class NoPrimerFound(CdsSkipped):
    def __init__(self, side: str, identifier: str, min_tm: float, max_tm: float):
        self.side = side
        self.identifier = identifier
        self.min_tm = min_tm
        self.max_tm = max_tm
        label = "forward" if side == "F" else "reverse"
        super().__init__(
            f"No unique {label} primers found within {min_tm:g} < TM < {max_tm:g} for {identifier}"
        )


class NoPairFound(CdsSkipped):
    def __init__(self, identifier: str, min_tm: float, max_tm: float, max_diff_tm: float, closest_only: bool):
        self.identifier = identifier
        self.min_tm = min_tm
        self.max_tm = max_tm
        self.max_diff_tm = max_diff_tm
        self.closest_only = closest_only
        super().__init__(
            f"No primer pairs with suitable TMs found for {identifier}. Using options: "
            f"Min TM = {min_tm:g}, Max TM = {max_tm:g}, Max diff TM = {max_diff_tm:g}"
            + (", closest TM only" if closest_only else "")
        )
