# File: gwprimer/app/core/records/genbank.py
# Version: v0.3.0
"""
GenBank record provider.

Sources
-------
- Local GenBank file (one or more records) via Bio.SeqIO.
- NCBI nucleotide query via Bio.Entrez (esearch with history + efetch as 'gb').

Each SeqRecord is reduced to a `GeneRecord`:
- one primary accession (ACCESSION and VERSION agree), exactly one gene-level
  sequence (else RecordError);
- one `CodingTranscript` per CDS feature carrying a /protein_id.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from Bio import Entrez, SeqIO
from Bio.SeqRecord import SeqRecord

from gwprimer.app.core.primer.constants import DEFAULT_ENTREZ_SUFFIX
from gwprimer.app.core.primer.errors import (
    MissingGeneSequenceError,
    MultipleAccessionsError,
    MultipleGeneSequencesError,
)
from gwprimer.app.core.records.models import CodingTranscript, GeneRecord

log = logging.getLogger(__name__)


# ---------- Sources ----------

def read_genbank_file(path: Union[str, Path]) -> Iterator[SeqRecord]:
    """Stream records from a GenBank flat file."""
    yield from SeqIO.parse(str(path), "genbank")


def build_entrez_query(gene: Optional[str] = None, query: Optional[str] = None) -> str:
    """
    Compose the Entrez search term.

    With only a gene symbol, restrict to human sequences shorter than 10 kb;
    a custom query is appended verbatim to the gene symbol.
    """
    term = gene or ""
    if query:
        term += query
    elif gene:
        term += DEFAULT_ENTREZ_SUFFIX
    return term


def fetch_genbank_records(term: str, email: str, retmax: int = 20) -> Iterator[SeqRecord]:
    """Search NCBI nucleotide and stream the matching GenBank records."""
    Entrez.email = email
    handle = Entrez.esearch(db="nucleotide", term=term, usehistory="y", retmax=retmax)
    try:
        found = Entrez.read(handle)
    finally:
        handle.close()

    count = int(found.get("Count", 0))
    log.info("Entrez query %r matched %d record(s)", term, count)
    if not count:
        return

    handle = Entrez.efetch(
        db="nucleotide",
        rettype="gb",
        retmode="text",
        webenv=found["WebEnv"],
        query_key=found["QueryKey"],
        retmax=retmax,
    )
    try:
        yield from SeqIO.parse(handle, "genbank")
    finally:
        handle.close()


# ---------- Record reduction ----------

def _first_qualifier(feature, key: str) -> Optional[str]:
    values = feature.qualifiers.get(key)
    return values[0] if values else None


def record_accessions(rec: SeqRecord) -> List[str]:
    """
    Distinct primary identifiers of a record: the first ACCESSION entry (later
    entries are secondary accessions) and the accession part of VERSION.
    """
    listed = rec.annotations.get("accessions") or []
    primary = listed[0] if listed else rec.id.split(".")[0]
    accs = [primary]
    if "." in rec.id:
        accs.append(rec.id.split(".")[0])
    return list(dict.fromkeys(accs))


def extract_gene_record(rec: SeqRecord) -> GeneRecord:
    """
    Reduce a GenBank SeqRecord to the structure the designer consumes.

    Raises:
        MultipleAccessionsError, MultipleGeneSequencesError, MissingGeneSequenceError
    """
    accessions = record_accessions(rec)
    if len(accessions) > 1:
        raise MultipleAccessionsError(accessions)
    accession = accessions[0]

    gene_seqs: Dict[str, str] = {}
    transcripts: List[CodingTranscript] = []
    for feat in rec.features:
        if feat.type == "gene":
            name = _first_qualifier(feat, "gene") or _first_qualifier(feat, "locus_tag") or ""
            gene_seqs[name] = str(feat.extract(rec.seq))
        elif feat.type == "CDS":
            protein_id = _first_qualifier(feat, "protein_id")
            if not protein_id:
                log.warning("%s: CDS at %s has no /protein_id - skipping", accession, feat.location)
                continue
            transcripts.append(
                CodingTranscript(
                    protein_id=protein_id,
                    gene=_first_qualifier(feat, "gene") or "",
                    sequence=str(feat.extract(rec.seq)),
                )
            )

    if len(gene_seqs) > 1:
        raise MultipleGeneSequencesError(list(gene_seqs))
    if not gene_seqs:
        raise MissingGeneSequenceError(accession)

    gene, gene_sequence = next(iter(gene_seqs.items()))
    log.info("%s: gene %s (%d bp), %d CDS", accession, gene or "?", len(gene_sequence), len(transcripts))
    return GeneRecord(accession=accession, gene=gene, gene_sequence=gene_sequence, transcripts=transcripts)
