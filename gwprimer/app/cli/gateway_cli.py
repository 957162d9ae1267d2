# File: gwprimer/app/cli/gateway_cli.py
# Version: v0.4.0
"""
CLI: design Gateway cloning primers for every CDS of GenBank records.

- Records come from a local GenBank file (-f) or an NCBI nucleotide query
  (-g gene symbol and/or -q custom query).
- Parameters: built-in defaults <- --params-json <- explicit flags.
- Results (pair header, alignment and translation) go to stdout; skipped CDSs
  and failed records are logged to stderr.

Usage:
    python -m gwprimer.app.cli.gateway_cli -g FUT1 [options]
    python -m gwprimer.app.cli.gateway_cli -q NM_001145266 [options]
    python -m gwprimer.app.cli.gateway_cli -f gene.gb --nterm --closest-tm

Exit status: 0 ok, 1 if any record failed, 2 on usage/parameter errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError
from Bio.SeqRecord import SeqRecord

from gwprimer.app.config.config import settings
from gwprimer.app.config.config_primers import load_params
from gwprimer.app.core.primer.designer import design_record
from gwprimer.app.core.primer.errors import RecordError
from gwprimer.app.core.primer.parameters import GatewayDesignParameters
from gwprimer.app.core.records.genbank import (
    build_entrez_query,
    extract_gene_record,
    fetch_genbank_records,
    read_genbank_file,
)
from gwprimer.app.core.visualization.text_report import render_record

log = logging.getLogger("gateway_cli")

# flag dest -> parameter path (nested keys for reaction conditions)
_PARAM_FLAGS = {
    "min_tm": ("primerTmMin",),
    "max_tm": ("primerTmMax",),
    "max_diff_tm": ("primerTmDifferenceMax",),
    "closest_tm": ("closestTmOnly",),
    "nterm": ("nTerminalFusion",),
    "cterm": ("cTerminalFusion",),
    "line_length": ("lineLength",),
    "number_translation": ("numberTranslation",),
    "colour": ("colour",),
    "cation_conc": ("conditions", "cationConc"),
    "mg_conc": ("conditions", "mgConc"),
    "dntp_conc": ("conditions", "dntpConc"),
    "primer_conc": ("conditions", "primerConc"),
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Design primers to coding mRNAs for Gateway cloning.",
    )
    src = p.add_argument_group("input")
    src.add_argument("-g", "--gene", help="Gene symbol to search GenBank with "
                     "(default: human, < 10 kb; refine with -q)")
    src.add_argument("-q", "--query", help="Detailed Entrez query, or accession; appended to -g if both given")
    src.add_argument("-f", "--file", type=Path, help="GenBank file to use instead of an NCBI search")
    src.add_argument("--email", default=None, help="Contact e-mail for NCBI Entrez (default: GWPRIMER_ENTREZ_EMAIL)")
    src.add_argument("--params-json", type=Path, help="JSON with GatewayDesignParameters (camelCase)")

    design = p.add_argument_group("design")
    design.add_argument("-c", "--cterm", action="store_true", default=None, help="Design for C-terminal fusion proteins")
    design.add_argument("-n", "--nterm", action="store_true", default=None, help="Design for N-terminal fusion proteins")
    design.add_argument("--min-tm", type=float, help="Minimum primer Tm (default 50)")
    design.add_argument("--max-tm", type=float, help="Maximum primer Tm (default 75)")
    design.add_argument("--max-diff-tm", type=float, help="Maximum forward/reverse Tm difference (default 5)")
    design.add_argument("--closest-tm", action="store_true", default=None,
                        help="Only report pairs with the smallest Tm difference")

    thermo = p.add_argument_group("Tm conditions")
    thermo.add_argument("--cation-conc", type=float, help="Monovalent cations, mM (default 50)")
    thermo.add_argument("--mg-conc", type=float, help="Mg2+, mM (default 1.5)")
    thermo.add_argument("-d", "--dntp-conc", type=float, help="dNTPs, mM (default 0.2)")
    thermo.add_argument("-p", "--primer-concentration", dest="primer_conc", type=float,
                        help="Primer concentration, nM (default 200)")

    out = p.add_argument_group("output")
    out.add_argument("-l", "--line-length", type=int, help="Sequence line length (default 60)")
    out.add_argument("-t", "--number-translation", action="store_true", default=None,
                     help="Number the translated clone output")
    out.add_argument("--colour", "--color", dest="colour", action="store_true", default=None, help="Colour output")
    out.add_argument("--log-level", dest="log_level", default=None,
                     choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                     help="Logging level (default: GWPRIMER_LOG_LEVEL or WARNING)")
    p.add_argument("--version", action="version", version=f"%(prog)s {settings.APP_VERSION}")
    return p


def overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Only flags given on the command line override the JSON/defaults."""
    out: Dict[str, Any] = {}
    for dest, path in _PARAM_FLAGS.items():
        value = getattr(args, dest, None)
        if value is None:
            continue
        if len(path) == 1:
            out[path[0]] = value
        else:
            out.setdefault(path[0], {})[path[1]] = value
    return out


def iter_source_records(args: argparse.Namespace) -> Iterable[SeqRecord]:
    term = build_entrez_query(args.gene, args.query)
    if term:
        return fetch_genbank_records(term, args.email or settings.ENTREZ_EMAIL, retmax=settings.ENTREZ_RETMAX)
    return read_genbank_file(args.file)


def run(records: Iterable[SeqRecord], params: GatewayDesignParameters, out=None) -> int:
    """Design and print every record; return the number of failed records."""
    stream = out or sys.stdout
    n_fail = 0
    for rec in records:
        try:
            gene_record = extract_gene_record(rec)
        except RecordError as e:
            log.error("✗ Failed %s: %s", rec.id, e)
            n_fail += 1
            continue
        result = design_record(gene_record, params)
        stream.write(render_record(result, params))
        log.info(
            "✓ %s: %d pair(s), %d CDS skipped",
            result.accession, result.pair_count, len(result.skipped),
        )
    return n_fail


def main(argv: Optional[List[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level or settings.LOG_LEVEL.upper(), logging.WARNING))

    if not (args.gene or args.query or args.file):
        p.error("either -f/--file or -g/--gene and/or -q/--query options are required.")
    if not (args.gene or args.query) and not args.file.exists():
        p.error(f"GenBank file not found: {args.file}")

    try:
        params = load_params(args.params_json, overrides_from_args(args))
    except (ValidationError, FileNotFoundError, ValueError) as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        raise SystemExit(2)

    log.info("=== %s v%s ===", settings.APP_NAME, settings.APP_VERSION)
    log.info(
        "GENE=%s | QUERY=%s | FILE=%s | TM=%g..%g | MAX_DIFF=%g | CLOSEST=%s | NTERM=%s | CTERM=%s",
        args.gene, args.query, args.file, params.primerTmMin, params.primerTmMax,
        params.primerTmDifferenceMax, params.closestTmOnly, params.nTerminalFusion, params.cTerminalFusion,
    )

    n_fail = run(iter_source_records(args), params)
    raise SystemExit(1 if n_fail else 0)


if __name__ == "__main__":
    main()
