# File: gwprimer/app/core/primer/thermodynamics.py
# Version: v0.4.0
"""
Thermodynamics utilities for primer properties.

Implements:
- Nearest-neighbor Tm (BioPython), SantaLucia (1998) unified parameters
  (`MeltingTemp.DNA_NN3`) with the von Ahsen et al. (2001) Mg2+/dNTP salt
  correction (`saltcorr=5`), as used by PerlPrimer:

    Na_eq = [Na+] + 120 * sqrt([Mg2+] - [dNTP])                 (mM)
    dS   += 0.368 * (N - 1) * ln(Na_eq / 1000)
    Tm    = 1000 * dH / (dS + R * ln(Ct / 4)) - 273.15

Notes:
- Ct is the primer concentration alone; Tm_NN takes it as two equal strand
  concentrations (dnac1 = dnac2 = Ct / 2) so that (dnac1 - dnac2 / 2) = Ct / 4.
- Tm_NN takes mM for ions and nM for strands, matching ReactionConditions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from Bio.SeqUtils import MeltingTemp as mt

from .parameters import ReactionConditions

# read-only view of the nearest-neighbor table: "AA/TT" -> (dH kcal/mol, dS cal/K.mol)
NN_TABLE = MappingProxyType(mt.DNA_NN3)

_VALID = frozenset("ACGT")


def is_valid_oligo(seq: str) -> bool:
    """True if `seq` is non-empty and only A/C/G/T (any case)."""
    return bool(seq) and set(seq.upper()) <= _VALID


def calculate_tm(primer: str, conditions: Optional[ReactionConditions] = None) -> float:
    """
    Salt-corrected melting temperature (°C).

    Args:
        primer: oligo sequence (A/C/G/T, any case, length >= 2)
        conditions: buffer conditions; defaults to ReactionConditions()

    Returns:
        Tm in °C (unrounded)

    Raises:
        ValueError: empty primer or a base outside A/C/G/T
    """
    if not primer:
        raise ValueError("Cannot compute Tm of an empty primer")
    if not is_valid_oligo(primer):
        bad = sorted(set(primer.upper()) - _VALID)
        raise ValueError(f"No nearest-neighbor parameters for base(s) {''.join(bad)} in {primer!r}")
    cond = conditions or ReactionConditions()
    strand = cond.primerConc / 2.0
    return float(
        mt.Tm_NN(
            primer.upper(),
            nn_table=mt.DNA_NN3,
            Na=cond.cationConc,
            Mg=cond.mgConc,
            dNTPs=cond.dntpConc,
            dnac1=strand,
            dnac2=strand,
            saltcorr=5,
        )
    )
