# File: gwprimer/app/core/primer/parameters.py
# Version: v1.1.0
"""
Pydantic models for Gateway primer design parameters (camelCase keys).

- ReactionConditions: ionic/oligo concentrations consumed by the Tm calculator.
- GatewayDesignParameters: Tm window, pairing policy, fusion modes, rendering knobs.

Both models are frozen; derive variants with `model_copy(update=...)`.

Usage:
    from gwprimer.app.core.primer.parameters import GatewayDesignParameters
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, confloat, conint

from .constants import (
    DEFAULT_CATION_MM,
    DEFAULT_DNTP_MM,
    DEFAULT_LINE_LENGTH,
    DEFAULT_MG_MM,
    DEFAULT_PRIMER_NM,
    DEFAULT_TM_DIFF_MAX,
    DEFAULT_TM_MAX,
    DEFAULT_TM_MIN,
)


class ReactionConditions(BaseModel):
    """PCR buffer conditions used for salt-corrected Tm."""
    model_config = ConfigDict(frozen=True)

    cationConc: confloat(gt=0) = Field(DEFAULT_CATION_MM, description="Monovalent cations (mM)")
    mgConc: confloat(ge=0) = Field(DEFAULT_MG_MM, description="Mg2+ (mM)")
    dntpConc: confloat(ge=0) = Field(DEFAULT_DNTP_MM, description="dNTPs (mM)")
    primerConc: confloat(gt=0) = Field(DEFAULT_PRIMER_NM, description="Primer concentration (nM)")


class GatewayDesignParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Temperatures (range)
    primerTmMin: float = Field(DEFAULT_TM_MIN, description="Minimum acceptable primer Tm (°C)")
    primerTmMax: float = Field(DEFAULT_TM_MAX, description="Maximum acceptable primer Tm (°C)")

    # Pairing
    primerTmDifferenceMax: confloat(ge=0) = Field(DEFAULT_TM_DIFF_MAX, description="Max |Tm_f - Tm_r| (°C)")
    closestTmOnly: bool = Field(False, description="Only report pairs with the smallest |Tm_f - Tm_r|")

    # Fusion modes
    nTerminalFusion: bool = Field(False, description="Design for an N-terminal fusion (keep frame, drop ATG context)")
    cTerminalFusion: bool = Field(False, description="Design for a C-terminal fusion (avoid the stop codon)")

    conditions: ReactionConditions = Field(default_factory=ReactionConditions)

    # Rendering only
    lineLength: conint(ge=1) = Field(DEFAULT_LINE_LENGTH, description="Sequence line width in reports")
    numberTranslation: bool = Field(False, description="Number DNA/protein lines in the translation view")
    colour: bool = Field(False, description="ANSI colour in text reports")

    def model_post_init(self, __context) -> None:  # pydantic v2 hook
        if self.primerTmMax < self.primerTmMin:
            raise ValueError("primerTmMax must be >= primerTmMin")
