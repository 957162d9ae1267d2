# File: gwprimer/app/core/primer/constants.py
# Version: v0.3.0
"""
Constants and defaults for the Gateway primer designer.

- Gateway attB adapter tails
- Seed-window and candidate-length settings
"""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_MIN_LEN = 18
DEFAULT_MAX_LEN = 25

DEFAULT_TM_MIN = 50.0
DEFAULT_TM_MAX = 75.0
DEFAULT_TM_DIFF_MAX = 5.0

DEFAULT_CATION_MM = 50.0
DEFAULT_MG_MM = 1.5
DEFAULT_DNTP_MM = 0.2
DEFAULT_PRIMER_NM = 200.0

DEFAULT_LINE_LENGTH = 60

# Gateway attB1/attB2 tails prepended to the gene-specific part of each primer
ADAPTERS = MappingProxyType({
    "native_n": "ggggacaagtttgtacaaaaaagcaggcttcgaaggagatagaaccatgg",
    "fusion_n": "ggggacaagtttgtacaaaaaagcaggcttc",
    "native_c": "ggggaccactttgtacaagaaagctgggtccta",
    "fusion_c": "ggggaccactttgtacaagaaagctgggtc",
})

# First in-frame base of the cloned product (after the forward adapter)
TRANSLATION_START_NATIVE = 46
TRANSLATION_START_FUSION = 4

SEED_WINDOW_LEN = 25

DEFAULT_ENTREZ_SUFFIX = " [GENE] AND Human [ORGN] and 0:10000 [SLEN]"
