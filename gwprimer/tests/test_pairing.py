# File: gwprimer/tests/test_pairing.py
# Version: v0.1.0
"""Forward/reverse Tm pairing policies and Cartesian expansion."""
from __future__ import annotations

from gwprimer.app.core.primer.designer import PairingPolicy, expand_pairs, select_pairs

FWD = [60.00, 62.50]
REV = [61.00, 65.00]


def test_closest_returns_single_best():
    assert select_pairs(FWD, REV, PairingPolicy.closest()) == [(60.00, 61.00)]


def test_closest_keeps_both_signs():
    assert select_pairs([60.0, 62.0], [61.0], PairingPolicy.closest()) == [(60.0, 61.0), (62.0, 61.0)]


def test_within_threshold():
    got = select_pairs(FWD, REV, PairingPolicy.within(2))
    assert (60.00, 61.00) in got
    assert (62.50, 61.00) in got
    assert (62.50, 65.00) not in got
    assert (60.00, 65.00) not in got
    assert len(got) == 2


def test_within_threshold_is_inclusive():
    assert select_pairs([60.0], [62.5], PairingPolicy.within(2.5)) == [(60.0, 62.5)]


def test_no_pair_within_threshold():
    assert select_pairs([50.0], [70.0], PairingPolicy.within(5)) == []
    assert select_pairs([], [70.0], PairingPolicy.closest()) == []


def test_no_absolute_tm_refilter():
    # pairing never looks at the Tm window, only at the difference
    assert select_pairs([95.0], [96.0], PairingPolicy.within(5)) == [(95.0, 96.0)]


def test_expand_pairs_cartesian():
    fwd = {60.0: ["AAA", "CCC"], 62.5: ["GGG"]}
    rev = {61.0: ["TTT", "ACA"]}
    pairs = expand_pairs([(60.0, 61.0)], fwd, rev)
    assert [(p.forward.seq, p.reverse.seq) for p in pairs] == [
        ("AAA", "TTT"), ("AAA", "ACA"), ("CCC", "TTT"), ("CCC", "ACA"),
    ]
    assert pairs[0].tm_diff == -1.0
    assert pairs[0].forward.side == "F" and pairs[0].reverse.side == "R"
