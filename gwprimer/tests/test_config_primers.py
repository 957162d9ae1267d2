# File: gwprimer/tests/test_config_primers.py
# Version: v0.1.0
"""
Parameter layering: defaults <- JSON file <- explicit overrides.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from gwprimer.app.config.config_primers import load_default_params, load_params
from gwprimer.app.core.primer.parameters import GatewayDesignParameters


def test_defaults_match_model_defaults():
    p = load_default_params()
    assert p == GatewayDesignParameters()
    assert (p.primerTmMin, p.primerTmMax, p.primerTmDifferenceMax) == (50.0, 75.0, 5.0)
    assert p.conditions.mgConc == 1.5
    assert p.lineLength == 60


def test_missing_default_file_falls_back(tmp_path: Path):
    assert load_default_params(tmp_path / "absent.json") == GatewayDesignParameters()


def test_json_layer_merges_conditions(tmp_path: Path):
    pj = tmp_path / "p.json"
    pj.write_text(json.dumps({"primerTmMin": 55, "conditions": {"mgConc": 2.0}}), encoding="utf-8")
    p = load_params(pj)
    assert p.primerTmMin == 55.0
    assert p.conditions.mgConc == 2.0
    assert p.conditions.cationConc == 50.0


def test_overrides_win_over_json(tmp_path: Path):
    pj = tmp_path / "p.json"
    pj.write_text(json.dumps({"primerTmMin": 55, "closestTmOnly": True}), encoding="utf-8")
    p = load_params(pj, {"primerTmMin": 58.0, "conditions": {"primerConc": 500.0}})
    assert p.primerTmMin == 58.0
    assert p.closestTmOnly is True
    assert p.conditions.primerConc == 500.0
    assert p.conditions.dntpConc == 0.2


def test_missing_params_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_params(tmp_path / "absent.json")


def test_invalid_values_raise():
    with pytest.raises(ValueError):
        load_params(overrides={"primerTmMin": 80.0, "primerTmMax": 60.0})
    with pytest.raises(ValidationError):
        load_params(overrides={"lineLength": 0})
