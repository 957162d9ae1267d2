# File: gwprimer/app/config/config_primers.py
# Version: v0.3.0
"""
Gateway primer parameters loader (camelCase JSON, strict validation).

- Reads defaults from: gwprimer/app/config/primers_param_default.json
- Optionally layers a user JSON file on top of the defaults
- Validates payloads with GatewayDesignParameters (Pydantic)

Usage:
    from gwprimer.app.config.config_primers import load_params

Example JSON:

  {
    "primerTmMin": 50.0,
    "primerTmMax": 75.0,
    "primerTmDifferenceMax": 5.0,
    "closestTmOnly": false,
    "nTerminalFusion": false,
    "cTerminalFusion": false,
    "conditions": {"cationConc": 50.0, "mgConc": 1.5, "dntpConc": 0.2, "primerConc": 200.0},
    "lineLength": 60,
    "numberTranslation": false,
    "colour": false
  }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from gwprimer.app.config.config import settings
from gwprimer.app.core.primer.parameters import GatewayDesignParameters


def _read_json(path: Path) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge, one level deep for nested objects such as `conditions`."""
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = {**out[k], **v}
        else:
            out[k] = v
    return out


def load_default_params(path: Optional[Path] = None) -> GatewayDesignParameters:
    """Load default parameters from primers_param_default.json (built-in defaults if missing)."""
    payload = _read_json(path or settings.PARAMS_DEFAULT_PATH)
    return GatewayDesignParameters.model_validate(payload or {})


def load_params(
    path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GatewayDesignParameters:
    """
    Build parameters from defaults <- JSON file <- explicit overrides.

    Raises:
        FileNotFoundError: `path` given but missing
        pydantic.ValidationError: invalid values
    """
    payload = _read_json(settings.PARAMS_DEFAULT_PATH)
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Parameters file not found: {path}")
        payload = _merge(payload, _read_json(path))
    if overrides:
        payload = _merge(payload, overrides)
    return GatewayDesignParameters.model_validate(payload)
