"""
Serialization helpers for breakpoint objects (BreakpointParams, MediaRule).

Provides JSON/YAML round-trip via an intermediate dict representation.
Ranges are stored as a bare value or a two-item list; tuples come back
as tuples so params stay hashable.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from mediabp.model import BreakpointParams, MediaRule, Orientation, RangeSpec
from mediabp.ranges import is_unset


PARAM_FIELDS = ("ratio", "width", "density", "device")


def range_to_value(value: Any) -> Any:
    if isinstance(value, Orientation):
        return value.value
    if isinstance(value, RangeSpec):
        if value.maximum is None or is_unset(value.maximum):
            return value.minimum
        return [value.minimum, value.maximum]
    if isinstance(value, (list, tuple)):
        return [range_to_value(v) for v in value]
    return value


def range_from_value(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


def params_to_dict(p: BreakpointParams) -> Dict[str, Any]:
    return {
        "ratio": range_to_value(p.ratio),
        "width": range_to_value(p.width),
        "density": range_to_value(p.density),
        "device": p.device,
    }


def params_from_dict(d: Any) -> BreakpointParams:
    if d is None:
        return BreakpointParams()
    if not isinstance(d, dict):
        raise TypeError(f"Breakpoint params must be a mapping, got {type(d).__name__}")
    unknown = sorted(set(d) - set(PARAM_FIELDS))
    if unknown:
        raise TypeError(f"Unknown breakpoint fields: {unknown}")
    device = d.get("device", False)
    if device is None:
        device = False
    if not isinstance(device, bool):
        raise TypeError(f"Breakpoint field 'device' must be a boolean, got {device!r}")
    return BreakpointParams(
        ratio=range_from_value(d.get("ratio", 0)),
        width=range_from_value(d.get("width", 0)),
        density=range_from_value(d.get("density", 0)),
        device=device,
    )


def rule_to_dict(r: MediaRule) -> Dict[str, Any]:
    if callable(r.block):
        raise TypeError("Cannot serialize a MediaRule whose block is a callable")
    return {"params": params_to_dict(r.params), "block": r.block}


def rule_from_dict(d: Dict[str, Any]) -> MediaRule:
    return MediaRule(params=params_from_dict(d.get("params")), block=d.get("block", ""))


def rules_to_json(rules: List[MediaRule]) -> str:
    return json.dumps([rule_to_dict(r) for r in rules], sort_keys=True)


def rules_from_json(s: str) -> List[MediaRule]:
    return [rule_from_dict(d) for d in json.loads(s)]


def rules_to_yaml(rules: List[MediaRule]) -> str:
    return yaml.safe_dump([rule_to_dict(r) for r in rules])


def rules_from_yaml(s: str) -> List[MediaRule]:
    return [rule_from_dict(d) for d in yaml.safe_load(s) or []]
