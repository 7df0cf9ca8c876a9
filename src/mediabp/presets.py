"""
Named breakpoint presets.

A PresetTable maps names ("mobile", "retina", ...) to BreakpointParams.
Tables are plain data: the caller builds or loads one and passes it at
the call site. The compiler itself never looks presets up.

Document format (YAML or JSON):

    presets:
      mobile: {width: [0, 480px]}
      retina: {density: 2}
      wide:   {ratio: 16/9, device: true}
"""

import json
import os
import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from mediabp.compiler import compile_condition
from mediabp.model import BreakpointParams
from mediabp.serialization import params_from_dict, params_to_dict


class PresetError(Exception):
    """Raised when a preset lookup or preset document is invalid."""
    pass


@dataclass
class PresetTable:
    """
    Named BreakpointParams.
    
    Properties:
        presets: Mapping of preset name to BreakpointParams
    """

    presets: Dict[str, BreakpointParams] = field(default_factory=dict)
    
    def get(self, name: str) -> BreakpointParams:
        """
        Retrieve a preset by name.
        
        Raises:
            PresetError: If no preset has that name
        """
        try:
            return self.presets[name]
        except KeyError:
            raise PresetError(f"Unknown preset '{name}'. Known presets: {sorted(self.presets)}")
    
    def names(self) -> List[str]:
        return list(self.presets)
    
    def merge(self, other: "PresetTable") -> "PresetTable":
        """
        Return a new table with other's presets layered on top.
        
        Redefined names take other's value and issue a UserWarning.
        """
        merged = dict(self.presets)
        for name, params in other.presets.items():
            if name in merged and params_to_dict(merged[name]) != params_to_dict(params):
                warnings.warn(f"Preset '{name}' redefined", UserWarning)
            merged[name] = params
        return PresetTable(presets=merged)


def bp_preset(name: str, table: PresetTable) -> Optional[str]:
    """Compile the named preset from table."""
    return compile_condition(table.get(name))


def presets_from_dict(d: Any) -> PresetTable:
    """
    Build a PresetTable from a parsed document.
    
    Accepts either {"presets": {...}} or the bare name mapping.
    
    Raises:
        PresetError: If the document or an entry is malformed
    """
    if d is None:
        return PresetTable()
    if not isinstance(d, dict):
        raise PresetError(f"Preset document must be a mapping, got {type(d).__name__}")
    
    entries = d["presets"] if "presets" in d else d
    if entries is None:
        return PresetTable()
    if not isinstance(entries, dict):
        raise PresetError("'presets' must be a mapping of name to params")
    
    table = PresetTable()
    for name, entry in entries.items():
        try:
            table.presets[str(name)] = params_from_dict(entry)
        except TypeError as e:
            raise PresetError(f"Invalid preset '{name}': {str(e)}")
    return table


def presets_to_dict(table: PresetTable) -> Dict[str, Any]:
    return {"presets": {name: params_to_dict(p) for name, p in table.presets.items()}}


def presets_from_yaml(s: str) -> PresetTable:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise PresetError(f"Failed to parse preset YAML: {str(e)}")
    return presets_from_dict(d)


def presets_to_yaml(table: PresetTable) -> str:
    return yaml.safe_dump(presets_to_dict(table), sort_keys=False)


def presets_from_json(s: str) -> PresetTable:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise PresetError(f"Failed to parse preset JSON: {str(e)}")
    return presets_from_dict(d)


def presets_to_json(table: PresetTable) -> str:
    return json.dumps(presets_to_dict(table), sort_keys=True)


def load_presets_file(filepath: str) -> PresetTable:
    """
    Load a preset table from a .yaml/.yml or .json file.
    
    Raises:
        FileNotFoundError: If file doesn't exist
        PresetError: If parsing fails
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Preset file not found: {filepath}")
    
    ext = os.path.splitext(filepath)[1].lower()
    if ext == ".json":
        return presets_from_json(content)
    return presets_from_yaml(content)


__all__ = [
    "PresetError",
    "PresetTable",
    "bp_preset",
    "presets_from_dict",
    "presets_to_dict",
    "presets_from_yaml",
    "presets_to_yaml",
    "presets_from_json",
    "presets_to_json",
    "load_presets_file",
]
