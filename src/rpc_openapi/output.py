"""Serialize a generated document to JSON or YAML."""

import json
from pathlib import Path

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


def detect_output_format(file_path: Path) -> str:
    """Pick 'yaml' or 'json' from the output file's suffix."""
    if file_path.suffix.lower() in YAML_SUFFIXES:
        return "yaml"
    return "json"


def dump_document(document: dict, fmt: str) -> str:
    """Render the document as text in the given format ('json' or 'yaml')."""
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
