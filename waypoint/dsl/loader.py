"""YAML loader + schema validation for path documents.

A path document names the path length and its anchors:

    length: 10
    points:
      - progress: 0
        position: [0, 0, 0]
      - progress: 10
        position: [10, 10]

Two-component positions get ``z = 0``.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

import yaml

from waypoint.logging import get_logger
from waypoint.model.path import Path
from waypoint.model.vector import Vector

logger = get_logger(__name__)


def load_path_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a path YAML string.

    Returns the parsed dictionary with its shape already enforced.

    Raises:
        ValueError: If the text is not valid YAML, is not a mapping, or does
            not match the packaged schema.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    # Early shape checks give clearer messages than the schema errors
    points = data.get("points")
    if points is not None and not isinstance(points, list):
        raise ValueError("'points' must be a list")
    for idx, entry in enumerate(points or []):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Point #{idx} must be a mapping with 'progress' and 'position'"
            )
        if "progress" not in entry or "position" not in entry:
            raise ValueError(f"Point #{idx} must include 'progress' and 'position'")

    try:
        import jsonschema  # type: ignore
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "jsonschema is required for path validation. Add 'jsonschema' to dependencies."
        ) from exc

    with (
        resources.files("waypoint.schemas")
        .joinpath("path.json")
        .open("r", encoding="utf-8")
    ) as f:
        schema_data = json.load(f)

    try:
        jsonschema.validate(data, schema_data)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ValueError(f"Invalid path document at {location}: {exc.message}") from exc
    return data


def build_path(data: Dict[str, Any]) -> Path:
    """Build a `Path` from a validated path dictionary.

    Later points with a repeated progress overwrite earlier ones.
    """
    path = Path(data["length"])
    for entry in data["points"]:
        path.insert(entry["progress"], Vector.from_array(entry["position"]))
    logger.debug("Built path of length %s with %d anchor(s)", path.length, len(path))
    return path


def load_path(yaml_str: str) -> Path:
    """Parse, validate and build a `Path` from YAML text."""
    return build_path(load_path_yaml(yaml_str))
