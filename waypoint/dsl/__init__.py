"""Loading paths from YAML documents."""

from waypoint.dsl.loader import build_path, load_path, load_path_yaml

__all__ = ["build_path", "load_path", "load_path_yaml"]
