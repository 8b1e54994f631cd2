"""Shared type aliases."""

from __future__ import annotations

from typing import Union

#: Any real scalar accepted where a float is stored (converted with ``float()``).
Number = Union[int, float]

#: Scalar coordinate along a path, used as the lookup key for anchors.
Progress = float
