"""Global pytest configuration.

Restores the module-level configuration instances after every test so a test
that tweaks tolerances or sampling defaults cannot leak into the next one.
Logging set up by a CLI run is dropped the same way.
"""

from __future__ import annotations

import dataclasses

import pytest

from waypoint.config import SAMPLING_CONFIG, VECTOR_CONFIG
from waypoint.logging import reset_logging


@pytest.fixture(autouse=True)
def _restore_global_config():
    saved = [(cfg, dataclasses.asdict(cfg)) for cfg in (VECTOR_CONFIG, SAMPLING_CONFIG)]
    yield
    for cfg, values in saved:
        for name, value in values.items():
            setattr(cfg, name, value)
    reset_logging()
