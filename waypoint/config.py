"""Configuration classes for waypoint components."""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class VectorConfig:
    """Configuration for tolerant vector equality."""

    # Number of units in the last place two components may differ by
    ulp_tolerance: int = 1

    def tolerance(self, a: float, b: float) -> float:
        """Return the largest absolute difference still treated as equal."""
        return self.ulp_tolerance * max(math.ulp(a), math.ulp(b))


@dataclass
class SamplingConfig:
    """Configuration for sampling a path over its stored progress range."""

    # Step used when neither a step nor a sample count is given
    default_step: float = 1.0

    # Smallest step magnitude a sampler will accept, explicit or resolved
    min_step: float = 1e-6

    # Upper bound on the number of samples produced from a sample count
    max_samples: int = 100_000

    def resolve_step(self, span: float, samples: Optional[int] = None) -> float:
        """Pick the step that splits ``span`` into ``samples`` values.

        Without a sample count (or for an empty span) ``default_step`` is
        returned. The result is clamped to at least ``min_step``.
        """
        if samples is None or span <= 0:
            return max(self.default_step, self.min_step)
        if samples < 2:
            raise ValueError(f"samples must be at least 2, got {samples}")
        samples = min(samples, self.max_samples)
        return max(span / (samples - 1), self.min_step)

    def check_step(self, step: float) -> float:
        """Return ``step`` as a float, rejecting magnitudes below ``min_step``."""
        step = float(step)
        if not abs(step) >= self.min_step:
            raise ValueError(f"step {step!r} is below min_step {self.min_step!r}")
        return step


# Global configuration instances
VECTOR_CONFIG = VectorConfig()
SAMPLING_CONFIG = SamplingConfig()
