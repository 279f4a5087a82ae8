# core_types.py

"""
Shared type definitions and small result dataclasses for the mt19937-sim
project.

This module is intentionally small and dependency-free so it can be imported
from anywhere (mersenne/, simulation/, utils/, main.py) without risk of
circular imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


# ---------- Basic aliases ----------

# Any Python int is accepted as a seed; it is reduced modulo 2**32.
Seed = int

UInt32 = int
UInt64 = int

# Zero-based index of an output in the stream since the last seed.
Position = int


# ---------- Reference checking ----------


@dataclass
class ReferenceMismatch:
    """
    One output that differs from the published reference value.
    """

    position: Position
    expected: UInt32
    actual: UInt32


@dataclass
class ReferenceReport:
    """
    Outcome of comparing a generator against a reference table.
    """

    seed: Seed

    # Number of positions compared
    checked: int = 0

    mismatches: List[ReferenceMismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches

    def merge(self, other: "ReferenceReport") -> "ReferenceReport":
        """
        Combine two reports for the same seed (e.g. dense + sparse checks).
        """
        if other.seed != self.seed:
            raise ValueError(
                f"Cannot merge reports for different seeds: {self.seed} vs {other.seed}"
            )
        return ReferenceReport(
            seed=self.seed,
            checked=self.checked + other.checked,
            mismatches=self.mismatches + other.mismatches,
        )


# ---------- Monte Carlo results ----------


@dataclass
class MonteCarloEstimate:
    """
    Result of a hit-or-miss Monte Carlo estimate.
    """

    estimate: float
    n_samples: int

    # Number of samples that landed inside the target region
    hits: int

    # Standard error of `estimate`
    std_error: float


@dataclass
class SampleSummary:
    """
    Mean and spread of a batch of unit-interval draws.
    """

    mean: float
    std: float
    n_samples: int
    std_error: float
