"""
speciation_tree module: evolution/jitter.py

Bounded uniform jitter shared by every trait mutator.
"""

from __future__ import annotations
import random


def jitter(rng: random.Random, shift: float) -> float:
    """Uniform draw from [-shift, +shift]."""
    return rng.uniform(-shift, shift)


def jitter_factor(rng: random.Random, k: float) -> float:
    """Multiplicative factor 1 + U(-k, k)."""
    return 1.0 + rng.uniform(-k, k)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def wrap_hue(hue: float) -> float:
    h = (hue + 360.0) % 360.0
    # float modulo can round a tiny negative up to exactly 360.0
    if h >= 360.0:
        h = 0.0
    return h
