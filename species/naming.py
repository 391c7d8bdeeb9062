"""
speciation_tree module: species/naming.py

Procedural species names.

A name is 2-3 syllables (onset + vowel) with the family suffix "idae",
e.g. "Brokaidae". Onsets are single consonants, or with ``cluster_chance``
a consonant cluster.

The generator never records names itself; the caller owns the registry of
names already in use and adds the returned name to it.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import AbstractSet, Tuple

import config

logger = logging.getLogger(__name__)

CONSONANTS: Tuple[str, ...] = (
    "b", "c", "d", "f", "g", "h", "j", "k", "l", "m",
    "n", "p", "r", "s", "t", "v", "w", "x", "z",
)
CLUSTERS: Tuple[str, ...] = (
    "br", "cr", "dr", "fr", "gr", "pr", "tr",
    "bl", "cl", "fl", "gl", "pl", "sl",
    "sk", "sp", "st", "sh", "ch", "th", "ph",
)
VOWELS: Tuple[str, ...] = ("a", "e", "i", "o", "u")
SUFFIX = "idae"


@dataclass(frozen=True)
class NameConfig:
    min_syllables: int = config.MIN_SYLLABLES
    max_syllables: int = config.MAX_SYLLABLES
    cluster_chance: float = config.CLUSTER_CHANCE
    max_attempts: int = config.NAME_ATTEMPTS
    consonants: Tuple[str, ...] = CONSONANTS
    clusters: Tuple[str, ...] = CLUSTERS
    vowels: Tuple[str, ...] = VOWELS


def _syllable(rng: random.Random, cfg: NameConfig) -> str:
    if cfg.clusters and rng.random() < cfg.cluster_chance:
        onset = rng.choice(cfg.clusters)
    else:
        onset = rng.choice(cfg.consonants)
    return onset + rng.choice(cfg.vowels)


def generate_name(rng: random.Random, cfg: NameConfig = NameConfig()) -> str:
    count = rng.randint(cfg.min_syllables, cfg.max_syllables)
    stem = "".join(_syllable(rng, cfg) for _ in range(count))
    name = stem + SUFFIX
    return name[0].upper() + name[1:]


def generate_unique_name(
    existing: AbstractSet[str],
    rng: random.Random,
    cfg: NameConfig = NameConfig(),
) -> str:
    """
    Return a name not present in ``existing``.

    Tries ``cfg.max_attempts`` fresh names; if all collide the procedural
    namespace is considered exhausted and the last candidate gets a counter
    suffix ("Bakaidae-2", "Bakaidae-3", ...) that is free.
    """
    candidate = ""
    for _ in range(max(1, cfg.max_attempts)):
        candidate = generate_name(rng, cfg)
        if candidate not in existing:
            return candidate

    n = 2
    while f"{candidate}-{n}" in existing:
        n += 1
    forced = f"{candidate}-{n}"
    logger.warning("Name space exhausted after %d attempts; using %s", cfg.max_attempts, forced)
    return forced
