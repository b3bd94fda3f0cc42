# --*-- coding:utf-8 --*--
# @time:10/16/26 10:18
# @File:uniform.py

from __future__ import annotations
from typing import Dict, Optional

import numpy as np

from .config import SampleRequest


def generate_counts_uniform(shots: int, n_bits: int, seed: Optional[int] = None) -> Dict[str, int]:
    """
    Draw `shots` bitstrings of width `n_bits` with every bit an independent fair coin,
    and aggregate them into a bitstring -> count mapping.

    Parameters
    ----------
    shots : int
        Number of trials (>= 0). Zero gives an empty mapping.
    n_bits : int
        Bitstring length (>= 1).
    seed : Optional[int]
        Seed for numpy's default generator. None seeds from OS entropy.

    Returns
    -------
    Dict[str, int]
        Counts whose values sum to `shots`.
    """
    rng = np.random.default_rng(seed)
    # Row i holds the bits of shot i, left to right.
    bits = rng.integers(0, 2, size=(shots, n_bits), dtype=np.uint8)

    counts: Dict[str, int] = {}
    for row in bits:
        key = "".join("1" if b else "0" for b in row)
        counts[key] = counts.get(key, 0) + 1
    return counts


def sample_uniform(request: SampleRequest) -> Dict[str, int]:
    """Validate a SampleRequest and run the uniform sampler for it."""
    request.validate()
    return generate_counts_uniform(request.shots, request.n_bits, request.seed)
