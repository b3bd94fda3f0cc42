# --*-- coding:utf-8 --*--
# @time:10/16/26 10:40
# @File:modes.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union

from .config import DEFAULT_BACKEND


@dataclass(frozen=True)
class SyntheticMode:
    """Only the uniform sampler runs."""


@dataclass(frozen=True)
class RealMode:
    """Counts come from the named IBM backend."""
    backend_name: str

    def __post_init__(self):
        if not self.backend_name:
            raise ValueError("backend_name must be a non-empty string.")


ExecutionMode = Union[SyntheticMode, RealMode]


def select_mode(args: Sequence[str], default_backend: str = DEFAULT_BACKEND) -> ExecutionMode:
    """
    Derive the execution mode from positional arguments (program name excluded).
    No argument -> SyntheticMode; one argument -> RealMode(argument).
    An empty backend argument falls back to `default_backend`.
    """
    if len(args) > 1:
        raise ValueError(f"expected at most one backend name, got {len(args)} arguments")
    if args:
        return RealMode(args[0] or default_backend)
    return SyntheticMode()
