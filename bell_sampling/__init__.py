# --*-- coding:utf-8 --*--
# @time:10/16/26 09:38
# @File:__init__.py

"""
bell_sampling: Bell circuit counts from a uniform sampler or IBM backends

Public API:
- DemoConfig, SampleRequest, IBMCredentials   (configuration)
- generate_counts_uniform, sample_uniform     (synthetic sampler)
- SyntheticMode, RealMode, select_mode        (execution mode)
- make_backend, ExecutionOutcome              (backend factory)
- create_bell_circuit                         (circuit helper)
- counts_to_rows, format_counts, print_counts (report)
"""

from .config import DemoConfig, SampleRequest, IBMCredentials
from .uniform import generate_counts_uniform, sample_uniform
from .modes import SyntheticMode, RealMode, select_mode
from .backends import make_backend, ExecutionOutcome, UniformSamplerBackend, IBMSamplerBackend
from .circuits import create_bell_circuit
from .report import counts_to_rows, format_counts, print_counts

__all__ = [
    "DemoConfig",
    "SampleRequest",
    "IBMCredentials",
    "generate_counts_uniform",
    "sample_uniform",
    "SyntheticMode",
    "RealMode",
    "select_mode",
    "make_backend",
    "ExecutionOutcome",
    "UniformSamplerBackend",
    "IBMSamplerBackend",
    "create_bell_circuit",
    "counts_to_rows",
    "format_counts",
    "print_counts",
]

__version__ = "0.1.0"
