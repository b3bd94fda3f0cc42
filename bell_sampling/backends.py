# --*-- coding:utf-8 --*--
# @time:10/16/26 10:12
# @File:backends.py

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from qiskit import QuantumCircuit, transpile
from qiskit_ibm_runtime import QiskitRuntimeService, SamplerV2

from .config import DemoConfig, IBMCredentials, SampleRequest
from .modes import ExecutionMode, RealMode, SyntheticMode
from .uniform import sample_uniform

_LOG = logging.getLogger(__name__)
if not _LOG.handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


@dataclass
class ExecutionOutcome:
    """
    Result of one backend run: counts on success, a diagnostic message on failure.
    """
    counts: Optional[Dict[str, int]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.counts is not None


class SamplerBackend:
    """Abstract base for a backend producing measurement counts."""
    def __init__(self, shots: int):
        self.shots = int(shots)

    def run(self, circuit: QuantumCircuit) -> ExecutionOutcome:
        raise NotImplementedError


class UniformSamplerBackend(SamplerBackend):
    """
    Offline stand-in: ignores the circuit's gates and draws uniform bitstrings
    of width `n_bits` (defaults to the circuit's classical bit count).
    """
    def __init__(self, shots: int, n_bits: Optional[int] = None, seed: Optional[int] = None):
        super().__init__(shots)
        self.n_bits = n_bits
        self.seed = seed

    def run(self, circuit: QuantumCircuit) -> ExecutionOutcome:
        n_bits = self.n_bits if self.n_bits is not None else circuit.num_clbits
        request = SampleRequest(shots=self.shots, n_bits=n_bits, seed=self.seed)
        return ExecutionOutcome(counts=sample_uniform(request))


def _extract_counts(data, circuit: QuantumCircuit) -> Dict[str, int]:
    """Read counts from a SamplerV2 pub result's DataBin."""
    # Path A: the circuit's own classical registers
    for creg in circuit.cregs:
        reg = getattr(data, creg.name, None)
        if reg is not None and hasattr(reg, "get_counts"):
            return dict(reg.get_counts())

    # Path B: any field exposing get_counts (e.g. "meas" from measure_all)
    for name in dir(data):
        if name.startswith("_"):
            continue
        obj = getattr(data, name)
        if hasattr(obj, "get_counts"):
            return dict(obj.get_counts())

    raise RuntimeError("Unsupported SamplerV2 result format; cannot extract counts.")


class IBMSamplerBackend(SamplerBackend):
    """
    IBM Runtime SamplerV2 backend: resolve backend by name, transpile to its target, sample.

    Credentials come from `IBMCredentials` (environment) or the locally saved account.
    Blocks on job.result(); no timeout or retry is applied here.
    """
    def __init__(
        self,
        shots: int,
        backend_name: str,
        credentials: Optional[IBMCredentials] = None,
        service: Optional[QiskitRuntimeService] = None,
    ):
        super().__init__(shots)
        self.backend_name = backend_name
        creds = credentials or IBMCredentials.from_env()

        if service is None:
            service = QiskitRuntimeService(**creds.service_kwargs())
        self._service = service
        self._backend = self._service.backend(backend_name)
        _LOG.info("Resolved backend %s", backend_name)

    @property
    def backend(self):
        return self._backend

    def transpile(self, circuit: QuantumCircuit) -> QuantumCircuit:
        return transpile(circuit, backend=self._backend)

    def run(self, circuit: QuantumCircuit) -> ExecutionOutcome:
        tcirc = self.transpile(circuit)
        _LOG.info("Circuit transpiled for %s", self.backend_name)

        sampler = SamplerV2(mode=self._backend, options={"default_shots": self.shots})
        job = sampler.run([tcirc], shots=self.shots)
        if job is None:
            return ExecutionOutcome(error="Job submission failed")

        _LOG.info("Job submitted, waiting for results...")
        result = job.result()
        pub = result[0]
        return ExecutionOutcome(counts=_extract_counts(pub.data, tcirc))


def make_backend(
    mode: ExecutionMode,
    cfg: DemoConfig,
    credentials: Optional[IBMCredentials] = None,
) -> SamplerBackend:
    if isinstance(mode, SyntheticMode):
        return UniformSamplerBackend(shots=cfg.shots, n_bits=cfg.n_bits, seed=cfg.seed)
    elif isinstance(mode, RealMode):
        return IBMSamplerBackend(shots=cfg.shots, backend_name=mode.backend_name, credentials=credentials)
    else:
        raise ValueError(f"Unknown execution mode: {mode!r}")
