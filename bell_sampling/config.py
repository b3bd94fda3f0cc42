# --*-- coding:utf-8 --*--
# @time:10/16/26 10:10
# @File:config.py

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional, Dict, Any


DEFAULT_BACKEND = "ibm_brisbane"

TOKEN_ENV = "QISKIT_IBM_TOKEN"
INSTANCE_ENV = "QISKIT_IBM_INSTANCE"
CHANNEL_ENV = "QISKIT_IBM_CHANNEL"


@dataclass(frozen=True)
class SampleRequest:
    """
    One call of the uniform sampler: shot count, bitstring width and optional seed.
    """
    shots: int
    n_bits: int
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.shots < 0:
            raise ValueError(f"shots must be >= 0, got {self.shots}.")
        if self.n_bits <= 0:
            raise ValueError(f"n_bits must be > 0, got {self.n_bits}.")


@dataclass
class DemoConfig:
    """
    Configuration for the Bell demo run.
    """
    shots: int = 1000
    n_bits: int = 2
    seed: Optional[int] = 42
    default_backend: str = DEFAULT_BACKEND
    run_synthetic: bool = True

    def sample_request(self) -> SampleRequest:
        return SampleRequest(shots=self.shots, n_bits=self.n_bits, seed=self.seed)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "shots": int(self.shots),
            "n_bits": int(self.n_bits),
            "seed": self.seed,
            "default_backend": self.default_backend,
            "run_synthetic": bool(self.run_synthetic),
        }

    def validate(self) -> None:
        if self.shots <= 0:
            raise ValueError("shots must be > 0.")
        self.sample_request().validate()
        if not self.default_backend:
            raise ValueError("default_backend must be a non-empty string.")


@dataclass
class IBMCredentials:
    """
    Credentials forwarded to QiskitRuntimeService. All fields optional:
    without a token the locally saved account is used.
    """
    token: Optional[str] = None
    instance: Optional[str] = None
    channel: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "IBMCredentials":
        env = os.environ if environ is None else environ
        return cls(
            token=env.get(TOKEN_ENV) or None,
            instance=env.get(INSTANCE_ENV) or None,
            channel=env.get(CHANNEL_ENV) or None,
        )

    def service_kwargs(self) -> Dict[str, str]:
        kwargs: Dict[str, str] = {}
        if self.token:
            kwargs["token"] = self.token
            kwargs["channel"] = self.channel or "ibm_quantum_platform"
        elif self.channel:
            kwargs["channel"] = self.channel
        if self.instance:
            kwargs["instance"] = self.instance
        return kwargs
