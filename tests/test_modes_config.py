"""Tests for execution mode selection and configuration."""

from __future__ import annotations

import pytest

from bell_sampling.config import DEFAULT_BACKEND, DemoConfig, IBMCredentials
from bell_sampling.modes import RealMode, SyntheticMode, select_mode


def test_no_argument_selects_synthetic():
    assert select_mode([]) == SyntheticMode()


def test_backend_argument_selects_real():
    assert select_mode(["ibm_kyiv"]) == RealMode("ibm_kyiv")


def test_empty_backend_argument_uses_default():
    assert select_mode([""]) == RealMode(DEFAULT_BACKEND)
    assert select_mode([""], default_backend="ibm_torino") == RealMode("ibm_torino")


def test_too_many_arguments_rejected():
    with pytest.raises(ValueError):
        select_mode(["a", "b"])


def test_real_mode_requires_name():
    with pytest.raises(ValueError):
        RealMode("")


def test_demo_config_defaults():
    cfg = DemoConfig()
    cfg.validate()
    assert cfg.as_dict() == {
        "shots": 1000,
        "n_bits": 2,
        "seed": 42,
        "default_backend": "ibm_brisbane",
        "run_synthetic": True,
    }
    req = cfg.sample_request()
    assert (req.shots, req.n_bits, req.seed) == (1000, 2, 42)


@pytest.mark.parametrize("kwargs", [{"shots": 0}, {"n_bits": 0}, {"default_backend": ""}])
def test_demo_config_validation(kwargs):
    with pytest.raises(ValueError):
        DemoConfig(**kwargs).validate()


def test_credentials_from_env():
    creds = IBMCredentials.from_env({"QISKIT_IBM_TOKEN": "tok", "QISKIT_IBM_INSTANCE": "crn:1"})
    assert creds.service_kwargs() == {
        "token": "tok",
        "channel": "ibm_quantum_platform",
        "instance": "crn:1",
    }


def test_credentials_without_token_use_saved_account():
    creds = IBMCredentials.from_env({})
    assert creds.service_kwargs() == {}
