# --*-- coding:utf-8 --*--
# @time:10/16/26 11:02
# @File:cli.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .backends import make_backend
from .circuits import BELL_GATES, create_bell_circuit, describe_circuit
from .config import DemoConfig, IBMCredentials, TOKEN_ENV, INSTANCE_ENV
from .modes import RealMode, SyntheticMode, select_mode
from .report import RULE_WIDTH, print_counts

_LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_SUBMISSION_FAILED = -1

BELL_NOTE = "Expected for Bell state: ~50% |00⟩ and ~50% |11⟩"


def _section(title: str) -> None:
    print(f"\n\n{title}")
    print("-" * RULE_WIDTH)


def _print_skip_notice(cfg: DemoConfig) -> None:
    print("Skipping real backend execution.")
    print("To use real backend, run with: bell-demo <backend_name>")
    print(f"Example: bell-demo {cfg.default_backend}")
    print("\nMake sure to set environment variables:")
    print(f"  export {TOKEN_ENV}=\"your_token\"")
    print(f"  export {INSTANCE_ENV}=\"your_instance\"")


def run_demo(args: List[str], cfg: Optional[DemoConfig] = None,
             credentials: Optional[IBMCredentials] = None) -> int:
    """
    Run the Bell demo for positional `args` and return the process exit status.
    Exceptions from the backend path propagate to the caller.
    """
    cfg = cfg or DemoConfig()
    cfg.validate()
    mode = select_mode(args, default_backend=cfg.default_backend)

    print("Bell Circuit Demo")
    print("=" * RULE_WIDTH)

    circ = create_bell_circuit()
    info = describe_circuit(circ)
    print("\nBell Circuit Created:")
    print(f"  Qubits: {info['qubits']}")
    print(f"  Classical bits: {info['clbits']}")
    print(f"  Gates: {BELL_GATES}")

    if cfg.run_synthetic:
        _section("[Mode 1] Uniform Random Sampler Execution")
        outcome = make_backend(SyntheticMode(), cfg).run(circ)
        print_counts(outcome.counts, "Uniform Random Results")
        print("\nNote: Uniform sampler generates random bitstrings.")
        print(BELL_NOTE)

    _section("[Mode 2] Real Backend Execution")
    if isinstance(mode, RealMode):
        print(f"Attempting to use backend: {mode.backend_name}")
        backend = make_backend(mode, cfg, credentials=credentials)
        outcome = backend.run(circ)
        if not outcome.ok:
            print(f"Error: {outcome.error}", file=sys.stderr)
            return EXIT_SUBMISSION_FAILED
        print_counts(outcome.counts, "Real Backend Results")
        print("\nFor Bell state, expect ~50% |00⟩ and ~50% |11⟩")
    else:
        _print_skip_notice(cfg)

    print("\n" + "=" * RULE_WIDTH)
    print("Demo completed successfully!")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser("bell-demo")
    ap.add_argument("backend", nargs="?", default=None,
                    help="IBM backend name; omit to run the uniform sampler only.")
    args = ap.parse_args(argv)
    positional = [args.backend] if args.backend is not None else []

    try:
        return run_demo(positional)
    except Exception as exc:
        _LOG.debug("Demo failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
