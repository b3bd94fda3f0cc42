# --*-- coding:utf-8 --*--
# @time:10/16/26 10:15
# @File:circuits.py

from __future__ import annotations
from typing import Dict, Any

from qiskit import QuantumCircuit, QuantumRegister, ClassicalRegister


BELL_GATES = "H(q0), CNOT(q0, q1), Measure(q0->c0), Measure(q1->c1)"


def create_bell_circuit() -> QuantumCircuit:
    """
    Bell state preparation (|00> + |11>)/sqrt(2): H on q0, CX q0->q1, measure both.
    """
    qr = QuantumRegister(2, "q")
    cr = ClassicalRegister(2, "c")
    circ = QuantumCircuit(qr, cr)
    circ.h(0)
    circ.cx(0, 1)
    circ.measure(0, 0)
    circ.measure(1, 1)
    return circ


def describe_circuit(circ: QuantumCircuit) -> Dict[str, Any]:
    return {
        "qubits": circ.num_qubits,
        "clbits": circ.num_clbits,
        "ops": dict(circ.count_ops()),
    }
