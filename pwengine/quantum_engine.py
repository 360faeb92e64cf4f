"""
Quantum random source: prepares qubits in superposition, measures them in
alternating bases and feeds the outcomes into a bit pool.
"""

from __future__ import annotations

import logging

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_QUANTUM_CONFIG, MAX_SIM_QUBITS, QuantumConfig
from .entropy import BitPool, amplify_entropy

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG

        if not 1 <= self.config.num_qubits <= MAX_SIM_QUBITS:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} is outside "
                f"[1, {MAX_SIM_QUBITS}]. Adjust num_qubits in QuantumConfig."
            )

        self.backend = AerSimulator()
        self.circuit, self.measurement_basis = self._build_circuit()
        self._compiled = transpile(self.circuit, self.backend)

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Put every qubit in superposition, then measure even indices in the
        Z basis and odd indices in the X basis.
        """
        n = self.config.num_qubits
        measurement_basis: list[str] = []

        qc = QuantumCircuit(n, n)
        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def get_raw_bits(self) -> list[int]:
        """Run the circuit for a single shot and return one bit per qubit."""
        result = self.backend.run(self._compiled, shots=1).result()
        bitstring = next(iter(result.get_counts()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        return [int(b) for b in bitstring[::-1]]


class QuantumRandomSource:
    """
    Uniform integer source backed by QuantumEngine measurements.

    Each refill runs the circuit once and mixes the raw bits through
    `entropy_rounds` of SHA-256.
    """

    name = "quantum"

    def __init__(self, config: QuantumConfig | None = None) -> None:
        self.engine = QuantumEngine(config)
        self._pool = BitPool(self._refill)

    def _refill(self) -> list[int]:
        raw = self.engine.get_raw_bits()
        logger.debug("sampled %d raw quantum bits", len(raw))
        return amplify_entropy(raw, self.engine.config.entropy_rounds)

    def randbelow(self, n: int) -> int:
        return self._pool.randbelow(n)
