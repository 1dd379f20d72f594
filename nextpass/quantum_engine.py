"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and serves the bits as an
entropy source.

This runs on a local simulator, so the bits are only as random as the
simulator's own generator. Treat it as an alternate source for
experiments, not as a replacement for the OS CSPRNG.
"""

from __future__ import annotations

from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_CONFIG, PassConfig


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack bits into bytes, first bit in the most significant position.
    A trailing partial byte is padded with zero bits.
    """
    if not bits:
        return b""

    pad_len = -len(bits) % 8
    value = int("".join(map(str, bits)), 2) << pad_len
    return value.to_bytes((len(bits) + pad_len) // 8, "big")


class QuantumEngine:
    """
    Runs a fixed superposition circuit on the local simulator.

    The circuit is built and transpiled once; every call to
    :meth:`get_raw_bits` is a single fresh shot.
    """

    def __init__(self, config: PassConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.num_qubits = self.config.num_qubits
        if self.num_qubits <= 0:
            raise ValueError(f"num_qubits must be positive, got {self.num_qubits}.")

        self.backend = AerSimulator()
        limit = self._qubit_limit()
        if limit is not None and self.num_qubits > limit:
            raise ValueError(
                f"num_qubits={self.num_qubits} exceeds the simulator limit of {limit}. "
                "Lower num_qubits in PassConfig."
            )

        self.circuit = transpile(self._build_circuit(), self.backend)

    def _qubit_limit(self) -> int | None:
        configuration = getattr(self.backend, "configuration", None)
        if not callable(configuration):
            return None
        return getattr(configuration(), "num_qubits", None)

    def _build_circuit(self) -> QuantumCircuit:
        """
        Hadamard on every qubit; odd qubits get a second Hadamard so they
        are read in the X basis, even ones in the Z basis.
        """
        qubits = range(self.num_qubits)
        qc = QuantumCircuit(self.num_qubits, self.num_qubits)
        qc.h(qubits)
        for q in range(1, self.num_qubits, 2):
            qc.h(q)
        qc.measure(qubits, qubits)
        return qc

    def get_raw_bits(self) -> list[int]:
        """
        One shot of the circuit, one bit per qubit, qubit 0 first.
        """
        job = self.backend.run(self.circuit, shots=1, memory=True)
        # Memory strings list the highest classical bit first.
        shot = job.result().get_memory()[0]
        return [int(b) for b in reversed(shot)]


class QuantumSource:
    """
    Byte source backed by :class:`QuantumEngine`.

    Every block of bits XOR-combines ``quantum_streams`` independent
    circuit runs. Bits left over after a read are kept for the next one.
    """

    def __init__(self, config: PassConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.engine = QuantumEngine(self.config)
        self._pending: list[int] = []

    def __repr__(self) -> str:
        return (
            f"QuantumSource(num_qubits={self.config.num_qubits}, "
            f"streams={max(1, self.config.quantum_streams)})"
        )

    def _sample_block(self) -> list[int]:
        combined: list[int] | None = None
        for _ in range(max(1, self.config.quantum_streams)):
            bits = self.engine.get_raw_bits()
            if combined is None:
                combined = bits[:]
            else:
                if len(bits) != len(combined):
                    raise ValueError(
                        "Quantum streams produced different bit-lengths; "
                        "this should not happen."
                    )
                combined = [b ^ c for b, c in zip(bits, combined)]
        assert combined is not None
        return combined

    def read(self, size: int) -> bytes:
        needed = size * 8
        while len(self._pending) < needed:
            self._pending.extend(self._sample_block())

        bits, self._pending = self._pending[:needed], self._pending[needed:]
        return bits_to_bytes(bits)
