"""
Tests for the Quantum Entropy Source
====================================
Tests for QuantumEngine and QuantumSource in nextpass/quantum_engine.py.
"""

import pytest

pytest.importorskip("qiskit_aer")

from nextpass.cli import build_generator
from nextpass.config import HEX_CHARS, PassConfig
from nextpass.quantum_engine import QuantumEngine, QuantumSource, bits_to_bytes


class TestBitsToBytes:
    """Tests for bit packing."""

    def test_msb_first(self):
        assert bits_to_bytes([1, 0, 0, 0, 0, 0, 0, 1]) == b"\x81"

    def test_pads_with_zeros(self):
        assert bits_to_bytes([1, 1]) == b"\xc0"

    def test_empty(self):
        assert bits_to_bytes([]) == b""

    def test_spans_bytes(self):
        assert bits_to_bytes([1] * 12) == b"\xff\xf0"
        assert bits_to_bytes([0] * 7 + [1] + [1, 0, 1, 0, 1, 0, 1, 0]) == b"\x01\xaa"


class TestQuantumSource:
    """Tests for the byte-source adapter, with the circuit stubbed out."""

    def test_streams_are_xor_combined(self, monkeypatch):
        source = QuantumSource(PassConfig(num_qubits=4, quantum_streams=2))
        runs = iter([[1, 0, 1, 0], [0, 0, 1, 1], [1, 1, 1, 1], [0, 0, 0, 0]])
        monkeypatch.setattr(source.engine, "get_raw_bits", lambda: next(runs))

        assert source.read(1) == b"\x9f"

    def test_leftover_bits_carry_over(self, monkeypatch):
        source = QuantumSource(PassConfig(num_qubits=12, quantum_streams=1))
        runs = iter([[1, 0] * 6, [1] * 12])
        monkeypatch.setattr(source.engine, "get_raw_bits", lambda: next(runs))

        assert source.read(1) == b"\xaa"
        assert source.read(1) == b"\xaf"

    def test_mismatched_streams(self, monkeypatch):
        source = QuantumSource(PassConfig(num_qubits=4, quantum_streams=2))
        runs = iter([[1, 0, 1, 0], [1, 0]])
        monkeypatch.setattr(source.engine, "get_raw_bits", lambda: next(runs))

        with pytest.raises(ValueError, match="different bit-lengths"):
            source.read(1)


class TestQuantumEngine:
    """Tests that run the simulator."""

    def test_raw_bits(self):
        bits = QuantumEngine(PassConfig(num_qubits=8)).get_raw_bits()
        assert len(bits) == 8
        assert set(bits) <= {0, 1}

    def test_single_qubit(self):
        bits = QuantumEngine(PassConfig(num_qubits=1)).get_raw_bits()
        assert len(bits) == 1 and bits[0] in (0, 1)

    def test_circuit_is_prepared_once(self):
        engine = QuantumEngine(PassConfig(num_qubits=4))
        circuit = engine.circuit
        engine.get_raw_bits()
        engine.get_raw_bits()
        assert engine.circuit is circuit
        assert circuit.num_clbits == 4

    def test_rejects_zero_qubits(self):
        with pytest.raises(ValueError):
            QuantumEngine(PassConfig(num_qubits=0))

    def test_source_read_size(self):
        source = QuantumSource(PassConfig(num_qubits=8, quantum_streams=1))
        assert len(source.read(3)) == 3

    def test_generator_with_quantum_source(self):
        config = PassConfig(charset="hex", length=8, quantum=True, num_qubits=8)
        generator = build_generator(config)
        assert isinstance(generator.source, QuantumSource)

        result = generator.generate()
        assert len(result.password) == 8
        assert set(result.password) <= set(HEX_CHARS)
        assert result.bytes_read == 4
