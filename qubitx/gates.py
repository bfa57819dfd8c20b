"""
Single-qubit gate catalog.

This module holds the fixed set of unitary gates the visualizer offers
(Identity, Pauli X/Y/Z, Hadamard, S and T) and applies a 2x2 gate
matrix to a QubitState, producing a new state.
"""

import numpy as np
from typing import Dict, Optional

from .state import QubitState
from .utils import ZERO_TOL


# =============================================================================
# Gate constructors
# =============================================================================

def identity() -> np.ndarray:
    """Identity gate I"""
    return np.array([[1, 0],
                     [0, 1]], dtype=complex)


def pauli_x() -> np.ndarray:
    """Pauli X gate (NOT gate)"""
    return np.array([[0, 1],
                     [1, 0]], dtype=complex)


def pauli_y() -> np.ndarray:
    """Pauli Y gate"""
    return np.array([[ 0, -1j],
                     [1j,   0]], dtype=complex)


def pauli_z() -> np.ndarray:
    """Pauli Z gate = S²"""
    return np.array([[1,  0],
                     [0, -1]], dtype=complex)


def hadamard() -> np.ndarray:
    """Hadamard gate"""
    return np.array([[1,  1],
                     [1, -1]], dtype=complex) * np.sqrt(1/2)


def s_gate() -> np.ndarray:
    """Phase gate S = T²"""
    return np.array([[1,  0],
                     [0, 1j]], dtype=complex)


def t_gate() -> np.ndarray:
    """T gate, phase e^{iπ/4} on |1⟩"""
    phase = np.cos(np.pi / 4) + 1j * np.sin(np.pi / 4)
    return np.array([[1,     0],
                     [0, phase]], dtype=complex)


def _frozen(gate: np.ndarray) -> np.ndarray:
    gate.setflags(write=False)
    return gate


# Read-only module constants; the constructors above return fresh copies.
I_gate = _frozen(identity())
X_gate = _frozen(pauli_x())
Y_gate = _frozen(pauli_y())
Z_gate = _frozen(pauli_z())
H_gate = _frozen(hadamard())
S_gate = _frozen(s_gate())
T_gate = _frozen(t_gate())


# =============================================================================
# Selector lookup
# =============================================================================

GATE_SELECTORS = ("none", "x", "y", "z", "h", "s", "t")

GATE_NAMES: Dict[str, str] = {
    "none": "Identity",
    "x": "Pauli-X",
    "y": "Pauli-Y",
    "z": "Pauli-Z",
    "h": "Hadamard",
    "s": "S",
    "t": "T",
}

_CONSTRUCTORS = {
    "x": pauli_x,
    "y": pauli_y,
    "z": pauli_z,
    "h": hadamard,
    "s": s_gate,
    "t": t_gate,
}


def get_gate(selector: str) -> Optional[np.ndarray]:
    """
    Look up a gate matrix by its menu selector.

    Args:
        selector: One of "none", "x", "y", "z", "h", "s", "t"

    Returns:
        A fresh 2x2 complex matrix, or None for "none" and for any
        selector outside the catalog (both mean "leave the state alone").
    """
    constructor = _CONSTRUCTORS.get(selector)
    if constructor is None:
        return None
    return constructor()


def gate_name(selector: str) -> str:
    """Display name for a selector; unknown selectors read as Identity."""
    return GATE_NAMES.get(selector, GATE_NAMES["none"])


# =============================================================================
# Application
# =============================================================================

def apply_gate(gate: np.ndarray, state: QubitState) -> QubitState:
    """
    Apply a single-qubit gate to a state.

    Computes alpha' = m00·alpha + m01·beta and beta' = m10·alpha + m11·beta,
    then builds a new (re-normalized) QubitState. The input is untouched.

    Args:
        gate: 2x2 gate matrix
        state: State to transform

    Returns:
        The transformed state

    Raises:
        ValueError: If gate is not a 2x2 matrix
    """
    gate = np.asarray(gate, dtype=complex)
    if gate.shape != (2, 2):
        raise ValueError(f"Single-qubit gate must be 2x2, got shape {gate.shape}")

    alpha, beta = gate @ state.amplitudes
    return QubitState(alpha, beta)


def apply_selected(selector: str, state: QubitState) -> QubitState:
    """
    Apply the gate named by a menu selector.

    Unrecognized selectors and "none" act as Identity: the state is
    returned unchanged.
    """
    gate = get_gate(selector)
    if gate is None:
        return state
    return apply_gate(gate, state)


def is_unitary(gate: np.ndarray, atol: float = ZERO_TOL) -> bool:
    """Check U†U = I entrywise within atol."""
    gate = np.asarray(gate, dtype=complex)
    if gate.shape != (2, 2):
        return False
    return np.allclose(gate.conj().T @ gate, np.eye(2), rtol=0, atol=atol)
