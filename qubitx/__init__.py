"""
QubitX - numerical core of an interactive single-qubit visualizer.

This package models one qubit's pure state and the standard single-qubit
gates, and derives everything a visualizer draws from it: measurement
probabilities, Bloch-sphere coordinates and bra-ket text.

Modules:
    state   - QubitState, Bloch coordinates, states from angles, presets
    gates   - Gate catalog (I, X, Y, Z, H, S, T) and gate application
    session - View model tracking original/current state and animation frames
    utils   - Complex formatting, state comparison, readouts

Quick Start:
    >>> from qubitx import *
    >>> psi = apply_gate(H_gate, state_from_angles(0, 0))
    >>> print(psi)
    |ψ⟩ = 0.707|0⟩ +0.707|1⟩
    >>> psi.probability0()  # 0.5
"""

# State
from .state import (
    QubitState,
    BlochCoordinates,
    state_from_angles,
    preset_state,
    preset_angles,
    interpolate,
    PRESET_ANGLES,
    NORM_TOL,
)

# Gates
from .gates import (
    identity,
    pauli_x,
    pauli_y,
    pauli_z,
    hadamard,
    s_gate,
    t_gate,
    I_gate,
    X_gate,
    Y_gate,
    Z_gate,
    H_gate,
    S_gate,
    T_gate,
    GATE_SELECTORS,
    GATE_NAMES,
    get_gate,
    gate_name,
    apply_gate,
    apply_selected,
    is_unitary,
)

# Session
from .session import (
    Session,
    transition,
    ease_out_cubic,
    DEFAULT_FRAMES,
)

# Utilities
from .utils import (
    format_complex,
    format_amplitude,
    allclose_up_to_global_phase,
    state_fidelity,
    describe_state,
    ZERO_TOL,
)

__version__ = "0.1.0"
__all__ = [
    # State
    "QubitState",
    "BlochCoordinates",
    "state_from_angles",
    "preset_state",
    "preset_angles",
    "interpolate",
    "PRESET_ANGLES",
    "NORM_TOL",
    # Gates
    "identity",
    "pauli_x",
    "pauli_y",
    "pauli_z",
    "hadamard",
    "s_gate",
    "t_gate",
    "I_gate",
    "X_gate",
    "Y_gate",
    "Z_gate",
    "H_gate",
    "S_gate",
    "T_gate",
    "GATE_SELECTORS",
    "GATE_NAMES",
    "get_gate",
    "gate_name",
    "apply_gate",
    "apply_selected",
    "is_unitary",
    # Session
    "Session",
    "transition",
    "ease_out_cubic",
    "DEFAULT_FRAMES",
    # Utils
    "format_complex",
    "format_amplitude",
    "allclose_up_to_global_phase",
    "state_fidelity",
    "describe_state",
    "ZERO_TOL",
]
