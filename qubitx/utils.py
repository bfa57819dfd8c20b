"""
Utility functions for single-qubit states.

This module provides helper functions for:
- Formatting complex amplitudes the way the state display prints them
- Quantum state comparison (accounting for global phase)
- Flattening a state into the readout fields a view shows
"""

import numpy as np
from typing import Any, Dict

# Magnitudes below this count as zero for display and phase purposes
ZERO_TOL = 1e-10


# =============================================================================
# Formatting
# =============================================================================

def format_complex(z) -> str:
    """
    Format a complex amplitude with 3 decimals.

    Purely real numbers print as a real ("0.707"), purely imaginary ones as
    a multiple of i ("0.500i", with bare "i" and "-i" for ±1), and anything
    else as "re+imi" / "re-imi".

    Args:
        z: Number to format (real values are treated as complex)

    Returns:
        Formatted string
    """
    z = complex(z)
    real, imag = z.real, z.imag

    if abs(imag) < ZERO_TOL:
        return f"{real:.3f}"
    if abs(real) < ZERO_TOL:
        if abs(imag - 1) < ZERO_TOL:
            return "i"
        if abs(imag + 1) < ZERO_TOL:
            return "-i"
        return f"{imag:.3f}i"

    sign = "+" if imag >= 0 else ""
    return f"{real:.3f}{sign}{imag:.3f}i"


def format_amplitude(z) -> str:
    """Always-rectangular form "re±imi", as shown in the amplitude readout."""
    z = complex(z)
    sign = "+" if z.imag >= 0 else ""
    return f"{z.real:.3f}{sign}{z.imag:.3f}i"


# =============================================================================
# Quantum state utilities
# =============================================================================

def _as_vector(v) -> np.ndarray:
    from .state import QubitState

    if isinstance(v, QubitState):
        return v.amplitudes
    return np.asarray(v, dtype=complex).reshape(-1)


def allclose_up_to_global_phase(v, w, atol: float = 1e-9) -> bool:
    """
    Check if two quantum states are equal up to a global phase.

    Global phase has no physical significance and does not move the Bloch
    vector, so e.g. -|0⟩ and |0⟩ compare equal here.

    Args:
        v: First state (QubitState or array-like [α, β])
        w: Second state (QubitState or array-like [α, β])
        atol: Absolute tolerance for comparison

    Returns:
        True if states are equal up to global phase
    """
    v = _as_vector(v)
    w = _as_vector(w)

    # Find a stable pivot amplitude in w
    idx = np.argmax(np.abs(w))
    if np.abs(w[idx]) < atol:
        # Both should be ~0 vectors; fallback to direct comparison
        return np.allclose(v, w, atol=atol)

    phase = v[idx] / w[idx]
    return np.allclose(v, phase * w, atol=atol)


def state_fidelity(v, w) -> float:
    """
    Compute the fidelity between two pure quantum states.

    Fidelity F = |⟨v|w⟩|² ranges from 0 (orthogonal) to 1 (identical).

    Args:
        v: First state (QubitState or array-like)
        w: Second state (QubitState or array-like)

    Returns:
        Fidelity value between 0 and 1
    """
    v = _as_vector(v)
    w = _as_vector(w)
    return float(np.abs(np.vdot(v, w)) ** 2)


# =============================================================================
# Readouts
# =============================================================================

def describe_state(state) -> Dict[str, Any]:
    """
    Flatten a state into the values the state-details panel shows.

    Args:
        state: QubitState to describe

    Returns:
        Dict with the display string, amplitudes, magnitudes, phases,
        probabilities (with percentages and total) and Bloch coordinates
        (angles in radians and degrees).
    """
    p0 = state.probability0()
    p1 = state.probability1()
    coords = state.to_bloch_coordinates()

    return {
        "display": state.to_display_string(),
        "alpha": format_amplitude(state.alpha),
        "beta": format_amplitude(state.beta),
        "alpha_magnitude": abs(state.alpha),
        "beta_magnitude": abs(state.beta),
        "alpha_phase": float(np.angle(state.alpha)),
        "beta_phase": float(np.angle(state.beta)),
        "probability0": p0,
        "probability1": p1,
        "probability0_percent": p0 * 100,
        "probability1_percent": p1 * 100,
        "total_probability": p0 + p1,
        "x": coords.x,
        "y": coords.y,
        "z": coords.z,
        "theta": coords.theta,
        "phi": coords.phi,
        "theta_degrees": float(np.degrees(coords.theta)),
        "phi_degrees": float(np.degrees(coords.phi)),
    }
