"""
Single-qubit pure state.

A QubitState holds the two complex amplitudes of |ψ⟩ = α|0⟩ + β|1⟩ and is
normalized on construction. Everything a view needs (measurement
probabilities, Bloch-sphere coordinates, bra-ket text) is derived from the
amplitudes on demand; nothing is cached and a state is never mutated.

Bloch convention:
    theta = 2·acos(|α|), phi = arg(β) - arg(α) wrapped into [0, 2π),
    (x, y, z) = (sin θ cos φ, sin θ sin φ, cos θ).
    phi is undefined when β vanishes (north pole) and is reported as 0.
    At the south pole α's phase is rounding noise, so phi is arg(β) alone.
"""

import numpy as np
from typing import Dict, NamedTuple, Tuple

from .utils import format_complex, ZERO_TOL

# Tolerance used for norm-preservation checks
NORM_TOL = 1e-9


class BlochCoordinates(NamedTuple):
    """Cartesian and spherical position of a state on the Bloch sphere."""
    x: float
    y: float
    z: float
    theta: float
    phi: float

    @property
    def vector(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])


class QubitState:
    """
    Immutable, normalized single-qubit state α|0⟩ + β|1⟩.

    Args:
        alpha: Amplitude of |0⟩ (int, float or complex)
        beta: Amplitude of |1⟩ (int, float or complex)

    Both amplitudes are divided by sqrt(|α|² + |β|²). The zero vector has no
    direction to normalize to and is kept as is rather than raising.
    """

    __slots__ = ("_alpha", "_beta")

    def __init__(self, alpha=1, beta=0):
        amplitudes = np.array([alpha, beta], dtype=complex)
        norm = np.linalg.norm(amplitudes)
        if norm != 0:
            amplitudes = amplitudes / norm
        object.__setattr__(self, "_alpha", complex(amplitudes[0]))
        object.__setattr__(self, "_beta", complex(amplitudes[1]))

    def __setattr__(self, name, value):
        raise AttributeError(f"QubitState is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"QubitState is immutable; cannot delete {name!r}")

    @property
    def alpha(self) -> complex:
        return self._alpha

    @property
    def beta(self) -> complex:
        return self._beta

    @property
    def amplitudes(self) -> np.ndarray:
        """Return a fresh copy of the state as the vector [α, β]."""
        return np.array([self._alpha, self._beta], dtype=complex)

    # -------------------------------------------------------------------------
    # Measurement probabilities
    # -------------------------------------------------------------------------

    def probability0(self) -> float:
        """P(|0⟩) = |α|²"""
        return abs(self._alpha) ** 2

    def probability1(self) -> float:
        """P(|1⟩) = |β|²"""
        return abs(self._beta) ** 2

    def probabilities(self) -> np.ndarray:
        """Array [P(|0⟩), P(|1⟩)]."""
        return np.abs(self.amplitudes) ** 2

    # -------------------------------------------------------------------------
    # Bloch sphere
    # -------------------------------------------------------------------------

    def to_bloch_coordinates(self) -> BlochCoordinates:
        """
        Map the state onto the Bloch sphere.

        Returns:
            BlochCoordinates(x, y, z, theta, phi) with theta in [0, π] and
            phi in [0, 2π). phi is 0 when |β| <= 1e-10 and arg(β) when
            |α| < 1e-10.
        """
        # Rounding can push |α| a hair past 1, outside acos's domain
        theta = 2 * float(np.arccos(np.clip(abs(self._alpha), 0.0, 1.0)))

        phi = 0.0
        if abs(self._beta) > ZERO_TOL:
            # At the south pole arg(α) is rounding noise
            if abs(self._alpha) < ZERO_TOL:
                phi = float(np.angle(self._beta))
            else:
                phi = float(np.angle(self._beta) - np.angle(self._alpha))
            phi = phi % (2 * np.pi)
            if 2 * np.pi - phi < ZERO_TOL:
                phi = 0.0

        x = float(np.sin(theta) * np.cos(phi))
        y = float(np.sin(theta) * np.sin(phi))
        z = float(np.cos(theta))
        return BlochCoordinates(x, y, z, theta, phi)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def to_display_string(self) -> str:
        """
        Bra-ket text for the state, e.g. "|ψ⟩ = 0.707|0⟩ +0.707|1⟩".

        A vanishing amplitude drops its term entirely. Between two terms the
        joiner is "+" unless β reads as negative, in which case β's own
        leading "-" does the job.
        """
        alpha_str = format_complex(self._alpha)
        beta_str = format_complex(self._beta)

        if abs(self._alpha) < ZERO_TOL:
            return f"|ψ⟩ = {beta_str}|1⟩"
        if abs(self._beta) < ZERO_TOL:
            return f"|ψ⟩ = {alpha_str}|0⟩"

        if abs(self._beta.real) < ZERO_TOL:
            sign = "+" if self._beta.imag >= 0 else ""
        else:
            sign = "+" if self._beta.real >= 0 else ""
        return f"|ψ⟩ = {alpha_str}|0⟩ {sign}{beta_str}|1⟩"

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"QubitState(alpha={self._alpha!r}, beta={self._beta!r})"

    def __eq__(self, other):
        if not isinstance(other, QubitState):
            return NotImplemented
        return self._alpha == other._alpha and self._beta == other._beta

    def __hash__(self):
        return hash((self._alpha, self._beta))


# =============================================================================
# Constructors
# =============================================================================

def state_from_angles(theta: float, phi: float) -> QubitState:
    """
    Build the state at polar angle theta and azimuth phi on the Bloch sphere.

    α = cos(θ/2), β = e^{iφ}·sin(θ/2). This inverts
    QubitState.to_bloch_coordinates for theta strictly inside (0, π).

    Args:
        theta: Polar angle in [0, π]
        phi: Azimuthal angle in [0, 2π)
    """
    alpha = np.cos(theta / 2)
    beta = np.exp(1j * phi) * np.sin(theta / 2)
    return QubitState(alpha, beta)


# Quick-set states: name -> (theta, phi)
PRESET_ANGLES: Dict[str, Tuple[float, float]] = {
    "zero": (0.0, 0.0),                      # |0⟩, north pole
    "one": (np.pi, 0.0),                     # |1⟩, south pole
    "plus": (np.pi / 2, 0.0),                # |+⟩, +X
    "minus": (np.pi / 2, np.pi),             # |−⟩, -X
    "plus_i": (np.pi / 2, np.pi / 2),        # |i+⟩, +Y
    "minus_i": (np.pi / 2, 3 * np.pi / 2),   # |i−⟩, -Y
}


def preset_angles(name: str) -> Tuple[float, float]:
    """
    (theta, phi) of a named quick-set state.

    Raises:
        KeyError: If name is not in PRESET_ANGLES
    """
    if name not in PRESET_ANGLES:
        raise KeyError(f"Unknown preset state {name!r}; expected one of {sorted(PRESET_ANGLES)}")
    return PRESET_ANGLES[name]


def preset_state(name: str) -> QubitState:
    """Build one of the named quick-set states (KeyError if unknown)."""
    return state_from_angles(*preset_angles(name))


def interpolate(start: QubitState, end: QubitState, t: float) -> QubitState:
    """
    Intermediate state a fraction t of the way from start to end.

    The real and imaginary parts of both amplitudes are interpolated
    linearly and the result is re-normalized by construction. This is not
    a geodesic on the sphere, only a smooth path for animation frames.

    Args:
        start: State at t = 0
        end: State at t = 1
        t: Progress, clipped to [0, 1]
    """
    t = float(np.clip(t, 0.0, 1.0))
    amplitudes = start.amplitudes + (end.amplitudes - start.amplitudes) * t
    return QubitState(amplitudes[0], amplitudes[1])
