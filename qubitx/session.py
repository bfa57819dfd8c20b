"""
Visualizer session state.

A Session is the view model a front end keeps for one visualizer: the
angles the user set, the selected gate, the "original" state built from the
angles and the "current" state obtained by applying the gate to it. Both
states are replaced wholesale on every interaction, never mutated.

It also produces the frames for animating a gate: eased, re-normalized
interpolations between the old and new current state.
"""

import numpy as np
from typing import List

from .state import QubitState, state_from_angles, interpolate, preset_angles, PRESET_ANGLES
from .gates import apply_selected, gate_name, get_gate
from .utils import describe_state

# Frames per gate transition
DEFAULT_FRAMES = 60


def ease_out_cubic(progress: float) -> float:
    """Easing 1 - (1 - p)³: fast start, gentle stop."""
    progress = min(max(progress, 0.0), 1.0)
    return 1 - (1 - progress) ** 3


def transition(start: QubitState, end: QubitState,
               steps: int = DEFAULT_FRAMES) -> List[QubitState]:
    """
    Animation frames from start to end.

    Args:
        start: State shown before the gate
        end: State after the gate
        steps: Number of steps; steps + 1 frames are returned

    Returns:
        Frames [start, ..., end]; the last frame is end itself

    Raises:
        ValueError: If steps < 1
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    frames = [interpolate(start, end, ease_out_cubic(k / steps)) for k in range(steps)]
    frames.append(end)
    return frames


class Session:
    """
    Original/current state pair driven by angle and gate controls.

    Args:
        theta: Initial polar angle in [0, π]
        phi: Initial azimuthal angle in [0, 2π)
        gate: Initial gate selector ("none", "x", "y", "z", "h", "s", "t")
        verbose: If True, print each state change
    """

    def __init__(self, theta: float = 0.0, phi: float = 0.0,
                 gate: str = "none", verbose: bool = False):
        self.verbose = verbose
        self.gate = gate
        self.theta = theta
        self.phi = phi
        self.original = state_from_angles(theta, phi)
        self.current = apply_selected(gate, self.original)

    def set_angles(self, theta: float, phi: float) -> List[QubitState]:
        """
        Move the original state to new angles and re-apply the selected gate.

        Returns:
            Frames from the previous current state to the new one
        """
        self.theta = theta
        self.phi = phi
        self.original = state_from_angles(theta, phi)

        if self.verbose:
            print(f"Angles set to θ={theta:.3f}, φ={phi:.3f}: {self.original}")

        return self._update()

    def select_gate(self, selector: str) -> List[QubitState]:
        """
        Select a gate and apply it to the original state.

        Unknown selectors behave like "none".

        Returns:
            Frames from the previous current state to the new one
        """
        self.gate = selector
        if self.verbose:
            print(f"Gate selected: {gate_name(selector)}")
        return self._update()

    def set_preset(self, name: str) -> List[QubitState]:
        """
        Jump to a named quick-set state (see PRESET_ANGLES).

        Raises:
            KeyError: If name is not a known preset
        """
        theta, phi = preset_angles(name)
        return self.set_angles(theta, phi)

    def _update(self) -> List[QubitState]:
        previous = self.current
        self.current = apply_selected(self.gate, self.original)

        if self.verbose:
            print(f"After {gate_name(self.gate)}: {self.current}")

        # Identity needs no animation
        if get_gate(self.gate) is None:
            return [self.current]
        return transition(previous, self.current)

    def snapshot(self) -> dict:
        """Display-ready readout of the current state."""
        readout = describe_state(self.current)
        readout["gate"] = gate_name(self.gate)
        return readout


if __name__ == "__main__":
    print("=" * 60)
    print("QUBITX SESSION WALKTHROUGH")
    print("=" * 60)
    print()

    session = Session(verbose=True)
    for selector in ("x", "h", "s", "t", "none"):
        session.select_gate(selector)
        readout = session.snapshot()
        print(f"  P(|0⟩)={readout['probability0']:.3f}  P(|1⟩)={readout['probability1']:.3f}  "
              f"Bloch=({readout['x']:.3f}, {readout['y']:.3f}, {readout['z']:.3f})")
        print()

    session.select_gate("z")
    for name in PRESET_ANGLES:
        session.set_preset(name)
        print()

    frames = transition(state_from_angles(0, 0), state_from_angles(np.pi, 0), steps=4)
    print("Frames |0⟩ → |1⟩:")
    for frame in frames:
        print(f"  {frame}")
