"""Fixed-step explicit Euler integration of the aircraft state.

Each step evaluates the derivatives once at the current state and advances
all twelve components together:

    x(t + dt) = x(t) + x_dot(t) * dt

Example:
    >>> integrator = EulerIntegrator(AircraftDynamics(aircraft, environment))
    >>> for time, state in integrator.integrate_over_time(state0, 0.0, 10.0, 0.1):
    ...     print(time, state.altitude)
"""

import math
from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from beartype import beartype

from sixdof.dynamics.state import State, StateDerivative

# Absorbs floating-point error in (end - start) / dt before rounding up
_STEP_COUNT_TOLERANCE = 1e-9


@runtime_checkable
class DerivativeModel(Protocol):
    """Protocol for anything that produces state derivatives."""

    def derivatives(self, state: State, time: float = 0.0) -> StateDerivative:
        """Compute the state derivative at ``time``."""
        ...


@beartype
class EulerIntegrator:
    """Explicit first-order integrator.

    Arguments are type checked; ``time`` and ``dt`` must be floats
    (``1.0``, not ``1``).

    Example:
        >>> integrator = EulerIntegrator(dynamics)
        >>> next_state = integrator.integrate(state, time=0.0, dt=0.01)
    """

    def __init__(self, dynamics: DerivativeModel) -> None:
        """Initialize integrator.

        Args:
            dynamics: Model supplying ``derivatives(state, time)``
        """
        self.dynamics = dynamics

    def integrate(self, state: State, time: float, dt: float) -> State:
        """Advance the state by one step.

        Args:
            state: Current state
            time: Current simulation time [s]
            dt: Time step [s]; zero returns an equal state

        Returns:
            New state at time + dt
        """
        state_dot = self.dynamics.derivatives(state, time)
        return State.from_array(state.to_array() + state_dot.to_array() * dt)

    def integrate_over_time(
        self,
        initial_state: State,
        start_time: float,
        end_time: float,
        dt: float,
    ) -> "Propagation":
        """Propagate the state from start_time to end_time.

        The returned sequence starts with (start_time, initial_state) and
        ends exactly at end_time; the final step is shortened when the span
        is not a whole number of steps.

        Args:
            initial_state: State at start_time
            start_time: Start time [s]
            end_time: End time [s]
            dt: Time step [s]

        Returns:
            Lazily evaluated, restartable sequence of (time, state) pairs
        """
        if dt <= 0:
            raise ValueError(f"time step must be positive, got {dt}")
        if end_time < start_time:
            raise ValueError(
                f"end time {end_time} is before start time {start_time}"
            )
        return Propagation(self, initial_state, start_time, end_time, dt)


@beartype
class Propagation:
    """Time-ordered (time, state) samples from an EulerIntegrator.

    Samples are computed on iteration; iterating again recomputes them from
    the initial state.
    """

    def __init__(
        self,
        integrator: EulerIntegrator,
        initial_state: State,
        start_time: float,
        end_time: float,
        dt: float,
    ) -> None:
        self.integrator = integrator
        self.initial_state = initial_state
        self.start_time = start_time
        self.end_time = end_time
        self.dt = dt
        span = (end_time - start_time) / dt
        self._steps = max(0, math.ceil(span - _STEP_COUNT_TOLERANCE))

    def times(self) -> list[float]:
        """Sample times [s]."""
        times = [self.start_time]
        for k in range(1, self._steps):
            times.append(min(self.start_time + k * self.dt, self.end_time))
        if self._steps > 0:
            times.append(self.end_time)
        return times

    def __len__(self) -> int:
        return self._steps + 1

    def __iter__(self) -> Iterator[tuple[float, State]]:
        times = self.times()
        state = self.initial_state
        yield times[0], state
        for previous, current in zip(times[:-1], times[1:]):
            state = self.integrator.integrate(state, previous, current - previous)
            yield current, state

    def __repr__(self) -> str:
        return (
            f"Propagation(start={self.start_time}, end={self.end_time}, "
            f"dt={self.dt}, samples={len(self)})"
        )
