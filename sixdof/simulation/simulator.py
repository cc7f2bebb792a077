"""Fixed-step flight simulation driver.

The driver owns the time loop: it steps the integrator from the start time
to the end time and emits (time, state) samples at a reporting cadence.
Formatting and printing samples is left to the caller through the
``on_output`` callback and the returned SimulationResult.

Example:
    >>> from sixdof.dynamics import AircraftDynamics, EulerIntegrator, State
    >>> from sixdof.dynamics import light_fixed_wing
    >>> from sixdof.environment import default_environment
    >>> from sixdof.simulation import SimConfig, Simulation
    >>>
    >>> integrator = EulerIntegrator(
    ...     AircraftDynamics(light_fixed_wing(), default_environment())
    ... )
    >>> sim = Simulation(
    ...     initial_state=State.level_flight(altitude=1000.0, airspeed=50.0),
    ...     integrator=integrator,
    ...     config=SimConfig(time_step=0.01, total_time=10.0, output_interval=1.0),
    ... )
    >>> result = sim.run()
    >>> df = result.to_dataframe()
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from sixdof.dynamics.integrator import EulerIntegrator
from sixdof.dynamics.state import State

logger = logging.getLogger(__name__)

OutputCallback = Callable[[float, State], None]

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass(frozen=True)
class SimConfig:
    """Simulation timing configuration.

    Attributes:
        time_step: Fixed integration step [s]
        total_time: Time at which the run stops [s]
        output_interval: Reporting cadence [s]
        start_time: Initial simulation time [s]

    Times are type checked as floats, so pass ``10.0`` rather than ``10``.
    """
    time_step: float = 0.01
    total_time: float = 60.0
    output_interval: float = 1.0
    start_time: float = 0.0

    def __post_init__(self) -> None:
        if self.time_step <= 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.output_interval <= 0:
            raise ValueError(
                f"output_interval must be positive, got {self.output_interval}"
            )
        if self.total_time < self.start_time:
            raise ValueError(
                f"total_time {self.total_time} is before start_time {self.start_time}"
            )

    @property
    def step_count(self) -> int:
        """Number of loop iterations, including the initial time."""
        span = (self.total_time - self.start_time) / self.time_step
        # Small tolerance keeps e.g. 10.0 / 0.1 from losing the last step
        return int(np.floor(span + 1e-9)) + 1

    def time_at(self, step: int) -> float:
        """Loop time for a step index [s].

        Rebuilt from the index so it does not accumulate rounding error. A
        time within rounding of the end time is snapped onto it, so the loop
        never passes total_time.
        """
        time = self.start_time + step * self.time_step
        if time > self.total_time or abs(time - self.total_time) <= 1e-9 * self.time_step:
            return self.total_time
        return time


# =============================================================================
# Results and Analysis
# =============================================================================


@beartype
@dataclass
class SimulationResult:
    """Samples emitted by a completed simulation.

    Provides convenient access to trajectory data and analysis.
    """
    times: list[float] = field(default_factory=list)
    states: list[State] = field(default_factory=list)

    def append(self, time: float, state: State) -> None:
        self.times.append(time)
        self.states.append(state)

    def __len__(self) -> int:
        return len(self.states)

    @property
    def final_state(self) -> State:
        """Last emitted state."""
        if not self.states:
            raise IndexError("simulation result is empty")
        return self.states[-1]

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array(self.times, dtype=np.float64)

    def _stack(self, name: str) -> NDArray[np.float64]:
        if not self.states:
            return np.empty((0, 3))
        return np.array([getattr(s, name) for s in self.states])

    @property
    def position(self) -> NDArray[np.float64]:
        """NED position history [m], shape (N, 3)."""
        return self._stack("position")

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Body velocity history [m/s], shape (N, 3)."""
        return self._stack("velocity")

    @property
    def attitude(self) -> NDArray[np.float64]:
        """Euler angle history [rad], shape (N, 3)."""
        return self._stack("attitude")

    @property
    def angular_rate(self) -> NDArray[np.float64]:
        """Body angular rate history [rad/s], shape (N, 3)."""
        return self._stack("angular_rate")

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return np.array([s.altitude for s in self.states], dtype=np.float64)

    def to_dataframe(self):
        """Convert to Polars DataFrame."""
        import polars as pl

        position = self.position
        velocity = self.velocity
        attitude = self.attitude
        rates = self.angular_rate

        return pl.DataFrame({
            "time": self.time,
            "north": position[:, 0],
            "east": position[:, 1],
            "down": position[:, 2],
            "altitude": self.altitude,
            "u": velocity[:, 0],
            "v": velocity[:, 1],
            "w": velocity[:, 2],
            "phi": attitude[:, 0],
            "theta": attitude[:, 1],
            "psi": attitude[:, 2],
            "p": rates[:, 0],
            "q": rates[:, 1],
            "r": rates[:, 2],
        })


# =============================================================================
# Simulation
# =============================================================================


@beartype
class Simulation:
    """Fixed-step simulation loop.

    Each iteration emits the current state when the elapsed time falls
    within half a step of a multiple of the output interval, then advances
    one step unless the end time has been reached.

    Example:
        >>> sim = Simulation(state, integrator, SimConfig(total_time=5.0))
        >>> result = sim.run(on_output=lambda t, s: print(t, s.altitude))
    """

    def __init__(
        self,
        initial_state: State,
        integrator: EulerIntegrator,
        config: SimConfig | None = None,
    ) -> None:
        """Initialize simulation.

        Args:
            initial_state: State at config.start_time
            integrator: Integrator used to advance the state
            config: Timing configuration
        """
        self.initial_state = initial_state
        self.integrator = integrator
        self.config = config or SimConfig()

    def should_output(self, time: float) -> bool:
        """Whether ``time`` lands on a reporting boundary (tolerance dt/2)."""
        interval = self.config.output_interval
        tolerance = self.config.time_step / 2
        remainder = (time - self.config.start_time) % interval
        return abs(remainder) <= tolerance or abs(remainder - interval) <= tolerance

    def run(self, on_output: OutputCallback | None = None) -> SimulationResult:
        """Run the simulation to completion.

        Args:
            on_output: Called with (time, state) for every emitted sample

        Returns:
            Emitted samples in time order
        """
        cfg = self.config
        result = SimulationResult()
        state = self.initial_state

        logger.info(
            "Starting simulation: t=%.3f..%.3f s, dt=%g s, output every %g s",
            cfg.start_time, cfg.total_time, cfg.time_step, cfg.output_interval,
        )

        for step in range(cfg.step_count):
            time = cfg.time_at(step)

            if self.should_output(time):
                logger.debug(
                    "t=%.2f s N=%.0f m E=%.0f m alt=%.0f m u=%.1f v=%.1f w=%.1f m/s",
                    time, state.position[0], state.position[1], state.altitude,
                    state.velocity[0], state.velocity[1], state.velocity[2],
                )
                result.append(time, state)
                if on_output is not None:
                    on_output(time, state)

            if time < cfg.total_time:
                state = self.integrator.integrate(state, time, cfg.time_step)

        logger.info("Simulation complete: %d samples emitted", len(result))
        return result
