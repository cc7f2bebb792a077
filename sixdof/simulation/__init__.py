"""Simulation module for fixed-wing flight simulation.

Provides the fixed-step driver that advances the state with an integrator
and emits samples at a reporting interval.

Example:
    >>> from sixdof.simulation import Simulation, SimConfig
    >>>
    >>> sim = Simulation(state, integrator, SimConfig(time_step=0.01, total_time=30.0))
    >>> result = sim.run()
    >>> result.altitude[-1]
"""

from sixdof.simulation.simulator import (
    OutputCallback,
    SimConfig,
    SimulationResult,
    Simulation,
)

__all__ = [
    "OutputCallback",
    "SimConfig",
    "SimulationResult",
    "Simulation",
]
