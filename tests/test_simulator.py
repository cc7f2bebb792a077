"""Unit tests for the simulation driver.

Tests the fixed-step loop, reporting cadence and result container.
"""

import logging

import numpy as np
import pytest
from beartype.roar import BeartypeCallHintViolation
from numpy.testing import assert_allclose

from sixdof.dynamics import AircraftDynamics, EulerIntegrator, State, light_fixed_wing
from sixdof.environment import default_environment
from sixdof.simulation import SimConfig, Simulation, SimulationResult

G = 9.80665


class CountingDynamics:
    """Wraps a dynamics model and counts derivative evaluations."""

    def __init__(self, dynamics):
        self.dynamics = dynamics
        self.calls = 0

    def derivatives(self, state, time=0.0):
        self.calls += 1
        return self.dynamics.derivatives(state, time)


@pytest.fixture
def integrator():
    return EulerIntegrator(AircraftDynamics(light_fixed_wing(), default_environment()))


@pytest.fixture
def level_state():
    return State.level_flight(altitude=1000.0, airspeed=50.0)


# =============================================================================
# Configuration
# =============================================================================


class TestSimConfig:
    """Test configuration validation."""

    def test_defaults(self):
        config = SimConfig()
        assert config.time_step > 0
        assert config.start_time == 0.0

    def test_step_count(self):
        assert SimConfig(time_step=1.0, total_time=10.0).step_count == 11
        assert SimConfig(time_step=0.1, total_time=1.0).step_count == 11
        assert SimConfig(time_step=0.3, total_time=1.0).step_count == 4

    def test_rejects_nonpositive_step(self):
        with pytest.raises(ValueError, match="time_step"):
            SimConfig(time_step=0.0)

    def test_rejects_nonpositive_interval(self):
        with pytest.raises(ValueError, match="output_interval"):
            SimConfig(output_interval=-1.0)

    def test_rejects_end_before_start(self):
        with pytest.raises(ValueError, match="before start_time"):
            SimConfig(total_time=1.0, start_time=2.0)

    def test_rejects_integer_times(self):
        """Times are floats; integer literals fail the type check."""
        with pytest.raises(BeartypeCallHintViolation):
            SimConfig(time_step=1, total_time=10)

    def test_last_time_snapped_to_total(self):
        """0.1 * 3 overshoots 0.3 by rounding; the loop ends exactly on 0.3."""
        config = SimConfig(time_step=0.1, total_time=0.3)
        assert config.step_count == 4
        assert config.time_at(3) == 0.3
        assert config.time_at(2) == 0.2

    def test_time_at_never_passes_total(self):
        config = SimConfig(time_step=0.7, total_time=2.1)
        times = [config.time_at(k) for k in range(config.step_count)]
        assert times[-1] == 2.1
        assert all(t <= 2.1 for t in times)


# =============================================================================
# Simulation Loop
# =============================================================================


class TestSimulation:
    """Test the driver loop."""

    def test_emits_at_interval(self, integrator, level_state):
        config = SimConfig(time_step=0.1, total_time=5.0, output_interval=1.0)
        result = Simulation(level_state, integrator, config).run()

        assert_allclose(result.time, np.arange(6.0), atol=1e-9)

    def test_every_step_when_interval_equals_step(self, integrator, level_state):
        config = SimConfig(time_step=1.0, total_time=10.0, output_interval=1.0)
        result = Simulation(level_state, integrator, config).run()

        assert len(result) == 11
        assert_allclose(result.velocity[:, 2], G * result.time)

    def test_first_sample_is_initial_state(self, integrator, level_state):
        config = SimConfig(time_step=0.5, total_time=2.0, output_interval=1.0)
        result = Simulation(level_state, integrator, config).run()
        assert result.states[0] is level_state

    def test_integrates_between_outputs(self, integrator, level_state):
        """Steps that are not reported still advance the state."""
        config = SimConfig(time_step=0.01, total_time=2.0, output_interval=1.0)
        result = Simulation(level_state, integrator, config).run()

        assert_allclose(result.final_state.velocity[2], 2.0 * G, rtol=1e-9)
        assert_allclose(result.final_state.position[0], 100.0, rtol=1e-9)

    def test_no_step_past_end(self, integrator, level_state):
        """The state reported at the end time is the last integrated one."""
        config = SimConfig(time_step=1.0, total_time=3.0, output_interval=1.0)
        result = Simulation(level_state, integrator, config).run()
        assert result.time[-1] == 3.0
        assert_allclose(result.final_state.velocity[2], 3.0 * G)

    def test_final_time_not_past_total(self, integrator, level_state):
        config = SimConfig(time_step=0.1, total_time=0.3, output_interval=0.1)
        result = Simulation(level_state, integrator, config).run()
        assert len(result) == 4
        assert result.time[-1] == 0.3
        assert np.all(result.time <= 0.3)

    def test_no_integration_after_last_sample(self, level_state):
        """Every integrated step ends up in the reported trajectory."""
        dynamics = CountingDynamics(
            AircraftDynamics(light_fixed_wing(), default_environment())
        )
        config = SimConfig(time_step=0.7, total_time=2.1, output_interval=0.7)
        result = Simulation(level_state, EulerIntegrator(dynamics), config).run()

        assert dynamics.calls == 3
        assert result.time[-1] == 2.1

    def test_start_time_offset(self, integrator, level_state):
        config = SimConfig(time_step=0.5, total_time=12.0, output_interval=1.0, start_time=10.0)
        result = Simulation(level_state, integrator, config).run()
        assert_allclose(result.time, [10.0, 11.0, 12.0])

    def test_callback(self, integrator, level_state):
        seen = []
        config = SimConfig(time_step=0.25, total_time=1.0, output_interval=0.5)
        Simulation(level_state, integrator, config).run(
            on_output=lambda t, s: seen.append((t, s.altitude))
        )
        assert [t for t, _ in seen] == [0.0, 0.5, 1.0]
        assert seen[0][1] == 1000.0

    def test_should_output_tolerance(self, integrator, level_state):
        config = SimConfig(time_step=0.1, total_time=10.0, output_interval=1.0)
        sim = Simulation(level_state, integrator, config)
        assert sim.should_output(2.0)
        assert sim.should_output(2.04)
        assert sim.should_output(1.96)
        assert not sim.should_output(2.1)

    def test_logging(self, integrator, level_state, caplog):
        config = SimConfig(time_step=1.0, total_time=2.0, output_interval=1.0)
        with caplog.at_level(logging.DEBUG, logger="sixdof.simulation"):
            Simulation(level_state, integrator, config).run()

        messages = [r.getMessage() for r in caplog.records]
        assert any("Starting simulation" in m for m in messages)
        assert any("Simulation complete: 3 samples" in m for m in messages)
        assert sum(r.levelno == logging.DEBUG for r in caplog.records) == 3


# =============================================================================
# Results
# =============================================================================


class TestSimulationResult:
    """Test result arrays and export."""

    def test_arrays(self, integrator, level_state):
        config = SimConfig(time_step=1.0, total_time=4.0, output_interval=1.0)
        result = Simulation(level_state, integrator, config).run()

        assert result.position.shape == (5, 3)
        assert result.velocity.shape == (5, 3)
        assert result.attitude.shape == (5, 3)
        assert result.angular_rate.shape == (5, 3)
        assert_allclose(result.altitude, -result.position[:, 2])

    def test_empty(self):
        result = SimulationResult()
        assert len(result) == 0
        assert result.position.shape == (0, 3)
        with pytest.raises(IndexError):
            result.final_state

    def test_to_dataframe(self, integrator, level_state):
        config = SimConfig(time_step=1.0, total_time=3.0, output_interval=1.0)
        df = Simulation(level_state, integrator, config).run().to_dataframe()

        assert df.height == 4
        assert df.columns[:5] == ["time", "north", "east", "down", "altitude"]
        assert_allclose(df["w"].to_numpy(), G * np.arange(4.0))
