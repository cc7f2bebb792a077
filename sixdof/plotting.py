"""Visualization module for Sixdof.

Provides plotting functions for:
- Simulated trajectories (ground track, altitude, body velocity, attitude)
- Standard atmosphere profiles
- Wind field profiles

All plots use matplotlib with a consistent, professional style.
"""

import matplotlib.pyplot as plt
import numpy as np
from beartype import beartype
from matplotlib.figure import Figure

from sixdof.environment.atmosphere import StandardAtmosphere
from sixdof.environment.wind import WindField
from sixdof.simulation.simulator import SimulationResult

# =============================================================================
# Plot Style Configuration
# =============================================================================

# Professional color palette
COLORS = {
    "primary": "#2E86AB",  # Steel blue
    "secondary": "#A23B72",  # Berry
    "accent": "#F18F01",  # Orange
    "grid": "#CCCCCC",  # Grid lines
    "text": "#333333",  # Text color
}

# One color per vector component
COMPONENT_COLORS = (COLORS["primary"], COLORS["secondary"], COLORS["accent"])

# Default figure size
DEFAULT_FIGSIZE = (12.0, 8.0)


def _setup_style() -> None:
    """Configure matplotlib style for consistent appearance."""
    plt.rcParams.update(
        {
            "font.family": "sans-serif",
            "font.sans-serif": ["Helvetica", "Arial", "DejaVu Sans"],
            "font.size": 11,
            "axes.titlesize": 14,
            "axes.labelsize": 12,
            "axes.linewidth": 1.2,
            "axes.edgecolor": COLORS["text"],
            "axes.labelcolor": COLORS["text"],
            "legend.fontsize": 10,
            "figure.titlesize": 16,
            "grid.alpha": 0.5,
        }
    )


# =============================================================================
# Trajectory Plot
# =============================================================================


@beartype
def plot_trajectory(
    result: SimulationResult,
    title: str = "6DOF Simulation",
    figsize: tuple[float, float] = DEFAULT_FIGSIZE,
) -> Figure:
    """Plot a simulated trajectory.

    Four panels: ground track, altitude, body velocity and Euler angles,
    the latter three against time.

    Args:
        result: Completed simulation result
        title: Figure title
        figsize: Figure size

    Returns:
        matplotlib Figure with four subplots
    """
    _setup_style()

    time = result.time
    position = result.position
    velocity = result.velocity
    attitude_deg = np.degrees(result.attitude)

    fig, axes = plt.subplots(2, 2, figsize=figsize)
    ax_track, ax_alt, ax_vel, ax_att = axes.ravel()

    # Ground track: east on x, north on y
    ax_track.plot(position[:, 1], position[:, 0], color=COLORS["primary"], linewidth=2)
    if len(result) > 0:
        ax_track.plot(position[0, 1], position[0, 0], "o", color=COLORS["accent"], label="Start")
        ax_track.legend()
    ax_track.set_xlabel("East (m)")
    ax_track.set_ylabel("North (m)")
    ax_track.set_title("Ground Track")
    ax_track.set_aspect("equal", adjustable="datalim")
    ax_track.grid(True, alpha=0.3)

    ax_alt.plot(time, result.altitude, color=COLORS["primary"], linewidth=2)
    ax_alt.set_xlabel("Time (s)")
    ax_alt.set_ylabel("Altitude (m)")
    ax_alt.set_title("Altitude")
    ax_alt.grid(True, alpha=0.3)

    for i, name in enumerate(("u", "v", "w")):
        ax_vel.plot(time, velocity[:, i], color=COMPONENT_COLORS[i], linewidth=2, label=name)
    ax_vel.set_xlabel("Time (s)")
    ax_vel.set_ylabel("Velocity (m/s)")
    ax_vel.set_title("Body Velocity")
    ax_vel.grid(True, alpha=0.3)
    ax_vel.legend()

    for i, name in enumerate(("Roll", "Pitch", "Yaw")):
        ax_att.plot(time, attitude_deg[:, i], color=COMPONENT_COLORS[i], linewidth=2, label=name)
    ax_att.set_xlabel("Time (s)")
    ax_att.set_ylabel("Angle (deg)")
    ax_att.set_title("Attitude")
    ax_att.grid(True, alpha=0.3)
    ax_att.legend()

    fig.suptitle(title, fontsize=14, y=1.02)
    fig.tight_layout()
    return fig


# =============================================================================
# Environment Plots
# =============================================================================


@beartype
def plot_atmosphere(
    atmosphere: StandardAtmosphere,
    max_altitude_km: float = 50.0,
    num_points: int = 200,
    figsize: tuple[float, float] = (14.0, 5.0),
) -> Figure:
    """Plot temperature, pressure and density against altitude.

    Args:
        atmosphere: Atmosphere model
        max_altitude_km: Top of the plotted range (km)
        num_points: Number of altitude points
        figsize: Figure size

    Returns:
        matplotlib Figure with three subplots
    """
    _setup_style()

    altitudes_km = np.linspace(0.0, max_altitude_km, num_points)
    profile = atmosphere.profile(altitudes_km * 1000.0)

    fig, (ax_t, ax_p, ax_rho) = plt.subplots(1, 3, figsize=figsize, sharey=True)

    ax_t.plot(profile["temperature"] - 273.15, altitudes_km, color=COLORS["primary"], linewidth=2)
    ax_t.set_xlabel("Temperature (C)")
    ax_t.set_ylabel("Altitude (km)")
    ax_t.set_title("Temperature")
    ax_t.grid(True, alpha=0.3)

    ax_p.semilogx(profile["pressure"], altitudes_km, color=COLORS["secondary"], linewidth=2)
    ax_p.set_xlabel("Pressure (Pa)")
    ax_p.set_title("Pressure")
    ax_p.grid(True, alpha=0.3, which="both")

    ax_rho.semilogx(profile["density"], altitudes_km, color=COLORS["accent"], linewidth=2)
    ax_rho.set_xlabel("Density (kg/m^3)")
    ax_rho.set_title("Density")
    ax_rho.grid(True, alpha=0.3, which="both")

    fig.suptitle("Standard Atmosphere", fontsize=14, y=1.02)
    fig.tight_layout()
    return fig


@beartype
def plot_wind_profile(
    wind_field: WindField,
    max_altitude: float | None = None,
    num_points: int = 200,
    figsize: tuple[float, float] = (10.0, 6.0),
) -> Figure:
    """Plot interpolated wind speed and direction against altitude.

    Args:
        wind_field: Wind field to sample
        max_altitude: Top of the plotted range [m]; defaults to 20% above
            the highest sample
        num_points: Number of altitude points
        figsize: Figure size

    Returns:
        matplotlib Figure with two subplots
    """
    _setup_style()

    if max_altitude is None:
        max_altitude = max(wind_field.max_altitude() * 1.2, 1000.0)

    altitudes = np.linspace(0.0, max_altitude, num_points)
    winds = [wind_field.wind_at_altitude(float(h)) for h in altitudes]
    speeds = np.array([w.speed for w in winds])
    directions_deg = np.degrees([w.direction for w in winds]) % 360.0

    fig, (ax_speed, ax_dir) = plt.subplots(1, 2, figsize=figsize, sharey=True)

    ax_speed.plot(speeds, altitudes, color=COLORS["primary"], linewidth=2)
    ax_dir.plot(directions_deg, altitudes, ".", color=COLORS["secondary"], markersize=3)

    sample_altitudes = [h for h, _ in wind_field.samples()]
    sample_speeds = [w.speed for _, w in wind_field.samples()]
    ax_speed.plot(sample_speeds, sample_altitudes, "o", color=COLORS["accent"], label="Samples")
    if sample_altitudes:
        ax_speed.legend()

    ax_speed.set_xlabel("Speed (m/s)")
    ax_speed.set_ylabel("Altitude (m)")
    ax_speed.set_title("Wind Speed")
    ax_speed.grid(True, alpha=0.3)

    ax_dir.set_xlabel("Direction from (deg)")
    ax_dir.set_xlim(0.0, 360.0)
    ax_dir.set_xticks([0, 90, 180, 270, 360])
    ax_dir.set_title("Wind Direction")
    ax_dir.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig
