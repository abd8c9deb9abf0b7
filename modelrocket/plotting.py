"""Static flight-profile plots.

Provides matplotlib figures for reviewing a finished flight:
- Altitude, velocity and acceleration vs time
- Side-view trajectory (downrange drift vs altitude)
- Comparison of several flights

These are analysis figures, not the live launch animation.
"""

import matplotlib.pyplot as plt
from beartype import beartype
from matplotlib.figure import Figure

from modelrocket.simulation.results import FlightRecord

# =============================================================================
# Plot Style Configuration
# =============================================================================

COLORS = {
    "primary": "#2E86AB",  # Steel blue
    "secondary": "#A23B72",  # Berry
    "accent": "#F18F01",  # Orange
    "burn": "#E63946",  # Burnout marker
    "grid": "#CCCCCC",
    "text": "#333333",
}

DEFAULT_FIGSIZE = (12.0, 8.0)


def _setup_style() -> None:
    """Configure matplotlib style for consistent appearance."""
    plt.rcParams.update(
        {
            "font.family": "sans-serif",
            "font.sans-serif": ["Helvetica", "Arial", "DejaVu Sans"],
            "font.size": 11,
            "axes.titlesize": 13,
            "axes.labelsize": 11,
            "axes.edgecolor": COLORS["text"],
            "axes.labelcolor": COLORS["text"],
            "legend.fontsize": 10,
            "grid.alpha": 0.5,
        }
    )


def _mark_burnout(ax: plt.Axes, record: FlightRecord) -> None:
    burn_time = float(record.rocket.burn_time)
    if burn_time <= record.flight_time:
        ax.axvline(burn_time, color=COLORS["burn"], linestyle="--", alpha=0.6, label="Burnout")


# =============================================================================
# Flight Profile
# =============================================================================


@beartype
def plot_flight_profile(
    record: FlightRecord,
    figsize: tuple[float, float] = DEFAULT_FIGSIZE,
) -> Figure:
    """Plot altitude, velocity, acceleration and trajectory for one flight.

    Args:
        record: Finished flight
        figsize: Figure size

    Returns:
        matplotlib Figure with a 2x2 grid of subplots
    """
    _setup_style()

    t = record.time
    fig, axes = plt.subplots(2, 2, figsize=figsize)
    ax_alt, ax_vel, ax_acc, ax_traj = axes.flat

    ax_alt.plot(t, record.altitude, color=COLORS["primary"], linewidth=2)
    ax_alt.axhline(record.max_altitude, color=COLORS["secondary"], linestyle=":",
                   alpha=0.7, label=f"Apogee {record.max_altitude:.1f} m")
    ax_alt.set_xlabel("Time (s)")
    ax_alt.set_ylabel("Altitude (m)")
    ax_alt.set_title("Altitude")

    ax_vel.plot(t, record.vertical_velocity, color=COLORS["accent"], linewidth=2, label="Vertical")
    ax_vel.plot(t, record.horizontal_velocity, color=COLORS["secondary"], linewidth=1.5,
                alpha=0.8, label="Horizontal")
    ax_vel.set_xlabel("Time (s)")
    ax_vel.set_ylabel("Velocity (m/s)")
    ax_vel.set_title("Velocity")

    ax_acc.plot(t, record.vertical_acceleration, color=COLORS["primary"], linewidth=2,
                label="Vertical")
    ax_acc.axhline(0.0, color=COLORS["text"], linewidth=0.8)
    ax_acc.set_xlabel("Time (s)")
    ax_acc.set_ylabel("Acceleration (m/s²)")
    ax_acc.set_title("Vertical Acceleration")

    for ax in (ax_alt, ax_vel, ax_acc):
        _mark_burnout(ax, record)
        ax.grid(True, alpha=0.3)
        ax.legend()

    ax_traj.plot(record.horizontal_position, record.altitude, color=COLORS["primary"], linewidth=2)
    ax_traj.set_xlabel("Downrange (m)")
    ax_traj.set_ylabel("Altitude (m)")
    ax_traj.set_title("Trajectory")
    ax_traj.grid(True, alpha=0.3)

    name = record.rocket.name or "Rocket"
    fig.suptitle(f"Flight Profile: {name} ({record.termination.value})", fontsize=14)

    fig.tight_layout(rect=[0, 0, 1, 0.96])
    return fig


@beartype
def plot_flight_comparison(
    records: list[FlightRecord],
    labels: list[str] | None = None,
    figsize: tuple[float, float] = (10.0, 6.0),
) -> Figure:
    """Overlay the altitude histories of several flights.

    Raises:
        ValueError: If labels are given but do not match the records
    """
    if labels is None:
        labels = [r.rocket.name or f"Flight {i + 1}" for i, r in enumerate(records)]
    if len(labels) != len(records):
        raise ValueError(f"Got {len(labels)} labels for {len(records)} flights")

    _setup_style()

    fig, ax = plt.subplots(figsize=figsize)
    cycle = [COLORS["primary"], COLORS["secondary"], COLORS["accent"]]

    for i, (record, label) in enumerate(zip(records, labels)):
        ax.plot(record.time, record.altitude, color=cycle[i % len(cycle)],
                linewidth=2, label=f"{label} ({record.max_altitude:.0f} m)")

    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Altitude (m)")
    ax.set_title("Altitude Comparison")
    top = max((r.max_altitude for r in records), default=0.0)
    ax.set_ylim(bottom=0.0, top=max(top * 1.1, 1.0))
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    return fig
