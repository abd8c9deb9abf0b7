"""Flight records, summary statistics, and performance ratings.

A FlightRecord is the immutable result of one run: the ordered samples,
why the run stopped, and the rocket that flew. Renderers read the
samples; summaries reduce them to the handful of numbers shown to the
student (max altitude, max velocity, flight time, rating).
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
import polars as pl
from beartype import beartype
from numpy.typing import NDArray

from modelrocket.simulation.state import SimulationSample, TerminationReason
from modelrocket.vehicle.configuration import RocketConfiguration

# =============================================================================
# Ratings
# =============================================================================


class PerformanceRating(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_WORK = "Needs Work"
    POOR = "Poor"


# (threshold, rating), checked in order; value must exceed the threshold
ALTITUDE_RATINGS = (
    (100.0, PerformanceRating.EXCELLENT),
    (50.0, PerformanceRating.GOOD),
    (20.0, PerformanceRating.FAIR),
)
THRUST_TO_WEIGHT_RATINGS = (
    (5.0, PerformanceRating.EXCELLENT),
    (3.0, PerformanceRating.GOOD),
    (1.5, PerformanceRating.FAIR),
)


@beartype
def rate_altitude(max_altitude: float | int) -> PerformanceRating:
    """Rate a flight by its apogee [m]."""
    for threshold, rating in ALTITUDE_RATINGS:
        if max_altitude > threshold:
            return rating
    return PerformanceRating.NEEDS_WORK


@beartype
def rate_thrust_to_weight(thrust_to_weight: float | int) -> PerformanceRating:
    """Rate a design by its lift-off thrust-to-weight ratio."""
    for threshold, rating in THRUST_TO_WEIGHT_RATINGS:
        if thrust_to_weight > threshold:
            return rating
    return PerformanceRating.POOR


# =============================================================================
# Summary
# =============================================================================


@beartype
@dataclass(frozen=True)
class FlightSummary:
    """Headline numbers for one flight.

    Attributes:
        max_altitude: Highest recorded altitude [m]
        max_velocity: Highest recorded upward velocity [m/s]
        flight_time: Time of the last sample [s]
        apogee_time: Time of the highest sample [s]
        horizontal_drift: Downrange position at the end of the record [m]
        thrust_to_weight: Nominal thrust over lift-off weight
        termination: Why the run stopped
        performance_rating: Rating from apogee
        design_rating: Rating from thrust-to-weight
    """
    max_altitude: float
    max_velocity: float
    flight_time: float
    apogee_time: float
    horizontal_drift: float
    thrust_to_weight: float
    termination: TerminationReason
    performance_rating: PerformanceRating
    design_rating: PerformanceRating

    def to_dict(self) -> dict[str, float | str]:
        return {
            "max_altitude": self.max_altitude,
            "max_velocity": self.max_velocity,
            "flight_time": self.flight_time,
            "apogee_time": self.apogee_time,
            "horizontal_drift": self.horizontal_drift,
            "thrust_to_weight": self.thrust_to_weight,
            "termination": self.termination.value,
            "performance_rating": self.performance_rating.value,
            "design_rating": self.design_rating.value,
        }


# =============================================================================
# Flight Record
# =============================================================================


@beartype
@dataclass(frozen=True)
class FlightRecord:
    """Results from a completed flight.

    Provides array access to the sample columns and summary statistics.
    """
    samples: tuple[SimulationSample, ...]
    termination: TerminationReason
    rocket: RocketConfiguration

    def __post_init__(self) -> None:
        if not self.samples:
            raise ValueError("A flight record needs at least one sample")

    def __len__(self) -> int:
        return len(self.samples)

    def _column(self, name: str) -> NDArray[np.float64]:
        return np.array([getattr(s, name) for s in self.samples], dtype=np.float64)

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return self._column("time")

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return self._column("altitude")

    @property
    def vertical_velocity(self) -> NDArray[np.float64]:
        """Upward velocity history [m/s]."""
        return self._column("vertical_velocity")

    @property
    def vertical_acceleration(self) -> NDArray[np.float64]:
        """Vertical acceleration history [m/s^2]."""
        return self._column("vertical_acceleration")

    @property
    def horizontal_position(self) -> NDArray[np.float64]:
        """Downrange position history [m]."""
        return self._column("horizontal_position")

    @property
    def horizontal_velocity(self) -> NDArray[np.float64]:
        """Downrange velocity history [m/s]."""
        return self._column("horizontal_velocity")

    @property
    def mass(self) -> NDArray[np.float64]:
        """Mass history [kg]."""
        return self._column("mass")

    @property
    def thrust(self) -> NDArray[np.float64]:
        """Thrust history [N]."""
        return self._column("thrust")

    @property
    def max_altitude(self) -> float:
        return float(self.altitude.max())

    @property
    def max_velocity(self) -> float:
        return float(self.vertical_velocity.max())

    @property
    def flight_time(self) -> float:
        return float(self.samples[-1].time)

    @property
    def apogee_time(self) -> float:
        return float(self.samples[int(np.argmax(self.altitude))].time)

    @property
    def horizontal_drift(self) -> float:
        return float(self.samples[-1].horizontal_position)

    def summary(self) -> FlightSummary:
        """Reduce the record to its headline numbers and ratings."""
        twr = float(self.rocket.thrust_to_weight)
        return FlightSummary(
            max_altitude=self.max_altitude,
            max_velocity=self.max_velocity,
            flight_time=self.flight_time,
            apogee_time=self.apogee_time,
            horizontal_drift=self.horizontal_drift,
            thrust_to_weight=twr,
            termination=self.termination,
            performance_rating=rate_altitude(self.max_altitude),
            design_rating=rate_thrust_to_weight(twr),
        )

    def to_dataframe(self) -> pl.DataFrame:
        """Convert to a Polars DataFrame, one row per sample."""
        return pl.DataFrame(
            [s._asdict() for s in self.samples],
            schema={name: pl.Float64 for name in SimulationSample._fields},
        )


@beartype
def format_flight_summary(record: FlightRecord) -> str:
    """Format a flight summary as a text report."""
    summary = record.summary()
    name = record.rocket.name or "Rocket"
    lines = [
        f"{name} Flight Summary",
        "=" * 50,
        f"  Max Altitude:     {summary.max_altitude:8.1f} m",
        f"  Max Velocity:     {summary.max_velocity:8.1f} m/s",
        f"  Apogee Time:      {summary.apogee_time:8.2f} s",
        f"  Flight Time:      {summary.flight_time:8.2f} s",
        f"  Drift:            {summary.horizontal_drift:8.1f} m",
        f"  Thrust/Weight:    {summary.thrust_to_weight:8.2f}",
        f"  Termination:      {summary.termination.value}",
        f"  Performance:      {summary.performance_rating.value}",
        f"  Design Rating:    {summary.design_rating.value}",
    ]
    return "\n".join(lines)
