"""Data export utilities for flight records."""

import json
import logging
from pathlib import Path

import numpy as np

from modelrocket.simulation.results import FlightRecord
from modelrocket.simulation.state import SimulationSample

logger = logging.getLogger(__name__)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder for NumPy scalars and arrays."""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def flight_to_dict(record: FlightRecord) -> dict:
    """Column-oriented dictionary of a flight, ready for a renderer.

    Columns rather than per-sample objects keep the file compact for long
    flights.
    """
    rocket = record.rocket
    return {
        "metadata": {
            "name": rocket.name,
            "total_mass": rocket.total_mass,
            "thrust": rocket.thrust,
            "total_drag": rocket.total_drag,
            "body_diameter": rocket.body_diameter,
            "stability": rocket.stability,
            "burn_time": rocket.burn_time,
        },
        "summary": record.summary().to_dict(),
        "samples": {
            name: [getattr(s, name) for s in record.samples]
            for name in SimulationSample._fields
        },
    }


def export_flight_to_json(record: FlightRecord, filepath: str | Path) -> Path:
    """Export a flight record to a JSON file.

    Args:
        record: Finished flight
        filepath: Path to save the JSON file

    Returns:
        Path written
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(flight_to_dict(record), f, cls=NumpyEncoder)

    logger.info("Exported flight data to %s (%d samples)", path, len(record))
    return path


def export_flight_to_csv(record: FlightRecord, filepath: str | Path) -> Path:
    """Export the samples of a flight record to CSV, one row per sample."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    record.to_dataframe().write_csv(path)

    logger.info("Exported flight samples to %s (%d rows)", path, len(record))
    return path


def load_flight_json(filepath: str | Path) -> dict:
    """Read back a file written by export_flight_to_json."""
    with open(filepath) as f:
        return json.load(f)
