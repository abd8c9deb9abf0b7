#!/usr/bin/env python
"""Model rocket launch example.

This example walks through the builder-to-launch workflow:
1. Assemble a rocket from catalog parts
2. Convert it to an SI configuration
3. Fly it with the step-driven integrator
4. Compare motors from the catalog
5. Save plots and flight data

The default design is a cone nose, 24 x 200 mm body tube, standard fins
and an A8-3 motor.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from modelrocket import (
    FlightIntegrator,
    InvalidConfigurationError,
    RocketConfiguration,
    RocketDesign,
    SimConfig,
    export_flight_to_csv,
    export_flight_to_json,
    format_flight_summary,
    get_part,
    list_parts,
    plot_flight_comparison,
    plot_flight_profile,
    simulate_flight,
)


def main() -> None:
    """Run the launch simulation example."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("MODEL ROCKET LAUNCH SIMULATION")
    print("=" * 60)

    # =========================================================================
    # 1. Assemble the rocket
    # =========================================================================
    print("\n1. Assembling rocket...")

    design = RocketDesign.default()

    print(f"   Nose:           {design.nose.name}")
    print(f"   Body:           {design.body.diameter_mm:.0f} x {design.body.length_mm:.0f} mm")
    print(f"   Fins:           {design.fins.name}")
    print(f"   Engine:         {design.engine.name}")
    print(f"   Total mass:     {design.total_mass_g:.1f} g")
    print(f"   Thrust/weight:  {design.thrust_to_weight:.2f}")

    # =========================================================================
    # 2. Convert to SI
    # =========================================================================
    print("\n2. Converting to SI units...")

    rocket = design.to_configuration()

    print(f"   Mass:           {rocket.total_mass:.4f} kg")
    print(f"   Diameter:       {rocket.body_diameter:.3f} m")
    print(f"   Propellant:     {rocket.propellant_mass * 1000:.1f} g")

    # =========================================================================
    # 3. Fly it, one step per "frame"
    # =========================================================================
    print("\n3. Launching...")

    config = SimConfig(dt=0.01, wind_speed=5.0, wind_seed=42)
    integrator = FlightIntegrator(rocket, config)

    frames = 0
    while not integrator.finished:
        integrator.advance()
        frames += 1

    record = integrator.record()
    print(f"   Flight complete: {frames} steps")
    print()
    print(format_flight_summary(record))

    # =========================================================================
    # 4. Compare motors
    # =========================================================================
    print("\n4. Comparing motors...")
    print("-" * 40)

    records = []
    for engine_name in list_parts("engine"):
        variant = RocketDesign(
            nose=design.nose,
            body=design.body,
            fins=design.fins,
            engine=get_part("engine", engine_name),
        )
        flight = simulate_flight(variant.to_configuration(), config)
        records.append(flight)
        summary = flight.summary()
        print(f"   {engine_name:<12} {summary.max_altitude:7.1f} m  "
              f"{summary.performance_rating.value}")

    # A rocket without a motor is rejected before launch
    try:
        simulate_flight(RocketConfiguration(total_mass=0.05, thrust=0.0))
    except InvalidConfigurationError as e:
        print(f"   Rejected:    {e}")

    # =========================================================================
    # 5. Save results
    # =========================================================================
    print("\n5. Saving results...")

    output_dir = Path("outputs/launch_sim")
    output_dir.mkdir(parents=True, exist_ok=True)

    fig = plot_flight_profile(record)
    fig.savefig(output_dir / "flight_profile.png", dpi=100)
    plt.close(fig)
    print(f"   Plot saved: {output_dir}/flight_profile.png")

    fig = plot_flight_comparison(records, labels=list_parts("engine"))
    fig.savefig(output_dir / "motor_comparison.png", dpi=100)
    plt.close(fig)
    print(f"   Plot saved: {output_dir}/motor_comparison.png")

    export_flight_to_json(record, output_dir / "flight.json")
    export_flight_to_csv(record, output_dir / "flight.csv")
    print(f"   Data saved: {output_dir}/flight.json, flight.csv")

    print("\n" + "=" * 60)
    print("SIMULATION COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
