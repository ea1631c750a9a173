"""
Autopilot Demonstration

Demonstrates:
- Loading an aircraft configuration with a tabulated polar
- Level-flight trim
- Airspeed and altitude hold from a trimmed start
- Batch run with telemetry history
"""

import logging
from pathlib import Path

from flight2d.environment import StandardAtmosphere
from flight2d.simulation import SimulationState, run_simulation

AIRCRAFT_DIR = Path(__file__).resolve().parent.parent / "aircraft"


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 70)
    print("Autopilot Demonstration - Light Trainer")
    print("=" * 70)
    print()

    state = SimulationState()
    status = state.load_aircraft(AIRCRAFT_DIR / "trainer.yaml")
    print(status.message)
    print(f"  {state.aircraft}")
    print()

    # ========================================
    # Trim at 50 m/s, 300 m
    # ========================================
    trim = state.trim_level_flight(airspeed=50.0, altitude=300.0)
    if not trim.success:
        print(f"No trim found (residual {trim.residual:.1f} N)")
        return

    print("Trim:")
    print(f"  Alpha:    {trim.alpha_deg:.2f} deg")
    print(f"  Throttle: {trim.throttle:.3f}")
    print(f"  Density:  {StandardAtmosphere.density(300.0):.4f} kg/m³")
    print()

    # ========================================
    # Climb to 500 m at 55 m/s
    # ========================================
    state.speed_hold.setpoint = 55.0
    state.altitude_hold.setpoint = 500.0
    state.speed_hold.enable()
    state.altitude_hold.enable()

    history = run_simulation(state, duration=120.0)

    every = int(10.0 / state.dt)
    print(history.iloc[::every][["time", "altitude", "speed", "throttle", "alpha_deg"]]
          .to_string(index=False, float_format=lambda v: f"{v:8.2f}"))
    print()

    final = history.iloc[-1]
    print("Final:")
    print(f"  Altitude: {final['altitude']:.1f} m (target {state.altitude_hold.setpoint:.0f} m)")
    print(f"  Speed:    {final['speed']:.1f} m/s (target {state.speed_hold.setpoint:.0f} m/s)")
    print(f"  Distance: {final['distance'] / 1000.0:.2f} km")


if __name__ == "__main__":
    main()
