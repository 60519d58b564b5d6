"""Small demonstration harness that flies a tank shell with ``Vector3d``."""
from __future__ import annotations

import argparse
import logging
import math
import sys
from dataclasses import dataclass
from typing import List, Sequence

from .vector import Vector3d

LOGGER = logging.getLogger(__name__)

GRAVITY = Vector3d(0.0, -9.81, 0.0)


@dataclass(frozen=True)
class ShellSample:
    """Shell state captured after an integration step."""

    time: float
    position: Vector3d
    velocity: Vector3d


def muzzle_velocity(speed: float, elevation_deg: float) -> Vector3d:
    """Velocity of a shell fired along +x tilted up by ``elevation_deg``."""

    elevation = math.radians(elevation_deg)
    return Vector3d(speed * math.cos(elevation), speed * math.sin(elevation), 0.0)


def simulate_shell(
    origin: Vector3d,
    velocity: Vector3d,
    *,
    dt: float,
    steps: int,
    gravity: Vector3d = GRAVITY,
) -> List[ShellSample]:
    if dt <= 0.0:
        raise ValueError("Time step must be positive")
    samples = [ShellSample(0.0, origin, velocity)]
    position = origin
    for step in range(1, steps + 1):
        # //1.- Explicit Euler: advance the position first, then the velocity.
        position = position + velocity * dt
        velocity = velocity + gravity * dt
        samples.append(ShellSample(step * dt, position, velocity))
        # //2.- Stop once the shell has hit the ground plane.
        if position.y < 0.0:
            LOGGER.debug("Shell landed after %d steps", step)
            break
    return samples


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fly a tank shell and print its vectors")
    parser.add_argument("--speed", type=float, default=50.0, help="Muzzle speed in m/s")
    parser.add_argument("--elevation", type=float, default=45.0, help="Barrel elevation in degrees")
    parser.add_argument("--dt", type=float, default=0.1, help="Integration step in seconds")
    parser.add_argument("--steps", type=int, default=100, help="Maximum number of steps")
    parser.add_argument("--precision", type=int, default=None, help="Digits printed per component")
    parser.add_argument("--log-level", default="INFO", help="Logging level name")
    return parser


def run(args: Sequence[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)
    logging.basicConfig(
        level=getattr(logging, parsed.log_level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(message)s",
    )
    origin = Vector3d.zero()
    velocity = muzzle_velocity(parsed.speed, parsed.elevation)
    LOGGER.info("Firing from %s with velocity %s", origin, velocity)
    samples = simulate_shell(origin, velocity, dt=parsed.dt, steps=parsed.steps)
    for sample in samples:
        print(
            f"t={sample.time:.2f} position={sample.position.to_string(parsed.precision)} "
            f"velocity={sample.velocity.to_string(parsed.precision)}"
        )
    distance = samples[-1].position.distance_to(origin)
    LOGGER.info("Shell travelled %.2f m in %d steps", distance, len(samples) - 1)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised by manual runs
    sys.exit(run())
