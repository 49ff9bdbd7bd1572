"""
Keplerian Orbit Module

Converts six orbital elements at a given time into an ecliptic Cartesian
position (https://ssd.jpl.nasa.gov/?planet_pos) and derives ecliptic and
equatorial coordinates from it.

Positions are immutable BodyState records. Every coordinate is recomputed
from x, y, z and time on access; nothing derived is stored.
"""

import math
from dataclasses import dataclass
from typing import Optional
import logging

from riseset_astro import (
    Config, RAD_TO_DEG, RAD_TO_HOURS,
    obliquity, gmst, wrap_hours
)

logger = logging.getLogger(__name__)


class ConvergenceError(RuntimeError):
    """An iterative solver exceeded its iteration cap"""


class KeplerConvergenceError(ConvergenceError):
    """Newton iteration on Kepler's equation did not converge"""


@dataclass(frozen=True)
class OrbitalElements:
    """Keplerian elements at one instant"""
    a: float  # semi-major axis (AU)
    e: float  # eccentricity
    i: float  # inclination (radians)
    mean_longitude: float  # lambda (radians)
    perihelion: float  # longitude of perihelion, pi (radians)
    node: float  # longitude of ascending node, Omega (radians)


@dataclass(frozen=True)
class BodyState:
    """Ecliptic Cartesian position (AU) of a body at a time (ms)"""
    time: float
    x: float
    y: float
    z: float

    # https://www.aa.quae.nl/en/reken/hemelpositie.html#1_6
    @property
    def distance(self) -> float:
        """Distance in AU"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    # http://stjarnhimlen.se/comp/ppcomp.html#7
    @property
    def longitude(self) -> float:
        """Ecliptic longitude in degrees, [0, 360)"""
        return math.atan2(-self.y, -self.x) * RAD_TO_DEG + 180.0

    @property
    def latitude(self) -> float:
        """Ecliptic latitude in degrees; NaN at zero distance"""
        distance = self.distance
        if distance == 0:
            return math.nan
        return math.asin(self.z / distance) * RAD_TO_DEG

    # http://stjarnhimlen.se/comp/ppcomp.html#12
    @property
    def right_ascension(self) -> float:
        """Right ascension in hours, [0, 24)"""
        eps = obliquity(self.time)
        return math.atan2(self.z * math.sin(eps) - self.y * math.cos(eps), -self.x) * RAD_TO_HOURS + 12.0

    @property
    def declination(self) -> float:
        """Declination in degrees; NaN at zero distance"""
        distance = self.distance
        if distance == 0:
            return math.nan
        eps = obliquity(self.time)
        return math.asin((self.y * math.sin(eps) + self.z * math.cos(eps)) / distance) * RAD_TO_DEG

    # https://www.aa.quae.nl/en/reken/hemelpositie.html#1_9
    def hour_angle(self, lon: float) -> float:
        """
        Local hour angle.

        Args:
            lon: Observer longitude in degrees (east positive)

        Returns:
            Hour angle in hours, [0, 24)
        """
        return wrap_hours(gmst(self.time) + lon / 15.0 - self.right_ascension)


# ============================================================================
# Kepler's Equation
# ============================================================================

def solve_kepler(M: float, e: float, max_iterations: Optional[int] = None) -> float:
    """
    Solve Kepler's equation M = E - e*sin(E) by Newton-Raphson.

    Args:
        M: Mean anomaly in radians
        e: Eccentricity
        max_iterations: Iteration cap (default Config.MAX_KEPLER_ITERATIONS)

    Returns:
        Eccentric anomaly in radians; NaN for non-finite input or a zero
        derivative (e = 1 at E = 0)

    Raises:
        KeplerConvergenceError: If the increment never drops below
            Config.KEPLER_TOLERANCE within the cap
    """
    if not (math.isfinite(M) and math.isfinite(e)):
        return math.nan

    if max_iterations is None:
        max_iterations = Config.MAX_KEPLER_ITERATIONS

    E = M + e * math.sin(M)
    for _ in range(max_iterations):
        dM = M - (E - e * math.sin(E))
        slope = 1.0 - e * math.cos(E)
        if slope == 0:
            return math.nan
        dE = dM / slope
        E += dE

        if abs(dE) <= Config.KEPLER_TOLERANCE:
            return E

    logger.warning(f"Kepler's equation did not converge: M={M:.9f}, e={e:.6f}")
    raise KeplerConvergenceError(
        f"no convergence after {max_iterations} iterations (M={M}, e={e})"
    )


def orbit_position(time: float, elements: OrbitalElements) -> BodyState:
    """
    Compute the ecliptic position of a body from its orbital elements.

    Args:
        time: Time in milliseconds
        elements: Orbital elements valid at that time

    Returns:
        BodyState at the given time
    """
    a = elements.a
    e = elements.e
    i = elements.i
    node = elements.node

    M = elements.mean_longitude - elements.perihelion
    w = elements.perihelion - node

    E = solve_kepler(M, e)

    # In-plane coordinates
    u = a * (math.cos(E) - e)
    v = a * (math.sqrt(1.0 - e * e) if e * e <= 1.0 else math.nan) * math.sin(E)

    # Rotate by argument of perihelion, inclination and node
    sin_i = math.sin(i)
    cos_i = math.cos(i)
    sin_node = math.sin(node)
    cos_node = math.cos(node)
    sin_w = math.sin(w)
    cos_w = math.cos(w)
    x = u * (cos_w * cos_node - sin_w * sin_node * cos_i) + v * (-sin_w * cos_node - cos_w * sin_node * cos_i)
    y = u * (cos_w * sin_node + sin_w * cos_node * cos_i) + v * (-sin_w * sin_node + cos_w * cos_node * cos_i)
    z = u * (sin_w * sin_i) + v * (cos_w * sin_i)

    return BodyState(time=time, x=x, y=y, z=z)
