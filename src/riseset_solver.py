"""
Transit, Rise and Set Solver

Meridian crossings come straight from the hour angle. Rise and set times
are found by successive substitution (http://stjarnhimlen.se/comp/riset.html):
solve the sunrise equation with the declination at a candidate time, move
the candidate to the resulting event time, and repeat until it moves by
less than Config.RISESET_TOLERANCE_MS.

The solver never modifies the body it is given; each step works on a fresh
BodyState from the body's model.
"""

import math
from typing import Callable, Optional, Union
import logging

from riseset_astro import Config, DEG_TO_RAD
from riseset_orbit import BodyState, ConvergenceError

logger = logging.getLogger(__name__)

RISING = -1
SETTING = +1


class RiseSetConvergenceError(ConvergenceError):
    """Rise/set iteration did not settle on an event time"""


def transit(state: BodyState, lat: float, lon: float) -> float:
    """
    Time of the meridian crossing nearest to the state's time.

    Args:
        state: Body position
        lat: Observer latitude in degrees (unused; kept to match rise/set)
        lon: Observer longitude in degrees (east positive)

    Returns:
        Transit time in milliseconds
    """
    ha = state.hour_angle(lon)
    if ha > 12.0:
        ha -= 24.0

    return state.time - Config.MS_PER_HOUR_ANGLE * ha


def riseset(body, lat: float, lon: float,
            threshold: Union[float, Callable[[BodyState], float]],
            direction: int,
            max_iterations: Optional[int] = None) -> Optional[float]:
    """
    Time at which a body crosses an altitude while rising or setting.

    Args:
        body: Body with .state and .model.state_at(time)
        lat: Observer latitude in degrees
        lon: Observer longitude in degrees (east positive)
        threshold: Altitude in degrees, or a function of the candidate
            BodyState returning it
        direction: RISING (-1) or SETTING (+1)
        max_iterations: Iteration cap (default Config.MAX_RISESET_ITERATIONS)

    Returns:
        Event time in milliseconds, or None if the body never reaches the
        altitude at this latitude

    Raises:
        RiseSetConvergenceError: If the candidate keeps moving past the cap
    """
    if max_iterations is None:
        max_iterations = Config.MAX_RISESET_ITERATIONS

    if callable(threshold):
        altitude_at = threshold
    else:
        altitude_at = lambda state: threshold

    sin_lat = math.sin(lat * DEG_TO_RAD)
    cos_lat = math.cos(lat * DEG_TO_RAD)

    state = body.state
    for iteration in range(max_iterations):
        # Solve the sunrise equation at the candidate
        sin_h0 = math.sin(altitude_at(state) * DEG_TO_RAD)
        dec = state.declination
        sin_dec = math.sin(dec * DEG_TO_RAD)
        cos_dec = math.cos(dec * DEG_TO_RAD)
        cos_lha = (sin_h0 - sin_lat * sin_dec) / (cos_lat * cos_dec)

        if abs(cos_lha) > 1.0:
            logger.debug(f"No crossing at lat {lat:.4f}: cos(lha)={cos_lha:.6f}")
            return None

        candidate = (transit(state, lat, lon) +
                     Config.MS_PER_RADIAN_HOUR_ANGLE * direction * math.acos(cos_lha))

        if abs(candidate - state.time) >= Config.RISESET_TOLERANCE_MS:
            logger.debug(f"Iteration {iteration}: moving candidate to {candidate:.1f}")
            state = body.model.state_at(candidate)
            continue

        return candidate

    logger.warning(f"Rise/set did not converge after {max_iterations} iterations "
                   f"(lat={lat}, lon={lon}, direction={direction})")
    raise RiseSetConvergenceError(
        f"no convergence after {max_iterations} iterations"
    )


def twilight_times(body, lat: float, lon: float) -> dict:
    """
    Sunrise, sunset and twilight times around the body's time.

    Args:
        body: The Sun
        lat: Observer latitude in degrees
        lon: Observer longitude in degrees (east positive)

    Returns:
        Dictionary of event name to time in milliseconds; events that do
        not occur are left out
    """
    thresholds = [
        ('sunrise', 'sunset', Config.SUN_HORIZON_ALT),
        ('civil_dawn', 'civil_dusk', Config.CIVIL_ALT),
        ('nautical_dawn', 'nautical_dusk', Config.NAUTICAL_ALT),
        ('astronomical_dawn', 'astronomical_dusk', Config.ASTRONOMICAL_ALT),
    ]

    times = {}
    for morning, evening, altitude in thresholds:
        t_morning = riseset(body, lat, lon, altitude, RISING)
        if t_morning is not None:
            times[morning] = t_morning

        t_evening = riseset(body, lat, lon, altitude, SETTING)
        if t_evening is not None:
            times[evening] = t_evening

    return times
