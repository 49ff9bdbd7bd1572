"""
Sun and Moon Rise/Set Ephemeris

This module is the entry point of the rise/set calculator. It re-exports the
public API of the riseset_* modules and assembles a daily almanac (transit,
rise, set and twilight of the Sun, transit, rise and set of the Moon) for one
observing site.

Times are milliseconds since 1970-01-01 00:00 UTC; angles are degrees unless
stated as hours.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from riseset_astro import (
    Config, obliquity, gmst, parallax, wrap_hours,
    time_from_datetime, datetime_from_time, julian_date
)
from riseset_orbit import (
    OrbitalElements, BodyState, ConvergenceError, KeplerConvergenceError,
    solve_kepler, orbit_position
)
from riseset_solver import (
    RISING, SETTING, RiseSetConvergenceError,
    transit, riseset, twilight_times
)
from riseset_observer import Observer, observe
from riseset_bodies import (
    Body, BodyModel, SUN, MOON,
    sun, moon, planet, planet_model
)

logger = logging.getLogger(__name__)

__all__ = [
    'Config', 'obliquity', 'gmst', 'parallax', 'wrap_hours',
    'time_from_datetime', 'datetime_from_time', 'julian_date',
    'OrbitalElements', 'BodyState', 'ConvergenceError', 'KeplerConvergenceError',
    'solve_kepler', 'orbit_position',
    'RISING', 'SETTING', 'RiseSetConvergenceError',
    'transit', 'riseset', 'twilight_times',
    'Observer', 'observe',
    'Body', 'BodyModel', 'SUN', 'MOON', 'sun', 'moon', 'planet', 'planet_model',
    'Almanac', 'compute_almanac',
]


@dataclass
class Almanac:
    """Sun and Moon events for one site around a reference time"""
    time: float = 0.0
    latitude: float = 0.0  # degrees
    longitude: float = 0.0  # degrees, east positive

    sun_transit: float = 0.0
    sunrise: Optional[float] = None
    sunset: Optional[float] = None
    dawn: Optional[float] = None  # -6 degree twilight
    dusk: Optional[float] = None

    moon_transit: float = 0.0
    moonrise: Optional[float] = None
    moonset: Optional[float] = None
    ra_moon: float = 0.0  # hours
    dec_moon: float = 0.0  # degrees


def compute_almanac(time: float, lat: float, lon: float) -> Almanac:
    """
    Compute the daily almanac for a site.

    Args:
        time: Reference time in milliseconds
        lat: Site latitude in degrees
        lon: Site longitude in degrees (east positive)

    Returns:
        Almanac; events that do not occur are None
    """
    the_sun = sun(time)
    the_moon = moon(time)

    almanac = Almanac(
        time=time,
        latitude=lat,
        longitude=lon,
        sun_transit=the_sun.transit(lat, lon),
        sunrise=the_sun.rise(lat, lon),
        sunset=the_sun.set(lat, lon),
        dawn=the_sun.dawn(lat, lon),
        dusk=the_sun.dusk(lat, lon),
        moon_transit=the_moon.transit(lat, lon),
        moonrise=the_moon.rise(lat, lon),
        moonset=the_moon.set(lat, lon),
        ra_moon=the_moon.right_ascension,
        dec_moon=the_moon.declination,
    )

    for name in ('sunrise', 'sunset', 'dawn', 'dusk', 'moonrise', 'moonset'):
        if getattr(almanac, name) is None:
            logger.info(f"No {name} at lat {lat:.4f}, lon {lon:.4f}")

    logger.debug(f"Almanac for {datetime_from_time(time).isoformat()}: "
                 f"sun transit {almanac.sun_transit:.0f}, "
                 f"moon transit {almanac.moon_transit:.0f}")

    return almanac
