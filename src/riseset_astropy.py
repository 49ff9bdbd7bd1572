"""
Astropy Reference Calculations for the Rise/Set Model

This module computes the same quantities as the analytic model using
astropy's built-in ephemeris, so the two can be compared:
- Greenwich mean sidereal time
- Sun and Moon right ascension and declination
- Topocentric altitude and azimuth

All functions take time in milliseconds since the Unix epoch, like the
riseset_* modules.
"""

import logging
import warnings
from typing import Tuple

# Suppress astropy warnings for cleaner output
warnings.filterwarnings('ignore', category=UserWarning)

from astropy import units as u
from astropy.time import Time
from astropy.coordinates import (
    EarthLocation, AltAz,
    get_sun, get_body,
    solar_system_ephemeris
)
from astropy.utils import iers

from riseset_astro import wrap_hours

logger = logging.getLogger(__name__)

# Stay offline; the bundled IERS-B table covers past dates
iers.conf.auto_download = False


def astropy_time(time: float) -> Time:
    """Astropy Time for milliseconds since the Unix epoch (UTC)."""
    return Time(time / 1000.0, format='unix', scale='utc')


def gmst(time: float) -> float:
    """
    Greenwich Mean Sidereal Time using astropy.

    Args:
        time: Time in milliseconds

    Returns:
        GMST in hours (0-24)
    """
    t = astropy_time(time)
    return t.sidereal_time('mean', 'greenwich').hour


def sun_position(time: float) -> Tuple[float, float]:
    """
    Geocentric Sun position using astropy.

    Args:
        time: Time in milliseconds

    Returns:
        Tuple of (ra, dec) in hours and degrees
    """
    sun = get_sun(astropy_time(time))
    return sun.ra.hour, sun.dec.deg


def moon_position(time: float) -> Tuple[float, float]:
    """
    Geocentric Moon position using astropy.

    Args:
        time: Time in milliseconds

    Returns:
        Tuple of (ra, dec) in hours and degrees
    """
    with solar_system_ephemeris.set('builtin'):
        moon = get_body('moon', astropy_time(time))
    return moon.ra.hour, moon.dec.deg


def altitude_azimuth(body_name: str, time: float, lat: float, lon: float) -> Tuple[float, float]:
    """
    Topocentric altitude and azimuth of a solar-system body using astropy.

    No refraction is applied.

    Args:
        body_name: 'sun' or 'moon' (any name get_body accepts)
        time: Time in milliseconds
        lat: Observer latitude in degrees
        lon: Observer longitude in degrees (east positive)

    Returns:
        Tuple of (altitude, azimuth) in degrees
    """
    t = astropy_time(time)
    location = EarthLocation(lon=lon * u.deg, lat=lat * u.deg)

    with solar_system_ephemeris.set('builtin'):
        body = get_body(body_name, t, location)
    altaz = body.transform_to(AltAz(obstime=t, location=location))

    return altaz.alt.deg, altaz.az.deg


def compare_with_astropy(body, lat: float, lon: float) -> dict:
    """
    Differences between the analytic model and astropy for one body.

    Args:
        body: Sun or Moon Body from riseset_bodies
        lat: Observer latitude in degrees
        lon: Observer longitude in degrees (east positive)

    Returns:
        Dictionary with 'ra' (hours), 'dec', 'altitude' and 'azimuth'
        (degrees) differences, model minus astropy

    Raises:
        ValueError: If the body is neither the Sun nor the Moon
    """
    if body.name == 'sun':
        ra, dec = sun_position(body.time)
    elif body.name == 'moon':
        ra, dec = moon_position(body.time)
    else:
        raise ValueError(f"No astropy reference for body '{body.name}'")
    altitude, azimuth = altitude_azimuth(body.name, body.time, lat, lon)
    observed = body.observer(lat, lon)

    diffs = {
        'ra': wrap_hours(body.right_ascension - ra + 12.0) - 12.0,
        'dec': body.declination - dec,
        'altitude': observed.altitude - altitude,
        'azimuth': (observed.azimuth - azimuth + 180.0) % 360.0 - 180.0,
    }
    logger.debug(f"{body.name} vs astropy: {diffs}")
    return diffs
