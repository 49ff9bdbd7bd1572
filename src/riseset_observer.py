"""
Topocentric Horizontal Coordinates

Altitude and azimuth of a body seen by an observer on the Earth's surface,
with the parallax correction from http://stjarnhimlen.se/comp/ppcomp.html#13
"""

import math
from dataclasses import dataclass
import logging

import numpy as np

from riseset_astro import DEG_TO_RAD, RAD_TO_DEG, HOURS_TO_RAD, parallax

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observer:
    """Horizontal coordinates of a body for one observer"""
    altitude: float  # degrees
    azimuth: float  # degrees, [0, 360], north = 0


def observe(body, lat: float, lon: float) -> Observer:
    """
    Calculate topocentric altitude and azimuth.

    Args:
        body: Body or BodyState (declination, hour_angle(), distance)
        lat: Observer latitude in degrees
        lon: Observer longitude in degrees (east positive)

    Returns:
        Observer with altitude and azimuth in degrees
    """
    sin_lat = math.sin(lat * DEG_TO_RAD)
    cos_lat = math.cos(lat * DEG_TO_RAD)

    dec = body.declination
    sin_dec = math.sin(dec * DEG_TO_RAD)
    cos_dec = math.cos(dec * DEG_TO_RAD)

    ha = body.hour_angle(lon)
    sin_ha = math.sin(ha * HOURS_TO_RAD)
    cos_ha = math.cos(ha * HOURS_TO_RAD)

    # Geocentric horizontal coordinates
    sin_altitude = sin_lat * sin_dec + cos_lat * cos_dec * cos_ha

    # Handle numerical errors
    sin_altitude = float(np.clip(sin_altitude, -1.0, 1.0))

    cos_altitude = math.sqrt(1.0 - sin_altitude * sin_altitude)
    azimuth = math.atan2(cos_dec * sin_ha, sin_lat * cos_dec * cos_ha - cos_lat * sin_dec) * RAD_TO_DEG + 180.0

    # Parallax lowers the topocentric altitude
    altitude = math.asin(sin_altitude) * RAD_TO_DEG - parallax(body.distance) * cos_altitude

    return Observer(altitude=altitude, azimuth=azimuth)
