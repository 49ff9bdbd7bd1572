"""
Astronomical Helper Module for Rise/Set Calculations

This module provides the scalar building blocks used by the orbit model:
- Unit conversion constants
- Solver configuration constants
- Time scalar conversions (ms since Unix epoch, datetime, JD)
- Obliquity of the ecliptic, Greenwich mean sidereal time, parallax

Time is always a float count of milliseconds since 1970-01-01 00:00 UTC.
"""

import math
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
HOURS_TO_RAD = math.pi / 12.0
RAD_TO_HOURS = 12.0 / math.pi
MS_PER_DAY = 86400000.0
JD_UNIX_EPOCH = 2440587.5  # JD for 1970-01-01 00:00 UT
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Config:
    """Configuration constants for the orbit model and event solver"""

    # Kepler's equation
    KEPLER_TOLERANCE = 1e-8  # radians
    MAX_KEPLER_ITERATIONS = 100

    # Rise/set iteration
    RISESET_TOLERANCE_MS = 60000.0  # 1 minute
    MAX_RISESET_ITERATIONS = 50

    # Hour angle to time
    MS_PER_HOUR_ANGLE = 3590170.4  # one sidereal hour
    MS_PER_RADIAN_HOUR_ANGLE = 13713440.9

    # Altitude thresholds (degrees)
    HORIZON_ALT = 0.0
    SUN_HORIZON_ALT = -0.833  # solar radius and refraction
    MOON_HORIZON_ALT = -0.583  # refraction only, parallax added per step
    CIVIL_ALT = -6.0
    NAUTICAL_ALT = -12.0
    ASTRONOMICAL_ALT = -18.0

    # Horizontal parallax at 1 AU (degrees)
    PARALLAX_AU = 2443e-6


# ============================================================================
# Time Conversion Functions
# ============================================================================

def time_from_datetime(dt: datetime) -> float:
    """
    Convert a datetime to milliseconds since the Unix epoch.

    Args:
        dt: Datetime; naive values are taken as UTC

    Returns:
        Time in milliseconds
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - UNIX_EPOCH).total_seconds() * 1000.0


def datetime_from_time(time: float) -> datetime:
    """
    Convert milliseconds since the Unix epoch to an aware UTC datetime.

    Args:
        time: Time in milliseconds

    Returns:
        Datetime in UTC
    """
    return datetime.fromtimestamp(time / 1000.0, tz=timezone.utc)


def julian_date(time: float) -> float:
    """Julian Date for a time in milliseconds since the Unix epoch."""
    return time / MS_PER_DAY + JD_UNIX_EPOCH


def wrap_hours(hours: float) -> float:
    """Wrap an angle in hours into [0, 24)."""
    return hours - math.floor(hours / 24.0) * 24.0


# ============================================================================
# Angle/Time Functions
# ============================================================================

def obliquity(time: float) -> float:
    """
    Obliquity of the ecliptic (Meeus, Astronomical Algorithms, p. 147).

    Args:
        time: Time in milliseconds

    Returns:
        Obliquity in radians
    """
    return 0.412994 - 4121e-18 * time


def gmst(time: float) -> float:
    """
    Greenwich Mean Sidereal Time, linear approximation.

    The result is not wrapped; callers reduce it with wrap_hours().

    Args:
        time: Time in milliseconds

    Returns:
        GMST in hours
    """
    return 6.699851 + 278538308153e-18 * time


def parallax(distance: float) -> float:
    """
    Horizontal parallax of a body.

    A zero distance gives inf rather than raising.

    Args:
        distance: Geocentric distance in AU

    Returns:
        Parallax in degrees
    """
    if distance == 0:
        return math.inf
    return Config.PARALLAX_AU / distance
