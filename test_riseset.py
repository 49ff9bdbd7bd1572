#!/usr/bin/env python3
"""
Tests for the riseset entry module
Daily almanac for La Silla Observatory and the re-exported API
"""

import sys
import os
import logging
from datetime import datetime

# Add src directory to path to import riseset
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

import riseset
from riseset import Almanac, compute_almanac, time_from_datetime


# La Silla Observatory coordinates
LA_SILLA_LATITUDE = -29.2567  # degrees (south is negative)
LA_SILLA_LONGITUDE = -70.7377  # degrees (east is positive)

HOUR_MS = 3600000.0


def test_almanac_la_silla():
    """Sun and Moon events for a winter day at La Silla"""
    time = time_from_datetime(datetime(2020, 6, 21, 16, 0, 0))
    almanac = compute_almanac(time, LA_SILLA_LATITUDE, LA_SILLA_LONGITUDE)

    assert isinstance(almanac, Almanac)
    assert almanac.time == time
    assert almanac.dawn < almanac.sunrise < almanac.sun_transit < almanac.sunset < almanac.dusk
    assert abs(almanac.sun_transit - time) < 12 * HOUR_MS

    assert almanac.moonrise is not None
    assert almanac.moonset is not None
    assert abs(almanac.moon_transit - time) < 13 * HOUR_MS
    assert 0.0 <= almanac.ra_moon <= 24.0
    assert abs(almanac.dec_moon) < 30.0

    the_sun = riseset.sun(time)
    assert almanac.sunset == the_sun.set(LA_SILLA_LATITUDE, LA_SILLA_LONGITUDE)
    assert almanac.ra_moon == riseset.moon(time).right_ascension


def test_almanac_polar_night(caplog):
    """Missing events are None and logged"""
    time = time_from_datetime(datetime(2020, 12, 21, 12, 0, 0))

    with caplog.at_level(logging.INFO, logger='riseset'):
        almanac = compute_almanac(time, 85.0, 0.0)

    assert almanac.sunrise is None
    assert almanac.sunset is None
    assert almanac.dawn is None
    assert almanac.dusk is None
    assert "No sunrise" in caplog.text


def test_public_api():
    """The entry module re-exports the public API"""
    for name in riseset.__all__:
        assert hasattr(riseset, name), name
