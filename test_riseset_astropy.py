#!/usr/bin/env python3
"""
Test script to compare the analytic rise/set model with astropy
Verifies that the Kepler-element Sun and Moon agree with astropy's
built-in ephemeris within the accuracy of the element formulae
"""

import sys
import os
from datetime import datetime

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

import pytest

import riseset_astro as astro
import riseset_astropy as astro_py
from riseset_orbit import OrbitalElements
from riseset_bodies import sun, moon, planet

# La Silla Observatory coordinates
LA_SILLA_LATITUDE = -29.2567  # degrees (south is negative)
LA_SILLA_LONGITUDE = -70.7377  # degrees (east is positive)

TEST_DATES = [
    datetime(2020, 3, 1, 0, 0, 0),
    datetime(2020, 6, 21, 15, 0, 0),
    datetime(2020, 9, 15, 8, 30, 0),
    datetime(2020, 12, 5, 22, 0, 0),
]


def hours_diff(h1, h2):
    """Difference of two angles in hours, in [-12, 12)"""
    return astro.wrap_hours(h1 - h2 + 12.0) - 12.0


def compare_values(name, val1, val2, tolerance, unit=""):
    """Compare two values and fail with both printed on mismatch"""
    diff = abs(val1 - val2)
    assert diff <= tolerance, \
        f"{name}: {val1:.4f} vs {val2:.4f} {unit} (diff: {diff:.6f})"


def test_astropy_time():
    """Test the ms to astropy Time conversion"""
    t = astro_py.astropy_time(0.0)
    assert t.isot.startswith("1970-01-01T00:00:00")

    time = astro.time_from_datetime(datetime(2020, 6, 21, 15, 0, 0))
    compare_values("Julian Date", astro_py.astropy_time(time).jd, astro.julian_date(time), 1e-8)


def test_gmst():
    """Test linear GMST against astropy"""
    for dt in TEST_DATES:
        time = astro.time_from_datetime(dt)
        model = astro.wrap_hours(astro.gmst(time))
        reference = astro_py.gmst(time)
        compare_values(f"GMST {dt}", hours_diff(model, reference), 0.0, 0.05, "hours")


def test_sun_position():
    """Test Sun RA/Dec against astropy"""
    for dt in TEST_DATES:
        time = astro.time_from_datetime(dt)
        s = sun(time)
        ra, dec = astro_py.sun_position(time)

        compare_values(f"Sun RA {dt}", hours_diff(s.right_ascension, ra), 0.0, 0.05, "hours")
        compare_values(f"Sun Dec {dt}", s.declination, dec, 0.5, "deg")


def test_moon_position():
    """Test Moon RA/Dec against astropy"""
    for dt in TEST_DATES:
        time = astro.time_from_datetime(dt)
        m = moon(time)
        ra, dec = astro_py.moon_position(time)

        compare_values(f"Moon RA {dt}", hours_diff(m.right_ascension, ra), 0.0, 0.5, "hours")
        compare_values(f"Moon Dec {dt}", m.declination, dec, 3.0, "deg")


def test_sun_altitude_azimuth():
    """Test Sun altitude/azimuth at La Silla against astropy"""
    time = astro.time_from_datetime(datetime(2020, 6, 21, 15, 0, 0))
    diffs = astro_py.compare_with_astropy(sun(time), LA_SILLA_LATITUDE, LA_SILLA_LONGITUDE)

    compare_values("Sun RA", diffs['ra'], 0.0, 0.05, "hours")
    compare_values("Sun Dec", diffs['dec'], 0.0, 0.5, "deg")
    compare_values("Sun altitude", diffs['altitude'], 0.0, 1.0, "deg")
    compare_values("Sun azimuth", diffs['azimuth'], 0.0, 1.0, "deg")


def test_moon_altitude():
    """Test topocentric Moon altitude at La Silla against astropy"""
    for dt in TEST_DATES:
        time = astro.time_from_datetime(dt)
        diffs = astro_py.compare_with_astropy(moon(time), LA_SILLA_LATITUDE, LA_SILLA_LONGITUDE)
        compare_values(f"Moon altitude {dt}", diffs['altitude'], 0.0, 4.0, "deg")


def test_compare_other_body():
    """Only the Sun and the Moon have an astropy reference"""
    elements = OrbitalElements(a=5.2, e=0.05, i=0.02, mean_longitude=1.0, perihelion=0.25, node=1.75)
    p = planet(0.0, elements, name="jupiter")
    with pytest.raises(ValueError):
        astro_py.compare_with_astropy(p, LA_SILLA_LATITUDE, LA_SILLA_LONGITUDE)
