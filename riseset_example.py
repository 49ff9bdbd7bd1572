"""
Example Usage of the Sun and Moon Rise/Set Calculator

This file demonstrates how to use the riseset module to:
1. Compute Sun and Moon positions from orbital elements
2. Find transit, rise and set times
3. Compute twilight times for an observing night
4. Convert to topocentric altitude and azimuth
5. Assemble a daily almanac
"""

import sys
import logging
from datetime import datetime, timezone

# Add src to path if running from project root
sys.path.insert(0, 'src')

from riseset import (
    Config, OrbitalElements, sun, moon, planet,
    twilight_times, compute_almanac,
    time_from_datetime, datetime_from_time, gmst, wrap_hours
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# La Silla Observatory
SITE_NAME = "La Silla"
LATITUDE = -29.2567  # degrees
LONGITUDE = -70.7377  # degrees, east positive


def format_time(time):
    """Format a millisecond time as UT, or a dash for a missing event"""
    if time is None:
        return "   --   "
    return datetime_from_time(time).strftime('%m-%d %H:%M')


def demonstrate_positions(time: float):
    """Show geocentric positions of the Sun and Moon"""

    print("\n" + "="*60)
    print("GEOCENTRIC POSITIONS")
    print("="*60)

    print(f"\nTime: {datetime_from_time(time).isoformat()}")
    print(f"GMST: {wrap_hours(gmst(time)):.4f} hours")

    for body in [sun(time), moon(time)]:
        print(f"\n{body.name.capitalize()}:")
        print(f"  Ecliptic: lon={body.longitude % 360.0:8.3f}°  lat={body.latitude:+7.3f}°")
        print(f"  Equatorial: RA={body.right_ascension:7.4f}h  Dec={body.declination:+8.4f}°")
        print(f"  Distance: {body.distance:.6f} AU")


def demonstrate_rise_set(time: float):
    """Show transit, rise and set times at the site"""

    print("\n" + "="*60)
    print(f"RISE, TRANSIT AND SET AT {SITE_NAME.upper()}")
    print("="*60)

    print(f"\n{'Body':<8} {'Rise':>12} {'Transit':>12} {'Set':>12}")
    print("-" * 48)
    for body in [sun(time), moon(time)]:
        rise = body.rise(LATITUDE, LONGITUDE)
        noon = body.transit(LATITUDE, LONGITUDE)
        sset = body.set(LATITUDE, LONGITUDE)
        print(f"{body.name:<8} {format_time(rise):>12} {format_time(noon):>12} {format_time(sset):>12}")

    # A distant body on a fixed orbit
    elements = OrbitalElements(a=30.07, e=0.009, i=0.031, mean_longitude=5.3, perihelion=0.8, node=2.3)
    p = planet(time, elements, name="outer")
    print(f"{p.name:<8} {format_time(p.rise(LATITUDE, LONGITUDE)):>12} "
          f"{format_time(p.transit(LATITUDE, LONGITUDE)):>12} "
          f"{format_time(p.set(LATITUDE, LONGITUDE)):>12}")


def demonstrate_twilight(time: float):
    """Show the twilight sequence around the given time"""

    print("\n" + "="*60)
    print("TWILIGHT TIMES (UT)")
    print("="*60)

    times = twilight_times(sun(time), LATITUDE, LONGITUDE)
    for name, event in sorted(times.items(), key=lambda item: item[1]):
        print(f"  {name:<20} {format_time(event)}")


def demonstrate_altitude_azimuth(time: float):
    """Track the Moon's topocentric altitude and azimuth over a night"""

    print("\n" + "="*60)
    print("MOON ALTITUDE AND AZIMUTH")
    print("="*60)

    the_moon = moon(time)
    print(f"\n{'UT':>12} {'Alt':>8} {'Az':>8}")
    for hour in range(0, 13, 2):
        later = the_moon.at(time + hour * 3600000.0)
        observed = later.observer(LATITUDE, LONGITUDE)
        print(f"{format_time(later.time):>12} {observed.altitude:+8.2f} {observed.azimuth:8.2f}")


def demonstrate_almanac(time: float):
    """Compute the daily almanac at the site and at a polar site"""

    print("\n" + "="*60)
    print("DAILY ALMANAC")
    print("="*60)

    for name, lat, lon in [(SITE_NAME, LATITUDE, LONGITUDE), ("Polar", 85.0, 0.0)]:
        almanac = compute_almanac(time, lat, lon)
        print(f"\n{name} (lat {lat:+.2f}°, lon {lon:+.2f}°):")
        print(f"  Dawn (civil): {format_time(almanac.dawn)}")
        print(f"  Sunrise:      {format_time(almanac.sunrise)}")
        print(f"  Sun transit:  {format_time(almanac.sun_transit)}")
        print(f"  Sunset:       {format_time(almanac.sunset)}")
        print(f"  Dusk (civil): {format_time(almanac.dusk)}")
        print(f"  Moonrise:     {format_time(almanac.moonrise)}")
        print(f"  Moon transit: {format_time(almanac.moon_transit)}")
        print(f"  Moonset:      {format_time(almanac.moonset)}")
        print(f"  Moon: RA={almanac.ra_moon:.3f}h, Dec={almanac.dec_moon:+.2f}°")


def main():
    """Main demonstration function"""

    print("\n" + "="*80)
    print(" " * 20 + "SUN AND MOON RISE/SET CALCULATOR")
    print("="*80)

    obs_date = datetime(2020, 12, 21, 12, 0, 0, tzinfo=timezone.utc)
    time = time_from_datetime(obs_date)
    logger.info(f"Reference time {obs_date.isoformat()} ({time:.0f} ms)")
    logger.info(f"Rise/set tolerance {Config.RISESET_TOLERANCE_MS / 1000:.0f} s")

    demonstrate_positions(time)
    demonstrate_rise_set(time)
    demonstrate_twilight(time)
    demonstrate_altitude_azimuth(time)
    demonstrate_almanac(time)

    print("\n" + "="*80)
    print(" " * 25 + "DEMONSTRATION COMPLETE")
    print("="*80)


if __name__ == "__main__":
    main()
