"""
Body Models for the Sun, the Moon and Generic Planets

A body is a BodyModel (time-dependent orbital elements plus altitude
thresholds) paired with a BodyState. Variants are configured, not
subclassed: the Sun, the Moon and any planet are BodyModel values.

The Kepler element formulae for the Sun and the Moon are from J. L. Simon
et al., "Numerical expressions for precession formulae and mean elements for
the Moon and planets," 1992, with time in milliseconds since the Unix epoch.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union
import logging

from riseset_astro import Config, parallax
from riseset_orbit import OrbitalElements, BodyState, orbit_position
from riseset_solver import RISING, SETTING, transit, riseset
from riseset_observer import Observer, observe

logger = logging.getLogger(__name__)


# ============================================================================
# Body Models
# ============================================================================

@dataclass(frozen=True)
class BodyModel:
    """Orbital element formulae and altitude thresholds of a body"""
    name: str
    elements: Callable[[float], OrbitalElements]
    horizon: Callable[[BodyState], float]  # rise/set altitude in degrees
    twilight: Optional[float] = None  # dawn/dusk altitude in degrees

    def state_at(self, time: float) -> BodyState:
        """Position of the body at a time in milliseconds"""
        return orbit_position(time, self.elements(time))


def sun_elements(time: float) -> OrbitalElements:
    return OrbitalElements(
        a=1.000001,
        e=0.016721 - 13e-18 * time,
        i=0.0,
        mean_longitude=4.891045 + 199106385e-18 * time,
        perihelion=4.929185 + 9510e-18 * time,
        node=0.0,
    )


def moon_elements(time: float) -> OrbitalElements:
    return OrbitalElements(
        a=0.002563,
        e=0.055546,
        i=0.090001,
        mean_longitude=3.455090 + 2661707199e-18 * time,
        perihelion=5.282226 + 22504146e-18 * time,
        node=6.026367 - 10696962e-18 * time,
    )


# http://stjarnhimlen.se/comp/riset.html#4
def moon_horizon(state: BodyState) -> float:
    """Moon rise/set altitude, lowered by the parallax at its current distance"""
    return Config.MOON_HORIZON_ALT - parallax(state.distance)


def _fixed_altitude(altitude: float) -> Callable[[BodyState], float]:
    return lambda state: altitude


SUN = BodyModel(
    name="sun",
    elements=sun_elements,
    horizon=_fixed_altitude(Config.SUN_HORIZON_ALT),
    twilight=Config.CIVIL_ALT,
)

MOON = BodyModel(
    name="moon",
    elements=moon_elements,
    horizon=moon_horizon,
)


def planet_model(elements: Union[OrbitalElements, Callable[[float], OrbitalElements]],
                 name: str = "planet") -> BodyModel:
    """
    Build a model for a generic planet.

    Rise and set use the geometric horizon; there is no dawn or dusk.

    Args:
        elements: Constant elements, or a function of time returning them
        name: Body name

    Returns:
        BodyModel
    """
    if isinstance(elements, OrbitalElements):
        fixed = elements
        elements = lambda time: fixed
    return BodyModel(
        name=name,
        elements=elements,
        horizon=_fixed_altitude(Config.HORIZON_ALT),
    )


# ============================================================================
# Body
# ============================================================================

@dataclass(frozen=True)
class Body:
    """A body model evaluated at one instant"""
    model: BodyModel
    state: BodyState

    @classmethod
    def at_time(cls, model: BodyModel, time: float) -> "Body":
        return cls(model=model, state=model.state_at(time))

    def at(self, time: float) -> "Body":
        """Same body at another time"""
        return Body.at_time(self.model, time)

    @property
    def name(self) -> str:
        return self.model.name

    @property
    def time(self) -> float:
        return self.state.time

    @property
    def x(self) -> float:
        return self.state.x

    @property
    def y(self) -> float:
        return self.state.y

    @property
    def z(self) -> float:
        return self.state.z

    @property
    def distance(self) -> float:
        return self.state.distance

    @property
    def longitude(self) -> float:
        return self.state.longitude

    @property
    def latitude(self) -> float:
        return self.state.latitude

    @property
    def right_ascension(self) -> float:
        return self.state.right_ascension

    @property
    def declination(self) -> float:
        return self.state.declination

    def hour_angle(self, lon: float) -> float:
        return self.state.hour_angle(lon)

    def transit(self, lat: float, lon: float) -> float:
        """Meridian crossing nearest to the body's time (ms)"""
        return transit(self.state, lat, lon)

    def rise(self, lat: float, lon: float) -> Optional[float]:
        """Rise time (ms), or None if the body does not rise"""
        return riseset(self, lat, lon, self.model.horizon, RISING)

    def set(self, lat: float, lon: float) -> Optional[float]:
        """Set time (ms), or None if the body does not set"""
        return riseset(self, lat, lon, self.model.horizon, SETTING)

    def dawn(self, lat: float, lon: float) -> Optional[float]:
        """Morning twilight time (ms), or None"""
        return riseset(self, lat, lon, self._twilight(), RISING)

    def dusk(self, lat: float, lon: float) -> Optional[float]:
        """Evening twilight time (ms), or None"""
        return riseset(self, lat, lon, self._twilight(), SETTING)

    def observer(self, lat: float, lon: float) -> Observer:
        """Topocentric altitude and azimuth seen from (lat, lon)"""
        return observe(self, lat, lon)

    def _twilight(self) -> float:
        if self.model.twilight is None:
            raise ValueError(f"{self.model.name} has no twilight threshold")
        return self.model.twilight


# ============================================================================
# Factories
# ============================================================================

def sun(time: float) -> Body:
    """The Sun at a time in milliseconds since the Unix epoch"""
    return Body.at_time(SUN, time)


def moon(time: float) -> Body:
    """The Moon at a time in milliseconds since the Unix epoch"""
    return Body.at_time(MOON, time)


def planet(time: float,
           elements: Union[OrbitalElements, Callable[[float], OrbitalElements]],
           name: str = "planet") -> Body:
    """A generic planet at a time in milliseconds since the Unix epoch"""
    return Body.at_time(planet_model(elements, name), time)
