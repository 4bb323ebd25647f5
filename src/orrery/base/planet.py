import weakref

import astropy.units as u
import numpy as np
import pandas as pd

import orrery.util.misc as misc


# Habitable distance band for a star of solar luminosity, in AU. The actual
# band is scaled by the square root of the parent system's luminosity
MIN_DIST_FACTOR = 0.75
MAX_DIST_FACTOR = 2.0

# Habitable mass band in Earth masses. The lower bound lets a planet retain an
# atmosphere, the upper bound keeps it from being so dense that the surface
# is too hot
MIN_MASS = 0.6
MAX_MASS = 7.0

PLANET_FORMAT = "{}  is {}AU from its star, and orbits in {} years"
PLANET_FORMAT_EXT = (
    "{} has a mass of {} Earths with a surface gravity of {}"
    "g, is {}AU from its star, and orbits in {} years: "
    "could be habitable? {}"
)
POS = "yes"
NEG = "no"


class Planet:
    """
    Class for a basic planet, which only has a name and a distance from its
    star in AU (Earth = 1.0). Mass and radius are zero and there is no link
    to a parent system. A basic planet can never become an enhanced one, see
    EnhancedPlanet for that.

    Planets are immutable, the attributes are exposed as read-only
    properties and values are kept at full precision. Rounding is only
    applied when a planet is turned into a string.
    """

    def __init__(self, name, distance) -> None:
        self._name = name
        self._distance = misc.clamp_non_negative(distance, u.AU, "distance")
        self._mass = 0.0
        self._radius = 0.0
        self._parent_ref = None

    @property
    def name(self):
        return self._name

    @property
    def distance(self):
        """Distance from the star in AU"""
        return self._distance

    @property
    def mass(self):
        """Mass in Earth masses"""
        return self._mass

    @property
    def radius(self):
        """Radius in Earth radii"""
        return self._radius

    @property
    def has_parent(self):
        """Whether the planet was created with a link to a parent system"""
        return self._parent_ref is not None

    @property
    def parent_system(self):
        """
        The SolarSystem the planet orbits, or None. The link is a weak
        reference so it is also None once the system has been garbage
        collected.
        """
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def orbital_period(self):
        """
        Orbital period in years, sqrt(distance^3)
        """
        return float(np.sqrt(self._distance * self._distance * self._distance))

    def surface_gravity(self):
        """
        Surface gravity in g (Earth = 1.0), mass/radius^2.

        Zero radius planets (including every basic planet) follow floating
        point semantics: inf for a positive mass and nan for a zero mass.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self._mass) / (self._radius * self._radius))

    def could_be_habitable(self):
        """
        Whether the planet sits inside both the mass band and the distance
        band of its parent system. The distance band is scaled by the square
        root of the parent's luminosity. Always False without a parent.
        """
        parent = self.parent_system
        if parent is None:
            return False
        lum_factor = np.sqrt(parent.luminosity)
        distance_ok = (
            MIN_DIST_FACTOR * lum_factor
            <= self._distance
            <= MAX_DIST_FACTOR * lum_factor
        )
        mass_ok = MIN_MASS <= self._mass <= MAX_MASS
        return bool(mass_ok and distance_ok)

    def dump_params(self):
        params = {
            "name": self._name,
            "variant": type(self).__name__,
            "distance": self._distance,
            "mass": self._mass,
            "radius": self._radius,
            "period": self.orbital_period(),
            "gravity": self.surface_gravity(),
            "habitable": self.could_be_habitable(),
        }
        return params

    def __repr__(self):
        """
        Make dataframe with planet attributes
        """
        p_df = pd.DataFrame(self.dump_params(), index=[0])
        return f"{type(self).__name__} object\n{p_df}"

    def __str__(self):
        period = misc.format_value(self.orbital_period())
        distance = misc.format_value(self._distance)
        if not self.has_parent:
            return PLANET_FORMAT.format(self._name, distance, period)

        habitable = POS if self.could_be_habitable() else NEG
        return PLANET_FORMAT_EXT.format(
            self._name,
            misc.format_value(self._mass),
            misc.format_value(self.surface_gravity()),
            distance,
            period,
            habitable,
        )

    def __eq__(self, other):
        if self is other:
            return True
        # Basic and enhanced planets are never equal to each other
        if type(other) is not type(self):
            return NotImplemented
        return (
            other._name == self._name
            and other._distance == self._distance
            and other._mass == self._mass
            and other._radius == self._radius
        )

    def __hash__(self):
        return hash((self._name, self._distance, self._mass, self._radius))


class EnhancedPlanet(Planet):
    """
    Class for a planet that also has a mass and radius (Earth = 1.0) and,
    optionally, a link to its parent SolarSystem.

    Args:
        name (str):
            Planet name, does not need to be unique
        mass (float or astropy Quantity):
            Mass in Earth masses, negative values are stored as 0
        radius (float or astropy Quantity):
            Radius in Earth radii, negative values are stored as 0
        distance (float or astropy Quantity):
            Distance from the star in AU, negative values are stored as 0
        parent_system (SolarSystem):
            System the planet orbits, only needed for habitability. The
            planet does not keep the system alive.
            A system with no other references is collected straight away,
            after which could_be_habitable() is always False.
    """

    def __init__(self, name, mass, radius, distance, parent_system=None) -> None:
        self._name = name
        self._mass = misc.clamp_non_negative(mass, u.M_earth, "mass")
        self._radius = misc.clamp_non_negative(radius, u.R_earth, "radius")
        self._distance = misc.clamp_non_negative(distance, u.AU, "distance")
        if parent_system is None:
            self._parent_ref = None
        else:
            self._parent_ref = weakref.ref(parent_system)
