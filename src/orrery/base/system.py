import logging

import astropy.units as u
import pandas as pd

import orrery.util.misc as misc
from orrery.base.planet import EnhancedPlanet, Planet

logger = logging.getLogger(__name__)

SOLAR_STR = "Star {} has planets:"


def create_system(system_params):
    """
    Build a SolarSystem from a dictionary of parameters
    Args:
        system_params (dict):
            "name" (required), "luminosity" (optional) and "planets"
            (optional), a list of dicts with "name" and "distance" and, for
            enhanced planets, both "mass" and "radius"
    Returns:
        SolarSystem
    """
    name = system_params["name"]
    luminosity = system_params.get("luminosity")
    if luminosity is None:
        system = SolarSystem(name)
    else:
        system = SolarSystem(name, luminosity)

    for planet_params in system_params.get("planets", []):
        has_mass = "mass" in planet_params
        has_radius = "radius" in planet_params
        if has_mass != has_radius:
            raise ValueError(
                f"Planet {planet_params.get('name')} needs both mass and radius,"
                " or neither"
            )
        if has_mass:
            system.add_enhanced_planet(
                planet_params["name"],
                planet_params["mass"],
                planet_params["radius"],
                planet_params["distance"],
            )
        else:
            system.add_planet(planet_params["name"], planet_params["distance"])
    return system


class SolarSystem:
    """
    Class for a star and the planets that orbit it. The star has a name and
    a luminosity (Sun = 1.0) which can only be set when the system is
    created. Planets can be added but never removed.

    The furthest and closest planets are tracked as planets are added, but
    only for planets added with add_planet. Planets added with
    add_enhanced_planet are not considered.

    Not thread-safe: hold a single lock around add_planet and
    add_enhanced_planet calls when appending from more than one thread.

    Args:
        name (str):
            Name of the star
        luminosity (float or astropy Quantity):
            Luminosity in solar luminosities, negative values are stored as 0
    """

    def __init__(self, name, luminosity=0.0) -> None:
        self._name = name
        self._luminosity = misc.clamp_non_negative(luminosity, u.Lsun, "luminosity")
        self._planets = []
        self._furthest = None
        self._closest = None

    @property
    def name(self):
        return self._name

    @property
    def luminosity(self):
        return self._luminosity

    def add_planet(self, name, distance):
        """
        Add a basic planet with only a name and distance (AU). The planet has
        no link back to this system and updates the furthest/closest planet.
        """
        # Tracking compares the distance as given, before it is clamped
        raw_distance = misc.strip_units(distance, u.AU)
        planet = Planet(name, distance)
        self._planets.append(planet)
        logger.debug("Added %s to %s", name, self._name)

        # For the first planet both of these are true
        if self._furthest is None or raw_distance > self._furthest.distance:
            self._furthest = planet
        if self._closest is None or raw_distance < self._closest.distance:
            self._closest = planet

    def add_enhanced_planet(self, name, mass, radius, distance):
        """
        Add an enhanced planet with a mass (Earth masses), radius (Earth
        radii) and distance (AU) that links back to this system so its
        habitability can be calculated. Does not update the furthest/closest
        planet.
        """
        planet = EnhancedPlanet(name, mass, radius, distance, self)
        self._planets.append(planet)
        logger.debug("Added enhanced planet %s to %s", name, self._name)

    def furthest(self):
        return self._furthest

    def closest(self):
        return self._closest

    def get_planet(self, index):
        """
        Return the planet at ``index`` in the order planets were added, or
        None if the index is negative or past the last planet
        """
        if index < 0 or index >= len(self._planets):
            return None
        return self._planets[index]

    def get_planet_by_name(self, name):
        """
        Return the first planet added with this name, or None
        """
        for planet in self._planets:
            if planet.name == name:
                return planet
        return None

    def planet_count(self):
        return len(self._planets)

    def get_p_df(self):
        patts = [
            "name",
            "variant",
            "distance",
            "mass",
            "radius",
            "period",
            "gravity",
            "habitable",
        ]
        rows = [planet.dump_params() for planet in self._planets]
        return pd.DataFrame(rows, columns=patts)

    def __len__(self):
        return len(self._planets)

    def __iter__(self):
        return iter(self._planets)

    def __repr__(self):
        return (
            f"{self._name}\tluminosity:{self._luminosity}\n\n"
            f"Planets:\n{self.get_p_df()}"
        )

    def __str__(self):
        lines = [SOLAR_STR.format(self._name)]
        lines.extend(str(planet) for planet in self._planets)
        return "\n".join(lines) + "\n"
