"""Stars, the planets that orbit them and a few derived quantities.

>>> from orrery import SolarSystem
>>> sol = SolarSystem("Sol", 1.0)
>>> sol.add_enhanced_planet("Earth", 1.0, 1.0, 1.0)
>>> sol.get_planet_by_name("Earth").could_be_habitable()
True
"""

from orrery.base import EnhancedPlanet, Planet, SolarSystem, create_system

__all__ = ["EnhancedPlanet", "Planet", "SolarSystem", "create_system"]

__version__ = "0.1.0"
