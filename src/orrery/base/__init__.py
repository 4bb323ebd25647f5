__all__ = ["EnhancedPlanet", "Planet", "SolarSystem", "create_system"]

from .planet import EnhancedPlanet, Planet
from .system import SolarSystem, create_system
