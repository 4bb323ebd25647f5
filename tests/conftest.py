import pytest

from orrery import SolarSystem


@pytest.fixture
def sol():
    """Solar-luminosity system with Mercury (basic) and Earth (enhanced)."""
    system = SolarSystem("Sol", 1.0)
    system.add_planet("Mercury", 0.39)
    system.add_enhanced_planet("Earth", 1.0, 1.0, 1.0)
    return system
