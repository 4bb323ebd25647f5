import logging

import astropy.units as u
import numpy as np

logger = logging.getLogger(__name__)

# Number of decimal places used when displaying planets, stored values
# are never rounded
NUM_PLACES = 3


def strip_units(value, unit):
    """
    Convert a value to a plain float in the given unit
    Args:
        value (float or astropy Quantity):
            Plain numbers are assumed to already be in ``unit``
        unit (astropy Unit):
            Unit to normalise to, e.g. u.AU or u.M_earth
    Returns:
        float:
            The value expressed in ``unit``
    """
    if isinstance(value, u.Quantity):
        return float(value.to(unit).value)
    return float(value)


def clamp_non_negative(value, unit, label="value"):
    """
    Normalise a value to ``unit`` and set it to zero if it is not positive.
    NaN is not positive so it is also set to zero.
    Args:
        value (float or astropy Quantity):
            Input value
        unit (astropy Unit):
            Unit to normalise to
        label (str):
            Name of the quantity, used when logging
    Returns:
        float:
            Non-negative value in ``unit``
    """
    val = strip_units(value, unit)
    if val > 0:
        return val
    if val != 0:
        logger.debug("Clamping %s of %s to 0", label, val)
    return 0.0


def round_places(val, places=NUM_PLACES):
    """
    Round half-up to a fixed number of decimal places, inf and nan pass through
    """
    factor = 10.0**places
    return float(np.floor(val * factor + 0.5) / factor)


def format_value(val, places=NUM_PLACES):
    """
    Rounded string form of a value for display
    """
    return str(round_places(val, places))
