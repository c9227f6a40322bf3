"""
De Martonne aridity index
De Martonne 干燥度指数

    I_DM = P / (T + 10)

P is the mean annual precipitation [mm] and T the mean annual air
temperature [°C] of the analysed area.
"""

import numpy as np

from .config import DE_MARTONNE_TEMP_OFFSET

# (lower bound, class); upper bound is the next entry's lower bound
DE_MARTONNE_CLASSES = (
    (-np.inf, "arid"),
    (10.0, "semi-arid"),
    (20.0, "mediterranean"),
    (24.0, "semi-humid"),
    (28.0, "humid"),
    (35.0, "very humid"),
    (55.0, "extremely humid"),
)


def de_martonne_index(annual_rain_mm, mean_temp_c):
    """
    Compute the De Martonne aridity index.

    Parameters
    ----------
    annual_rain_mm : float or array-like
        Mean annual precipitation (mm)
    mean_temp_c : float or array-like
        Mean annual air temperature (°C)

    Returns
    -------
    float or np.ndarray
        Index value; NaN where T + 10 == 0
    """
    rain = np.asarray(annual_rain_mm, dtype=float)
    denom = np.asarray(mean_temp_c, dtype=float) + DE_MARTONNE_TEMP_OFFSET

    with np.errstate(divide="ignore", invalid="ignore"):
        index = np.where(denom != 0, rain / np.where(denom != 0, denom, 1.0), np.nan)

    if index.ndim == 0:
        return float(index)
    return index


def classify_de_martonne(index) -> str:
    """Climate class of a single De Martonne index value."""
    value = float(index)
    if np.isnan(value):
        return "undefined"
    label = DE_MARTONNE_CLASSES[0][1]
    for lower, name in DE_MARTONNE_CLASSES:
        if value >= lower:
            label = name
    return label
