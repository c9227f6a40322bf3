"""
Utility functions for climate index reporting
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

from .config import MONTH_LABELS, MONTHS_PER_YEAR
from .thornthwaite import PETBreakdown


def set_paper_style(large: bool = False) -> None:
    """Seaborn whitegrid theme for monthly PET figures; ``large`` for slides."""
    sns.set_theme(
        style="whitegrid",
        context="talk" if large else "paper",
        rc={"axes.spines.top": False, "savefig.dpi": 300, "savefig.bbox": "tight"},
    )


def synthetic_monthly_temperatures(mean=8.0, amplitude=10.0, noise=0.0, seed=None):
    """
    Generate a synthetic climate year of monthly mean temperatures.

    Sinusoidal cycle with the coldest month in January and the warmest in
    July.

    Parameters
    ----------
    mean : float, default=8.0
        Annual mean temperature (°C)
    amplitude : float, default=10.0
        Half of the January-July temperature difference (°C)
    noise : float, default=0.0
        Standard deviation of Gaussian noise added to each month (°C)
    seed : int, optional
        Random seed for reproducibility

    Returns
    -------
    np.ndarray
        12 monthly temperatures, January first

    Examples
    --------
    >>> temps = synthetic_monthly_temperatures(mean=9.0, amplitude=10.0)
    >>> print(f"Jan {temps[0]:.1f} °C, Jul {temps[6]:.1f} °C")
    """
    months = np.arange(MONTHS_PER_YEAR)
    temps = mean - amplitude * np.cos(2 * np.pi * months / MONTHS_PER_YEAR)
    if noise > 0:
        rng = np.random.default_rng(seed)
        temps = temps + rng.normal(scale=noise, size=MONTHS_PER_YEAR)
    return temps


def plot_monthly_pet(result, title='Thornthwaite PET', ax=None):
    """
    Bar chart of corrected monthly PET with the temperature curve.

    Parameters
    ----------
    result : pd.DataFrame or PETBreakdown
        Output of ``monthly_pet_frame`` or ``thornthwaite_breakdown``
    title : str
        Plot title
    ax : matplotlib Axes, optional
        Axes to draw into; a new figure is created when omitted

    Returns
    -------
    fig, ax : matplotlib objects
    """
    if isinstance(result, PETBreakdown):
        pet = np.asarray(result.monthly)
        temperature = None
    elif isinstance(result, pd.DataFrame):
        pet = result["pet"].to_numpy()
        temperature = result["temperature"].to_numpy() if "temperature" in result else None
    else:
        raise TypeError("result must be a DataFrame from monthly_pet_frame or a PETBreakdown")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    x = np.arange(MONTHS_PER_YEAR)
    ax.bar(x, pet, color='#1f77b4', alpha=0.8, label='PET (mm)')
    ax.set_xticks(x)
    ax.set_xticklabels(MONTH_LABELS)
    ax.set_ylabel('PET (mm/month)')
    ax.set_title(f"{title} ({np.sum(pet):.1f} mm/yr)")

    if temperature is not None:
        ax_t = ax.twinx()
        ax_t.plot(x, temperature, 'o-', color='#d62728', label='T (°C)')
        ax_t.axhline(0, color='k', linewidth=0.5, alpha=0.5)
        ax_t.set_ylabel('Temperature (°C)')

    ax.grid(True, axis='y', alpha=0.3)
    fig.tight_layout()

    return fig, ax
