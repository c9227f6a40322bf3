"""
Tests for reporting helpers
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from klima_indices.thornthwaite import monthly_pet_frame, thornthwaite_breakdown
from klima_indices.utils import (
    plot_monthly_pet,
    set_paper_style,
    synthetic_monthly_temperatures,
)


def test_synthetic_year_shape_and_seasonality():
    temps = synthetic_monthly_temperatures(mean=9.0, amplitude=10.0)
    assert temps.shape == (12,)
    assert temps.argmin() == 0
    assert temps.argmax() == 6
    assert temps.mean() == pytest.approx(9.0)


def test_synthetic_year_noise_is_reproducible():
    a = synthetic_monthly_temperatures(noise=1.0, seed=3)
    b = synthetic_monthly_temperatures(noise=1.0, seed=3)
    np.testing.assert_array_equal(a, b)
    assert not np.array_equal(a, synthetic_monthly_temperatures())


def test_plot_from_frame():
    set_paper_style(large=True)
    frame = monthly_pet_frame(synthetic_monthly_temperatures())
    fig, ax = plot_monthly_pet(frame, title="Test")
    assert len(ax.patches) == 12
    assert "mm/yr" in ax.get_title()
    plt.close(fig)


def test_plot_from_breakdown_into_existing_axes():
    fig, ax = plt.subplots()
    result = thornthwaite_breakdown(synthetic_monthly_temperatures(mean=15.0))
    fig_out, ax_out = plot_monthly_pet(result, ax=ax)
    assert fig_out is fig
    assert ax_out is ax
    heights = [p.get_height() for p in ax.patches]
    np.testing.assert_allclose(heights, result.monthly)
    plt.close(fig)


def test_plot_rejects_unknown_input():
    with pytest.raises(TypeError):
        plot_monthly_pet([1.0] * 12)


def test_paper_style_sets_seaborn_theme():
    set_paper_style()
    assert not matplotlib.rcParams["axes.spines.top"]
    assert matplotlib.rcParams["savefig.dpi"] == 300
