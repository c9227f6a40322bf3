"""Climate indices for a few areas of the dashboard.

Computes the Thornthwaite PET breakdown of one area, compares the two
exponent coefficient sets, and summarises a small table of areas.
"""

from __future__ import annotations

import os
import sys

parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(parent_dir)

import pandas as pd

from klima_indices import (
    LEGACY_DASHBOARD_COEFFICIENTS,
    classify_de_martonne,
    compute_pet,
    monthly_pet_frame,
    summarize_frame,
)
from klima_indices.utils import plot_monthly_pet, set_paper_style, synthetic_monthly_temperatures


def main():
    temps = [-2, 0, 4, 9, 14, 18, 20, 19, 15, 10, 4, 0]

    frame = monthly_pet_frame(temps)
    print(frame.round(2))
    print(f"Annual PET (standard): {compute_pet(temps):.1f} mm")
    print(f"Annual PET (legacy):   "
          f"{compute_pet(temps, coefficients=LEGACY_DASHBOARD_COEFFICIENTS):.1f} mm")

    areas = []
    for name, mean, rain in [("Jihlava", 7.2, 650.0), ("Znojmo", 9.6, 480.0),
                             ("Krkonoše", 3.5, 1200.0)]:
        row = {"area_name": name, "rain": rain, "temp": mean}
        year = synthetic_monthly_temperatures(mean=mean, amplitude=9.5)
        row.update({f"m{i + 1}": t for i, t in enumerate(year)})
        areas.append(row)

    summary = summarize_frame(pd.DataFrame(areas))
    summary["class"] = summary["de_martonne"].apply(classify_de_martonne)
    print(summary.to_string(index=False))

    set_paper_style()
    fig, _ = plot_monthly_pet(frame, title="Temperate year")
    fig.savefig("thornthwaite_pet.png")
    print("Saved thornthwaite_pet.png")


if __name__ == "__main__":
    main()
