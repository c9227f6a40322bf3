"""
Climate summary of an analysed area
区域气候指标汇总

Combines the De Martonne index and the Thornthwaite PET for one area
(administrative unit or user-drawn polygon) from its aggregated climate
values: mean annual rain, mean annual temperature and the 12 monthly mean
temperatures ``m1..m12``.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from .aridity import de_martonne_index
from .config import (
    DE_MARTONNE_DECIMALS,
    MONTH_COLUMNS,
    PET_DECIMALS,
    RAIN_COLUMN,
    RAIN_DECIMALS,
    TEMP_COLUMN,
    TEMP_DECIMALS,
)
from .thornthwaite import (
    CENTRAL_EUROPE_TABLE,
    STANDARD_COEFFICIENTS,
    CorrectionTable,
    ExponentCoefficients,
    InvalidInputError,
    compute_pet,
)


@dataclass
class ClimateSummary:
    """Climate indices of one area; ``pet`` is None when unavailable."""

    area_name: str
    de_martonne: float
    pet: Optional[float]
    rain_mm: float
    temp_c: float

    @property
    def pet_available(self) -> bool:
        return self.pet is not None

    def to_record(self) -> Dict[str, object]:
        """Rounded values for presentation."""
        return {
            "area_name": self.area_name,
            "de_martonne": _rounded(self.de_martonne, DE_MARTONNE_DECIMALS),
            "pet": _rounded(self.pet, PET_DECIMALS),
            "rain_mm": _rounded(self.rain_mm, RAIN_DECIMALS),
            "temp_c": _rounded(self.temp_c, TEMP_DECIMALS),
        }


def _rounded(value, decimals: int) -> Optional[float]:
    if value is None or np.isnan(value):
        return None
    return round(float(value), decimals)


def _as_float(value) -> float:
    if value is None or pd.isna(value):
        return np.nan
    return float(value)


def monthly_temperatures_from_row(row: Mapping,
                                  columns: Sequence[str] = MONTH_COLUMNS) -> List[float]:
    """
    Monthly mean temperatures of an aggregate row in calendar order.

    Parameters
    ----------
    row : mapping or pd.Series
        Aggregate row with one column per month
    columns : sequence of str
        Column names January..December (default ``m1..m12``)

    Raises
    ------
    InvalidInputError
        A month column is missing, empty or not numeric.
    """
    missing = [c for c in columns if c not in row]
    if missing:
        raise InvalidInputError(
            f"缺少月气温列 / Missing monthly temperature columns: {missing}"
        )
    values = [row[c] for c in columns]
    empty = [c for c, v in zip(columns, values) if v is None or pd.isna(v)]
    if empty:
        raise InvalidInputError(
            f"月气温列为空 / Empty monthly temperature columns: {empty}"
        )
    try:
        return [float(v) for v in values]
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"月气温列无法转换为数值 (Monthly temperature columns are not numeric): {e}"
        ) from e


def analyze_climate(area_name: str,
                    rain_mm: float,
                    temp_c: float,
                    monthly_temperatures: Optional[Sequence[float]],
                    correction_table: CorrectionTable = CENTRAL_EUROPE_TABLE,
                    coefficients: ExponentCoefficients = STANDARD_COEFFICIENTS,
                    ) -> ClimateSummary:
    """
    Compute De Martonne index and Thornthwaite PET for one area.

    Invalid monthly temperatures make the PET unavailable (``None``) and
    emit a ``RuntimeWarning``; the De Martonne index is still reported.

    Parameters
    ----------
    area_name : str
        Display name of the area
    rain_mm : float
        Mean annual precipitation (mm)
    temp_c : float
        Mean annual temperature (°C)
    monthly_temperatures : sequence of 12 float or None
        Monthly mean temperatures, January first

    Returns
    -------
    ClimateSummary
    """
    # Areas without intersecting climate cells aggregate to null
    rain_mm = _as_float(rain_mm)
    temp_c = _as_float(temp_c)
    dm = de_martonne_index(rain_mm, temp_c)

    try:
        pet = compute_pet(monthly_temperatures, correction_table, coefficients)
    except InvalidInputError as e:
        warnings.warn(
            f"PET unavailable for {area_name!r}: {e}",
            RuntimeWarning,
            stacklevel=2,
        )
        pet = None

    return ClimateSummary(
        area_name=area_name,
        de_martonne=dm,
        pet=pet,
        rain_mm=rain_mm,
        temp_c=temp_c,
    )


def summarize_frame(frame: pd.DataFrame,
                    area_column: str = "area_name",
                    correction_table: CorrectionTable = CENTRAL_EUROPE_TABLE,
                    coefficients: ExponentCoefficients = STANDARD_COEFFICIENTS,
                    ) -> pd.DataFrame:
    """
    Summarise many areas at once.

    ``frame`` needs the columns ``rain``, ``temp`` and ``m1..m12``; the area
    name is taken from ``area_column`` when present, otherwise from the index.
    Returns one rounded record per input row, in input order.
    """
    missing = [c for c in (RAIN_COLUMN, TEMP_COLUMN) if c not in frame.columns]
    if missing:
        raise KeyError(f"Missing climate columns: {missing}")

    records = []
    for idx, row in frame.iterrows():
        name = str(row[area_column]) if area_column in frame.columns else str(idx)
        try:
            temps = monthly_temperatures_from_row(row)
        except InvalidInputError:
            # analyze_climate reports the missing PET
            temps = None
        summary = analyze_climate(
            name, row[RAIN_COLUMN], row[TEMP_COLUMN], temps,
            correction_table, coefficients,
        )
        records.append(summary.to_record())

    return pd.DataFrame.from_records(
        records, columns=["area_name", "de_martonne", "pet", "rain_mm", "temp_c"]
    )
