"""
Thornthwaite potential evapotranspiration (PET)
Thornthwaite 潜在蒸散发估算

Annual PET [mm] from 12 monthly mean air temperatures [°C]:

    I   = Σ (T_i / 5) ** 1.514                  (T_i > 0 only)
    a   = c3·I³ + c2·I² + c1·I + c0
    PET_i = 16 · (10·T_i / I) ** a · K_i        (0 when T_i <= 0)
    K_i = (days_i / 30) · (daylight_i / 12)

The cubic for ``a`` is taken from a named coefficient set and the monthly
correction K from a named correction table; both are injectable.

References
----------
Thornthwaite, C. W. (1948). An approach toward a rational classification
of climate. Geographical Review, 38(1), 55-94.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from .config import (
    CENTRAL_EUROPE_DAYLIGHT_HOURS,
    DAYS_IN_MONTH,
    HEAT_INDEX_DIVISOR,
    HEAT_INDEX_EXPONENT,
    MONTH_LABELS,
    MONTHS_PER_YEAR,
    STANDARD_DAY_HOURS,
    STANDARD_MONTH_DAYS,
    STANDARD_MONTH_PET_MM,
    TEMPERATURE_SCALE,
)


class InvalidInputError(ValueError):
    """月平均气温序列无效 / Monthly temperature sequence is not usable."""


# ============================================================================
# 指数 a 的系数 / Coefficients of the exponent a
# ============================================================================

@dataclass(frozen=True)
class ExponentCoefficients:
    """Coefficients of ``a = c3·I³ + c2·I² + c1·I + c0``."""

    name: str
    c3: float
    c2: float
    c1: float
    c0: float

    def evaluate(self, heat_index: float) -> float:
        I = float(heat_index)
        return self.c3 * I ** 3 + self.c2 * I ** 2 + self.c1 * I + self.c0


# Published Thornthwaite (1948) polynomial, negative quadratic term
STANDARD_COEFFICIENTS = ExponentCoefficients(
    name="thornthwaite-1948",
    c3=6.75e-7,
    c2=-7.71e-5,
    c1=1.792e-2,
    c0=0.49239,
)

# Positive quadratic term, as used by the first dashboard release
LEGACY_DASHBOARD_COEFFICIENTS = ExponentCoefficients(
    name="legacy-dashboard",
    c3=6.75e-7,
    c2=7.71e-5,
    c1=1.792e-2,
    c0=0.49239,
)


# ============================================================================
# 月修正表 / Monthly correction tables
# ============================================================================

@dataclass(frozen=True)
class CorrectionTable:
    """
    Day-length correction table for one reference region.

    Parameters
    ----------
    name : str
        Region label
    days_in_month : sequence of 12 int
        Calendar days per month, January first
    daylight_hours : sequence of 12 float
        Mean daily daylight hours per month [h]
    """

    name: str
    days_in_month: Tuple[float, ...] = field(default=DAYS_IN_MONTH)
    daylight_hours: Tuple[float, ...] = field(default=CENTRAL_EUROPE_DAYLIGHT_HOURS)

    def __post_init__(self):
        days = tuple(float(d) for d in self.days_in_month)
        hours = tuple(float(h) for h in self.daylight_hours)
        if len(days) != MONTHS_PER_YEAR or len(hours) != MONTHS_PER_YEAR:
            raise ValueError(
                f"修正表必须包含 12 个月的数据 (days={len(days)}, hours={len(hours)})\n"
                f"Correction table needs 12 monthly entries "
                f"(days={len(days)}, hours={len(hours)})"
            )
        if any(d <= 0 for d in days) or any(h < 0 for h in hours):
            raise ValueError(
                "天数必须为正、日照时数不能为负\n"
                "Days must be positive and daylight hours non-negative"
            )
        object.__setattr__(self, "days_in_month", days)
        object.__setattr__(self, "daylight_hours", hours)

    def correction_factors(self) -> np.ndarray:
        """K_i = (days_i / 30) · (daylight_i / 12), January first."""
        days = np.asarray(self.days_in_month, dtype=float)
        hours = np.asarray(self.daylight_hours, dtype=float)
        return (days / STANDARD_MONTH_DAYS) * (hours / STANDARD_DAY_HOURS)


CENTRAL_EUROPE_TABLE = CorrectionTable(name="central-europe")


@dataclass(frozen=True, eq=False)
class PETBreakdown:
    """Intermediate values of one Thornthwaite evaluation."""

    heat_index: float
    exponent: float
    unadjusted: np.ndarray
    correction: np.ndarray
    monthly: np.ndarray

    @property
    def annual(self) -> float:
        return float(np.sum(self.monthly))


# ============================================================================
# 计算步骤 / Formula steps
# ============================================================================

def validate_monthly_temperatures(monthly_temperatures) -> np.ndarray:
    """
    Convert monthly temperatures to a float array of length 12.

    Raises
    ------
    InvalidInputError
        Input is not a flat sequence of 12 finite numbers.
    """
    if monthly_temperatures is None:
        raise InvalidInputError(
            "缺少月平均气温数据\n"
            "Monthly temperatures are missing"
        )
    try:
        temps = np.asarray(monthly_temperatures, dtype=float)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(
            f"月平均气温无法转换为数值数组 (Cannot convert monthly temperatures "
            f"to a numeric array): {e}"
        ) from e

    if temps.ndim != 1 or temps.size != MONTHS_PER_YEAR:
        raise InvalidInputError(
            f"需要 12 个月平均气温，实际为 {temps.size} 个\n"
            f"Expected 12 monthly mean temperatures, got {temps.size} "
            f"(shape {temps.shape})"
        )
    if not np.all(np.isfinite(temps)):
        raise InvalidInputError(
            "月平均气温包含 NaN 或无穷值\n"
            "Monthly temperatures contain NaN or infinite values"
        )
    return temps


def _heat_index(temps: np.ndarray) -> float:
    positive = np.clip(temps, 0.0, None)
    terms = np.where(
        temps > 0,
        (positive / HEAT_INDEX_DIVISOR) ** HEAT_INDEX_EXPONENT,
        0.0,
    )
    return float(np.sum(terms))


def heat_index(monthly_temperatures: Sequence[float]) -> float:
    """Annual heat index I; months at or below 0 °C contribute nothing."""
    return _heat_index(validate_monthly_temperatures(monthly_temperatures))


def exponent_a(heat_index: float,
               coefficients: ExponentCoefficients = STANDARD_COEFFICIENTS) -> float:
    """Empirical exponent ``a`` of the Thornthwaite formula."""
    return coefficients.evaluate(heat_index)


def _unadjusted_monthly_pet(temps: np.ndarray, I: float, exponent: float) -> np.ndarray:
    if I <= 0:
        return np.zeros(MONTHS_PER_YEAR)
    positive = np.clip(temps, 0.0, None)
    return np.where(
        temps > 0,
        STANDARD_MONTH_PET_MM * (TEMPERATURE_SCALE * positive / I) ** exponent,
        0.0,
    )


def unadjusted_monthly_pet(monthly_temperatures: Sequence[float],
                           heat_index: float,
                           exponent: float) -> np.ndarray:
    """
    PET of an idealised 30-day month with 12 h of daylight [mm].

    Zero for months at or below 0 °C, and for every month when the heat
    index is zero.
    """
    temps = validate_monthly_temperatures(monthly_temperatures)
    return _unadjusted_monthly_pet(temps, heat_index, exponent)


def _breakdown(temps: np.ndarray,
               correction_table: CorrectionTable,
               coefficients: ExponentCoefficients) -> PETBreakdown:
    correction = correction_table.correction_factors()

    I = _heat_index(temps)
    a = exponent_a(I, coefficients)
    if I == 0:
        zeros = np.zeros(MONTHS_PER_YEAR)
        return PETBreakdown(I, a, zeros, correction, zeros.copy())

    unadjusted = _unadjusted_monthly_pet(temps, I, a)
    return PETBreakdown(I, a, unadjusted, correction, unadjusted * correction)


def thornthwaite_breakdown(monthly_temperatures: Sequence[float],
                           correction_table: CorrectionTable = CENTRAL_EUROPE_TABLE,
                           coefficients: ExponentCoefficients = STANDARD_COEFFICIENTS,
                           ) -> PETBreakdown:
    """
    Evaluate the Thornthwaite formula and keep every intermediate value.

    Parameters
    ----------
    monthly_temperatures : sequence of 12 float
        Monthly mean air temperature [°C], January to December
    correction_table : CorrectionTable
        Month length and daylight table of the reference region
    coefficients : ExponentCoefficients
        Coefficient set of the cubic for ``a``

    Returns
    -------
    PETBreakdown
    """
    return _breakdown(
        validate_monthly_temperatures(monthly_temperatures), correction_table, coefficients
    )


def compute_pet(monthly_temperatures: Sequence[float],
                correction_table: CorrectionTable = CENTRAL_EUROPE_TABLE,
                coefficients: ExponentCoefficients = STANDARD_COEFFICIENTS) -> float:
    """
    Annual Thornthwaite potential evapotranspiration.

    Parameters
    ----------
    monthly_temperatures : sequence of 12 float
        Monthly mean air temperature [°C], January to December
    correction_table : CorrectionTable, default CENTRAL_EUROPE_TABLE
    coefficients : ExponentCoefficients, default STANDARD_COEFFICIENTS

    Returns
    -------
    float
        Annual PET [mm]

    Raises
    ------
    InvalidInputError
        If the input is not 12 finite monthly values.

    Examples
    --------
    >>> compute_pet([0.0] * 12)
    0.0
    >>> round(compute_pet([-2, 0, 4, 9, 14, 18, 20, 19, 15, 10, 4, 0]), 1)
    608.5
    """
    return thornthwaite_breakdown(
        monthly_temperatures, correction_table, coefficients
    ).annual


def monthly_pet_frame(monthly_temperatures: Sequence[float],
                      correction_table: CorrectionTable = CENTRAL_EUROPE_TABLE,
                      coefficients: ExponentCoefficients = STANDARD_COEFFICIENTS,
                      ) -> pd.DataFrame:
    """Monthly table (Jan..Dec) of temperature, unadjusted PET, K and PET."""
    temps = validate_monthly_temperatures(monthly_temperatures)
    result = _breakdown(temps, correction_table, coefficients)
    return pd.DataFrame(
        {
            "temperature": temps,
            "unadjusted": result.unadjusted,
            "correction": result.correction,
            "pet": result.monthly,
        },
        index=pd.Index(MONTH_LABELS, name="month"),
    )
