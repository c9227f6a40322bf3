"""
klima-indices: 气候指标计算工具包
Climate index toolkit for the climate dashboard

Computes the climate indices shown for an administrative unit or a
user-drawn polygon from its aggregated climate data:

1. Thornthwaite 潜在蒸散发 / Thornthwaite potential evapotranspiration
   - 12 个月平均气温 → 年 PET (mm)
   - 12 monthly mean temperatures → annual PET (mm)
   - 可替换的月修正表与指数系数 / injectable correction tables and
     exponent coefficient sets

2. De Martonne 干燥度指数 / De Martonne aridity index

3. 区域汇总 / Area summaries
   - 单个区域或整张表 / single area or a whole table (pandas)

使用示例 / Usage Example:
-------------------------
>>> from klima_indices import compute_pet, analyze_climate
>>> temps = [-2, 0, 4, 9, 14, 18, 20, 19, 15, 10, 4, 0]
>>> round(compute_pet(temps), 1)
608.5
>>> summary = analyze_climate("Brno", 520.0, 9.4, temps)
>>> summary.to_record()["de_martonne"]
26.8
"""

__version__ = "0.1.0"

from .thornthwaite import (
    InvalidInputError,
    ExponentCoefficients,
    STANDARD_COEFFICIENTS,
    LEGACY_DASHBOARD_COEFFICIENTS,
    CorrectionTable,
    CENTRAL_EUROPE_TABLE,
    PETBreakdown,
    validate_monthly_temperatures,
    heat_index,
    exponent_a,
    unadjusted_monthly_pet,
    thornthwaite_breakdown,
    compute_pet,
    monthly_pet_frame,
)
from .aridity import de_martonne_index, classify_de_martonne
from .analysis import (
    ClimateSummary,
    analyze_climate,
    monthly_temperatures_from_row,
    summarize_frame,
)

__all__ = [
    # Thornthwaite PET
    "InvalidInputError",
    "ExponentCoefficients",
    "STANDARD_COEFFICIENTS",
    "LEGACY_DASHBOARD_COEFFICIENTS",
    "CorrectionTable",
    "CENTRAL_EUROPE_TABLE",
    "PETBreakdown",
    "validate_monthly_temperatures",
    "heat_index",
    "exponent_a",
    "unadjusted_monthly_pet",
    "thornthwaite_breakdown",
    "compute_pet",
    "monthly_pet_frame",

    # De Martonne
    "de_martonne_index",
    "classify_de_martonne",

    # 区域汇总 / Area summaries
    "ClimateSummary",
    "analyze_climate",
    "monthly_temperatures_from_row",
    "summarize_frame",
]
