"""Global configuration & default constants.

全局配置：Thornthwaite PET 与 De Martonne 指数使用的常量。
地区相关的修正表可在调用时替换（见 thornthwaite.CorrectionTable）。
"""

# Calendar
MONTHS_PER_YEAR = 12
MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Column names of the monthly mean temperature aggregate (m1 = January)
MONTH_COLUMNS = tuple(f"m{i}" for i in range(1, MONTHS_PER_YEAR + 1))
RAIN_COLUMN = "rain"
TEMP_COLUMN = "temp"

# Thornthwaite (1948) constants
HEAT_INDEX_EXPONENT = 1.514
HEAT_INDEX_DIVISOR = 5.0
STANDARD_MONTH_PET_MM = 16.0     # 30 天、每日 12 小时日照的标准月
TEMPERATURE_SCALE = 10.0
STANDARD_MONTH_DAYS = 30.0
STANDARD_DAY_HOURS = 12.0

# Non-leap year; February is always 28 days
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Approximate mean daily daylight hours, central Europe (~50°N)
CENTRAL_EUROPE_DAYLIGHT_HOURS = (
    9.0, 10.0, 11.5, 13.0, 14.5, 15.0, 14.5, 13.5, 12.0, 10.5, 9.0, 8.5,
)

# De Martonne aridity index
DE_MARTONNE_TEMP_OFFSET = 10.0

# Output precision of the analysis summary
PET_DECIMALS = 1
DE_MARTONNE_DECIMALS = 1
TEMP_DECIMALS = 1
RAIN_DECIMALS = 0
