"""Constants for the smaweb library."""

# API endpoints
ENDPOINT_LOGIN = "/dyn/login.json"
ENDPOINT_LOGOUT = "/dyn/logout.json"
ENDPOINT_VALUES = "/dyn/getValues.json"
ENDPOINT_LOGGER = "/dyn/getLogger.json"

DEFAULT_USERNAME = "usr"
DEFAULT_PASSWORD = "0000"

# Value keys queried with getValues
VALUE_MAXIMUM_POWER = "6100_00411E00"
VALUE_CURRENT_POWER = "6100_40263F00"
VALUE_TOTAL_YIELD = "6400_00260100"
VALUE_TODAY_YIELD = "6400_00262200"
VALUE_UPTIME = "6400_00462E00"

VALUE_KEYS = (
    VALUE_MAXIMUM_POWER,
    VALUE_CURRENT_POWER,
    VALUE_TOTAL_YIELD,
    VALUE_TODAY_YIELD,
    VALUE_UPTIME,
)

# Logger keys queried with getLogger
YIELD_KEY_TODAY = 28672
YIELD_KEY_BEFORE = 28704

# Default getLogger window in seconds
LOGGER_WINDOW = 86400

# Reported value in channel "1" of a getValues device entry
VALUE_CHANNEL = "1"

UNIT_POWER = "W"
UNIT_ENERGY = "Wh"
UNIT_DURATION = "s"

VALUE_UNITS = {
    VALUE_MAXIMUM_POWER: UNIT_POWER,
    VALUE_CURRENT_POWER: UNIT_POWER,
    VALUE_TOTAL_YIELD: UNIT_ENERGY,
    VALUE_TODAY_YIELD: UNIT_ENERGY,
    VALUE_UPTIME: UNIT_DURATION,
}

# Metric names used by MetricExtractor.extract
METRIC_NAMES = {
    VALUE_MAXIMUM_POWER: "maximum_power",
    VALUE_CURRENT_POWER: "current_power",
    VALUE_TOTAL_YIELD: "total_yield",
    VALUE_TODAY_YIELD: "today_yield",
    VALUE_UPTIME: "uptime",
}
