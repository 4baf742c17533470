"""Internal constants shared across the library."""

import enum

BASE_URL = "https://au-apigw.ccs.hyundai.com.au:8080"
USER_AGENT = "okhttp/3.12.0"


class Region(enum.StrEnum):
    """Bluelink API regions with a known temperature code table."""

    AU = "AU"
    EU = "EU"
    CA = "CA"
    CN = "CN"


# ------------------------------------------------------------------
# Climate temperature tables  (°C, inclusive bounds, 0.5 °C steps)
# ------------------------------------------------------------------

TEMPERATURE_STEP_C = 0.5

TEMPERATURE_RANGES_C: dict[Region, tuple[float, float]] = {
    Region.AU: (17.0, 27.0),
    Region.EU: (14.0, 30.0),
    Region.CA: (16.0, 32.0),
    Region.CN: (14.0, 30.0),
}

# Code sent with the "stop climate" command.
STOP_CLIMATE_TEMP_CODE = "10H"

# ------------------------------------------------------------------
# Charge targets
# ------------------------------------------------------------------

POSSIBLE_CHARGE_LIMIT_VALUES: tuple[int, ...] = (50, 60, 70, 80, 90, 100)

# ------------------------------------------------------------------
# Rate-limit headers (matched case-insensitively)
# ------------------------------------------------------------------

RATE_LIMIT_HEADER = "x-ratelimit-limit"
RATE_REMAINING_HEADER = "x-ratelimit-remaining"
RATE_RESET_HEADER = "x-ratelimit-reset"

# Number of latest trips the trip endpoint is asked for.
TRIP_LATEST_COUNT = 10
