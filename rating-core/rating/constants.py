"""Storage names, default values and thresholds for rating requests."""

# Partition holding every rating key.
PREFS = "dynamic_rating"

MILLIS_PER_DAY = 24 * 60 * 60 * 1000


class Key:
    BASE = "adr_key_"
    FIRST_LAUNCH = "first_launch"
    LAST_LAUNCH = "last_launch"
    LAST_REMINDER = "last_reminder"
    LAUNCH_COUNT = "launch_count"
    IS_REQUEST = "is_request"

    ALL = (FIRST_LAUNCH, LAST_LAUNCH, LAST_REMINDER, LAUNCH_COUNT, IS_REQUEST)


class Value:
    UNKNOWN = -1.0
    POSITIVE = 4.0
    FIRST_LAUNCH = 0
    LAST_LAUNCH = 0
    LAUNCH_COUNT = 0
    IS_REQUEST = True


class Default:
    RATE_INTERVAL = 2
    RATE_COUNT = 5
    REMIND_INTERVAL = 2
