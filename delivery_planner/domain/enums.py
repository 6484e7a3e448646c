"""Domain enumerations: delivery-order and time-unit labels."""

import enum


class DeliveryOrder(str, enum.Enum):
    C1_FIRST = "C1 first, then C2"
    C2_FIRST = "C2 first, then C1"


class TimeUnit(str, enum.Enum):
    # Travel hours and preparation minutes summed as-is are reported as
    # "hours"; this is the historical output label.
    HOURS = "hours"
    MINUTES = "minutes"
