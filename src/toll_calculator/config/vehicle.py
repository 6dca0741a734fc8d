"""Vehicle categories — the only vehicle attribute the calculator reads."""

from enum import Enum


class VehicleCategory(str, Enum):
    """Category tag supplied by the caller with every request."""

    CAR = "Car"
    MOTORBIKE = "Motorbike"
    TRACTOR = "Tractor"
    EMERGENCY = "Emergency"
    DIPLOMAT = "Diplomat"
    FOREIGN = "Foreign"
    MILITARY = "Military"
