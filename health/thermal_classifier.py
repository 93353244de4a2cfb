from enum import Enum

from core.smoothing import ema


class ThermalStatus(str, Enum):
    NOMINAL = "nominal"
    WARNING = "warning"
    CRITICAL = "critical"


def classify_temperature(value: float, warning: float, critical: float) -> ThermalStatus:
    """
    Static 2-band table, no hysteresis:
        value >= critical → critical
        value >= warning  → warning
        else              → nominal
    """
    if value >= critical:
        return ThermalStatus.CRITICAL
    if value >= warning:
        return ThermalStatus.WARNING
    return ThermalStatus.NOMINAL


class ThermalClassifier:
    def __init__(self, alpha: float, warning: float, critical: float):
        self.alpha = alpha
        self.warning = warning
        self.critical = critical

    def update(self, temperature: float, previous: float | None) -> tuple[float, ThermalStatus]:
        """
        Slow EMA then band lookup.
        Caller persists the returned smoothed value.
        """
        smoothed = ema(temperature, previous, self.alpha)
        return smoothed, classify_temperature(smoothed, self.warning, self.critical)
