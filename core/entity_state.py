from dataclasses import dataclass

from analytics.prognostics.hysteresis import MedianHysteresis
from analytics.prognostics.regression import TrendBuffer
from core.peak_window import PeakWindow
from health.thermal_classifier import ThermalStatus


@dataclass(frozen=True)
class ConditionSnapshot:
    smoothed_amplitude: float = 0.0
    degradation_slope: float = 0.0
    estimated_rul: float = 999.0
    smoothed_temperature: float = 0.0
    thermal_status: ThermalStatus = ThermalStatus.NOMINAL

    def to_dict(self) -> dict:
        return {
            "smoothed_amplitude": self.smoothed_amplitude,
            "degradation_slope": self.degradation_slope,
            "estimated_rul": self.estimated_rul,
            "smoothed_temperature": self.smoothed_temperature,
            "thermal_status": self.thermal_status.value,
        }


class EntityState:
    """
    Per-entity analytics state.
    All rings are allocated here, once, at creation.
    """

    def __init__(self, entity_id: str, config):
        self.id = entity_id

        self.peak_window = PeakWindow(
            capacity=config.peak_window_capacity,
            decimation_factor=config.decimation_factor,
        )
        self.trend_buffer = TrendBuffer(
            capacity=config.trend_capacity,
            min_points=config.trend_min_points,
        )
        self.rul_history = MedianHysteresis(stable_value=config.rul_stable_sentinel)

        self.last_amplitude_ema = None
        self.last_temperature_ema = None

        self.snapshot = ConditionSnapshot(estimated_rul=config.rul_stable_sentinel)

    @property
    def samples_since_decimation(self) -> int:
        return self.peak_window.samples_since_decimation


class EntityRegistry:
    """
    id → EntityState, created lazily on first observation.
    No eviction: lifetime is the process lifetime.
    """

    def __init__(self, config):
        self.config = config
        self.entities = {}

    def get(self, entity_id: str) -> EntityState:
        state = self.entities.get(entity_id)
        if state is None:
            state = EntityState(entity_id, self.config)
            self.entities[entity_id] = state
        return state

    def find(self, entity_id: str) -> EntityState | None:
        return self.entities.get(entity_id)

    def __contains__(self, entity_id):
        return entity_id in self.entities
