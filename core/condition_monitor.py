import logging
import threading

from analytics.prognostics.rul_estimator import RULEstimator
from core.entity_state import ConditionSnapshot, EntityRegistry
from core.smoothing import ema
from health.thermal_classifier import ThermalClassifier
from historian.telemetry_historian import TelemetryHistorian
from raw_ingest.validator import parse_batch

logger = logging.getLogger(__name__)


class ConditionMonitor:
    """
    Condition Monitor Pipeline
    ==========================
    raw sample
      → historian (every sample)
      → peak window
      → [decimation tick]
          peak → EMA → trend buffer → slope
          → RUL → median-of-3
          temperature → EMA → band
          → snapshot

    One batch is processed to completion under one lock.
    Entities never share state.
    """

    def __init__(self, config, historian: TelemetryHistorian | None = None):
        self.config = config
        self.registry = EntityRegistry(config)

        self.historian = historian or TelemetryHistorian(
            capacity=config.historian_capacity,
            amplitude_warning=config.amplitude_warning,
            amplitude_critical=config.amplitude_critical,
        )

        self.rul_estimator = RULEstimator(
            limit_value=config.amplitude_critical,
            noise_floor=config.rul_noise_floor,
            min_slope=config.rul_min_slope,
            max_horizon=config.rul_max_horizon_sec,
            stable_value=config.rul_stable_sentinel,
        )
        self.thermal = ThermalClassifier(
            alpha=config.temperature_alpha,
            warning=config.temperature_warning,
            critical=config.temperature_critical,
        )

        self.decimation_ticks = 0
        self.dropped_entries = 0
        self.samples_processed = 0
        self._lock = threading.Lock()

    # =========================================================
    # PUBLIC API
    # =========================================================
    def process_batch(self, batch) -> dict[str, ConditionSnapshot]:
        """
        batch: list of raw entries (dicts or SensorSample),
               or {"updates": [...]}
        Returns id → snapshot for every valid entry in the batch.
        """
        samples, dropped = parse_batch(batch)

        result = {}
        with self._lock:
            self.dropped_entries += dropped
            self.samples_processed += len(samples)
            for sample in samples:
                result[sample.id] = self._process_sample(sample)
        return result

    def snapshot(self, entity_id: str) -> ConditionSnapshot | None:
        with self._lock:
            state = self.registry.find(entity_id)
            return state.snapshot if state is not None else None

    def snapshots(self) -> dict[str, ConditionSnapshot]:
        with self._lock:
            return {eid: s.snapshot for eid, s in self.registry.entities.items()}

    # =========================================================
    # INTERNAL
    # =========================================================
    def _process_sample(self, sample) -> ConditionSnapshot:
        self.historian.add(sample)

        state = self.registry.get(sample.id)

        if not state.peak_window.push(sample.amplitude):
            # between ticks the last snapshot stays authoritative
            return state.snapshot

        self.decimation_ticks += 1
        cfg = self.config

        # ---- AMPLITUDE ----
        peak = state.peak_window.peak()
        amp_ema = ema(peak, state.last_amplitude_ema, cfg.amplitude_alpha)
        state.last_amplitude_ema = amp_ema

        state.trend_buffer.push(amp_ema)

        # ---- TREND / RUL ----
        slope = 0.0
        raw_rul = cfg.rul_stable_sentinel

        if state.trend_buffer.has_min_population():
            slope = state.trend_buffer.slope() / cfg.tick_period_sec
            raw_rul = self.rul_estimator.estimate(amp_ema, slope)

        rul = state.rul_history.update(raw_rul)

        # ---- THERMAL ----
        temp_ema, thermal_status = self.thermal.update(
            sample.temperature, state.last_temperature_ema
        )
        state.last_temperature_ema = temp_ema

        state.snapshot = ConditionSnapshot(
            smoothed_amplitude=amp_ema,
            degradation_slope=slope,
            estimated_rul=rul,
            smoothed_temperature=temp_ema,
            thermal_status=thermal_status,
        )

        if sample.id in cfg.debug_entities:
            logger.debug(
                f"[{sample.id}] tick | amp_ema={amp_ema:.3f} "
                f"slope={slope:.4f} raw_rul={raw_rul:.2f} rul={rul:.2f} "
                f"temp_ema={temp_ema:.1f} ({thermal_status.value})"
            )

        return state.snapshot
