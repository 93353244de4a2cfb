from dataclasses import dataclass, field


@dataclass(frozen=True)
class MonitorConfig:
    """
    Monitor Config
    ==============
    Flat view of every tunable in settings.yaml.
    Defaults match the bundled file.
    """

    sample_rate_hz: float = 50.0

    peak_window_capacity: int = 50
    decimation_factor: int = 50

    trend_capacity: int = 10
    trend_min_points: int = 5

    amplitude_alpha: float = 0.1
    temperature_alpha: float = 0.05

    rul_noise_floor: float = 4.0
    rul_min_slope: float = 0.01
    rul_max_horizon_sec: float = 120.0
    rul_stable_sentinel: float = 999.0

    amplitude_warning: float = 7.0
    amplitude_critical: float = 12.0
    temperature_warning: float = 940.0
    temperature_critical: float = 955.0

    historian_capacity: int = 3000

    debug_entities: tuple = field(default_factory=tuple)

    def __post_init__(self):
        if self.sample_rate_hz <= 0:
            raise ValueError("sample_rate_hz must be > 0")
        for name in (
            "peak_window_capacity",
            "decimation_factor",
            "trend_capacity",
            "historian_capacity",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0")
        if not 2 <= self.trend_min_points <= self.trend_capacity:
            raise ValueError("trend_min_points must be in [2, trend_capacity]")
        for name in ("amplitude_alpha", "temperature_alpha"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1]")
        if self.rul_max_horizon_sec <= 0:
            raise ValueError("rul_max_horizon_sec must be > 0")
        if self.rul_max_horizon_sec >= self.rul_stable_sentinel:
            raise ValueError("rul_max_horizon_sec must be < rul_stable_sentinel")
        if self.amplitude_warning >= self.amplitude_critical:
            raise ValueError("amplitude_warning must be < amplitude_critical")
        if self.temperature_warning >= self.temperature_critical:
            raise ValueError("temperature_warning must be < temperature_critical")

    @property
    def tick_period_sec(self) -> float:
        """Seconds between two decimation ticks."""
        return self.decimation_factor / self.sample_rate_hz

    @classmethod
    def from_dict(cls, cfg: dict) -> "MonitorConfig":
        """
        Map the nested YAML sections onto the flat config.
        Missing keys keep their defaults.
        """
        cfg = cfg or {}
        mapping = {
            ("sampling", "sample_rate_hz"): "sample_rate_hz",
            ("peak_window", "capacity"): "peak_window_capacity",
            ("peak_window", "decimation_factor"): "decimation_factor",
            ("trend", "capacity"): "trend_capacity",
            ("trend", "min_points"): "trend_min_points",
            ("smoothing", "amplitude_alpha"): "amplitude_alpha",
            ("smoothing", "temperature_alpha"): "temperature_alpha",
            ("rul", "noise_floor"): "rul_noise_floor",
            ("rul", "min_slope"): "rul_min_slope",
            ("rul", "max_horizon_sec"): "rul_max_horizon_sec",
            ("rul", "stable_sentinel"): "rul_stable_sentinel",
            ("thresholds", "amplitude_warning"): "amplitude_warning",
            ("thresholds", "amplitude_critical"): "amplitude_critical",
            ("thresholds", "temperature_warning"): "temperature_warning",
            ("thresholds", "temperature_critical"): "temperature_critical",
            ("historian", "capacity"): "historian_capacity",
        }

        kwargs = {}
        for (section, key), attr in mapping.items():
            block = cfg.get(section) or {}
            if key in block:
                kwargs[attr] = block[key]

        debug_entities = (cfg.get("logging") or {}).get("debug_entities") or ()
        kwargs["debug_entities"] = tuple(str(e) for e in debug_entities)

        return cls(**kwargs)
