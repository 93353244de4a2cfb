import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

REQUIRED = ["id", "timestamp", "amplitude", "temperature"]


@dataclass(frozen=True)
class SensorSample:
    id: str
    timestamp: float
    amplitude: float
    temperature: float
    speed: float = 0.0


def _as_number(value):
    # bool is an int subclass, not a reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def validate_sample(payload) -> SensorSample | None:
    """
    Normalize one batch entry.
    Returns None for anything malformed (missing key, non-numeric,
    NaN / inf, empty id).
    """
    if isinstance(payload, SensorSample):
        return payload

    if not isinstance(payload, dict):
        return None

    for key in REQUIRED:
        if key not in payload:
            return None

    entity_id = payload["id"]
    if not isinstance(entity_id, str) or not entity_id:
        return None

    timestamp = _as_number(payload["timestamp"])
    amplitude = _as_number(payload["amplitude"])
    temperature = _as_number(payload["temperature"])
    if timestamp is None or amplitude is None or temperature is None:
        return None

    speed = 0.0
    if payload.get("speed") is not None:
        speed = _as_number(payload["speed"])
        if speed is None:
            return None

    return SensorSample(
        id=entity_id,
        timestamp=timestamp,
        amplitude=amplitude,
        temperature=temperature,
        speed=speed,
    )


def parse_batch(payload) -> tuple[list[SensorSample], int]:
    """
    Accepts a list of entries or {"updates": [...]}.
    Malformed entries are dropped; the rest keep arrival order.
    Returns (samples, dropped_count).
    """
    if isinstance(payload, dict):
        payload = payload.get("updates")

    if not isinstance(payload, list):
        logger.warning("Batch payload is not a list, ignored")
        return [], 0

    samples = []
    dropped = 0

    for entry in payload:
        sample = validate_sample(entry)
        if sample is None:
            dropped += 1
            logger.warning("Dropped malformed entry: %r", entry)
            continue
        samples.append(sample)

    return samples, dropped
