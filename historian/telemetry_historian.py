import csv
import io
import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from core.ring_buffer import RingBuffer
from health.state_mapping import amplitude_condition

logger = logging.getLogger(__name__)

COLUMNS = ["timestamp_iso", "amplitude", "speed", "temperature", "condition"]


def _iso(timestamp: float) -> str:
    try:
        dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        # not renderable as a date, keep the raw number
        return str(timestamp)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TelemetryHistorian:
    """
    Telemetry Historian
    ===================
    - One long ring of full raw samples per entity
    - Native rate, no decimation (replay / audit trail)
    - Rings preallocated on first sample, never grown
    """

    def __init__(
        self,
        capacity: int = 3000,
        amplitude_warning: float = 7.0,
        amplitude_critical: float = 12.0,
    ):
        self.capacity = capacity
        self.amplitude_warning = amplitude_warning
        self.amplitude_critical = amplitude_critical
        self.buffers = {}

    # =========================================================
    # INTERNAL
    # =========================================================
    def _ensure(self, entity_id: str) -> RingBuffer:
        if entity_id not in self.buffers:
            self.buffers[entity_id] = RingBuffer(
                self.capacity, dtype=object, fill_value=None
            )
        return self.buffers[entity_id]

    # =========================================================
    # PUBLIC API
    # =========================================================
    def add(self, sample):
        self._ensure(sample.id).push(sample)

    def get_length(self, entity_id: str) -> int:
        buffer = self.buffers.get(entity_id)
        return buffer.count if buffer is not None else 0

    def entity_ids(self) -> list[str]:
        return list(self.buffers)

    def get_recent(self, entity_id: str, max_count: int) -> list:
        """Up to max_count newest samples, oldest first. Empty if unknown."""
        buffer = self.buffers.get(entity_id)
        if buffer is None or buffer.count == 0:
            return []
        return list(buffer.recent(max_count))

    def get_all(self, entity_id: str) -> list:
        buffer = self.buffers.get(entity_id)
        if buffer is None:
            return []
        return list(buffer.ordered())

    # =========================================================
    # EXPORT
    # =========================================================
    def export(self, entity_id: str) -> str:
        """
        Whole retained buffer as CSV text, chronological.
        Condition label is recomputed from the raw amplitude.
        Empty string when nothing is recorded.
        """
        samples = self.get_all(entity_id)
        if not samples:
            return ""

        out = io.StringIO()
        out.write("# Condition Monitor Incident Report\n")
        out.write(f"# Entity: {entity_id}\n")
        out.write(
            f"# Limits: Amplitude >= {self.amplitude_critical:.1f} (CRITICAL), "
            f"Amplitude >= {self.amplitude_warning:.1f} (WARNING)\n"
        )

        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(COLUMNS)

        for s in samples:
            writer.writerow([
                _iso(s.timestamp),
                f"{s.amplitude:.2f}",
                f"{s.speed:.2f}",
                f"{s.temperature:.2f}",
                amplitude_condition(
                    s.amplitude,
                    self.amplitude_warning,
                    self.amplitude_critical,
                ),
            ])

        return out.getvalue()

    def export_to_file(self, entity_id: str, directory) -> Path | None:
        text = self.export(entity_id)
        if not text:
            logger.info(f"Nothing recorded for {entity_id}, export skipped")
            return None

        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        safe_id = re.sub(r"[^A-Za-z0-9._-]", "_", entity_id)
        path = directory / f"incident_report_{safe_id}.csv"
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)

        logger.info(f"Exported {self.get_length(entity_id)} samples → {path}")
        return path
