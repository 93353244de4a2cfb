import time


class Heartbeat:
    """
    Liveness counters for the monitor service.
    Published as-is on the heartbeat topic.
    """

    def __init__(self, service_name: str):
        self.service_name = service_name
        self.started_at = time.time()
        self.counters = {
            "batches_rx": 0,
            "samples_rx": 0,
            "entries_dropped": 0,
            "decimation_ticks": 0,
            "exports": 0,
        }
        self.last_batch_ts = None

    def mark_batch_rx(self, samples: int, dropped: int = 0):
        self.counters["batches_rx"] += 1
        self.counters["samples_rx"] += samples
        self.counters["entries_dropped"] += dropped
        self.last_batch_ts = time.time()

    def mark_ticks(self, ticks: int):
        self.counters["decimation_ticks"] = ticks

    def mark_export(self):
        self.counters["exports"] += 1

    def snapshot(self) -> dict:
        now = time.time()
        return {
            "service": self.service_name,
            "uptime_sec": round(now - self.started_at, 1),
            "last_batch_ts": self.last_batch_ts,
            **self.counters,
            "timestamp": now,
        }
