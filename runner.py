import argparse
import logging
import time

from config.config_loader import load_config
from config.settings import MonitorConfig
from core.condition_monitor import ConditionMonitor
from publish.mqtt_publisher import MQTTPublisher
from raw_ingest.mqtt_listener import start_mqtt_listener
from utils.heartbeat import Heartbeat

logger = logging.getLogger(__name__)


def build_handlers(
    config: dict,
    monitor: ConditionMonitor,
    publisher: MQTTPublisher,
    heartbeat: Heartbeat,
) -> dict:
    """
    topic → callback(payload)
    Kept separate from main() so the wiring runs without a broker.
    """
    mqtt_cfg = config.get("mqtt", {})
    export_dir = config.get("historian", {}).get("export_dir", "exports")
    heartbeat_interval = config.get("heartbeat", {}).get("interval_sec", 10)

    last_heartbeat_ts = time.time()

    # =========================
    # BATCH CALLBACK
    # =========================
    def on_batch(payload):
        nonlocal last_heartbeat_ts

        dropped_before = monitor.dropped_entries
        processed_before = monitor.samples_processed
        snapshots = monitor.process_batch(payload)

        heartbeat.mark_batch_rx(
            samples=monitor.samples_processed - processed_before,
            dropped=monitor.dropped_entries - dropped_before,
        )
        heartbeat.mark_ticks(monitor.decimation_ticks)

        publisher.publish_snapshots(snapshots)

        now = time.time()
        if now - last_heartbeat_ts >= heartbeat_interval:
            publisher.publish_heartbeat(heartbeat.snapshot())
            last_heartbeat_ts = now

    # =========================
    # EXPORT COMMAND
    # =========================
    def on_export(payload):
        entity_id = payload.get("id") if isinstance(payload, dict) else None
        if not entity_id:
            logger.warning(f"Export command without id: {payload!r}")
            return

        path = monitor.historian.export_to_file(entity_id, export_dir)
        if path is not None:
            heartbeat.mark_export()

    return {
        mqtt_cfg.get("batch_topic", "condition/raw/batch"): on_batch,
        mqtt_cfg.get("export_topic", "condition/cmd/export"): on_export,
    }


def main(config_path: str | None = None):
    # =========================
    # LOAD CONFIG
    # =========================
    config = load_config(config_path)
    monitor_config = MonitorConfig.from_dict(config)

    logging.basicConfig(
        level=config.get("logging", {}).get("level", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # =========================
    # CORE PIPELINE
    # =========================
    monitor = ConditionMonitor(monitor_config)
    heartbeat = Heartbeat(service_name="condition-monitor")

    # =========================
    # PUBLISHER
    # =========================
    mqtt_cfg = config["mqtt"]
    publisher = MQTTPublisher(
        broker=mqtt_cfg["broker"],
        port=mqtt_cfg["port"],
        base_topic=mqtt_cfg.get("base_topic", "condition"),
    )

    handlers = build_handlers(config, monitor, publisher, heartbeat)

    logger.info(
        f"Condition monitor up | window={monitor_config.peak_window_capacity} "
        f"decimation={monitor_config.decimation_factor} "
        f"trend={monitor_config.trend_capacity}"
    )

    # =========================
    # START MQTT LISTENER
    # =========================
    try:
        start_mqtt_listener(
            handlers=handlers,
            broker=mqtt_cfg["broker"],
            port=mqtt_cfg["port"],
        )
    finally:
        publisher.stop()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Streaming condition monitor")
    parser.add_argument("--config", default=None, help="path to settings YAML")
    args = parser.parse_args()
    main(args.config)
