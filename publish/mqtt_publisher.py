import json
import time

import paho.mqtt.client as mqtt


class MQTTPublisher:
    """
    MQTT Publisher

    Responsibility:
    - Publish condition snapshots and liveness only
    - NO analytics
    - Flat JSON only
    """

    def __init__(self, broker, port, base_topic="condition", client=None):
        self.base_topic = base_topic

        if client is None:
            client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)
            client.connect(broker, port)
            client.loop_start()
        self.client = client

    # =========================================================
    # INTERNAL
    # =========================================================
    def _publish(self, topic, payload, qos=1, retain=False):
        self.client.publish(
            topic,
            json.dumps(payload),
            qos=qos,
            retain=retain,
        )

    # =========================================================
    # CONDITION SNAPSHOT
    # =========================================================
    def publish_snapshot(self, entity_id, snapshot):
        """
        Last known condition per entity, retained so late
        subscribers read a valid value immediately.
        """
        topic = f"{self.base_topic}/snapshot/{entity_id}"

        payload = {
            "id": entity_id,
            **snapshot.to_dict(),
            "timestamp": time.time(),
        }

        self._publish(topic, payload, retain=True)

    def publish_snapshots(self, snapshots: dict):
        for entity_id, snapshot in snapshots.items():
            self.publish_snapshot(entity_id, snapshot)

    # =========================================================
    # HEARTBEAT
    # =========================================================
    def publish_heartbeat(self, payload):
        """
        System liveness only.
        """
        topic = f"{self.base_topic}/heartbeat"
        self._publish(topic, payload, qos=0, retain=False)

    # =========================================================
    # SHUTDOWN
    # =========================================================
    def stop(self):
        self.client.loop_stop()
        self.client.disconnect()
