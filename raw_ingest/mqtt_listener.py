import json
import logging

import paho.mqtt.client as mqtt

logger = logging.getLogger(__name__)


def start_mqtt_listener(
    handlers: dict,
    broker: str,
    port: int,
):
    """
    Batch MQTT Listener
    -------------------
    handlers: {topic: callback(payload)}

    Every message payload is JSON. Decoding or handler errors are
    logged and the loop keeps running.
    """

    client = build_client(handlers)
    client.connect(broker, port, keepalive=60)
    logger.info(f"[MQTT] Connecting to {broker}:{port}")
    client.loop_forever()


def build_client(handlers: dict):
    # =========================================================
    # ON CONNECT
    # =========================================================
    def on_connect(client, userdata, flags, reason_code, properties):
        if not reason_code.is_failure:
            for topic in handlers:
                client.subscribe(topic)
                logger.info(f"[MQTT] Subscribed to: {topic}")
        else:
            logger.error(f"[MQTT] Connection failed: {reason_code}")

    # =========================================================
    # ON MESSAGE
    # =========================================================
    def on_message(client, userdata, msg):
        handler = handlers.get(msg.topic)
        if handler is None:
            logger.warning(f"[MQTT] No handler for topic {msg.topic}")
            return

        try:
            payload = json.loads(msg.payload.decode())
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.warning(f"[MQTT] Non-JSON payload on {msg.topic}, ignored")
            return

        try:
            handler(payload)
        except Exception:
            logger.exception(f"[MQTT] Message processing error on {msg.topic}")

    # =========================================================
    # CLIENT INIT
    # =========================================================
    client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)
    client.on_connect = on_connect
    client.on_message = on_message
    return client
