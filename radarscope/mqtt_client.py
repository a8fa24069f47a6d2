import logging
import uuid
from queue import Empty, Queue

import paho.mqtt.client as mqtt

from radarscope.errors import SourceError

log = logging.getLogger(__name__)


class MqttSource:
    """
    Byte source fed by an MQTT topic.  Each message payload is treated as a
    raw chunk of the wire stream (`30:20|31:22|...`); chunks need not align
    with frame boundaries.

    paho's network thread only enqueues payloads; `read()` drains the queue
    on the caller's thread so all framing stays single-threaded.
    """

    exhausted = False

    def __init__(self, host, port, topic, timeout=0.05):
        self.host, self.port, self.topic = host, port, topic
        self.timeout = timeout
        self.q = Queue()
        self.refused = None            # reason code of a rejected CONNECT

        random_id = f"radarscope-{uuid.uuid4().hex[:8]}"
        self.cli = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, client_id=random_id)
        self.cli.on_connect = self._on_connect
        self.cli.on_message = self._on_msg

    def open(self):
        try:
            self.cli.connect(self.host, self.port, 60)
        except OSError as exc:
            raise SourceError(f"cannot reach broker {self.host}:{self.port}: {exc}") from exc
        self.cli.loop_start()
        log.info("connected to %s:%d, topic %s", self.host, self.port, self.topic)
        return self

    def close(self):
        self.cli.loop_stop()
        self.cli.disconnect()

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()

    def _on_connect(self, client, _userdata, _flags, reason_code, _properties):
        if reason_code.is_failure:
            log.error("broker refused connection: %s", reason_code)
            self.refused = reason_code
            return
        client.subscribe(self.topic)

    def _on_msg(self, _cli, _userdata, msg):
        self.q.put_nowait(bytes(msg.payload))

    def read(self):
        """Everything queued so far, or b"" after `timeout` seconds."""
        if self.refused is not None:
            raise SourceError(f"broker refused connection: {self.refused}")
        try:
            parts = [self.q.get(timeout=self.timeout)]
        except Empty:
            return b""
        while True:
            try:
                parts.append(self.q.get_nowait())
            except Empty:
                return b"".join(parts)
