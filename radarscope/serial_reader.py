"""
radarscope.serial_reader
========================

Blocking byte source on a local serial port (8N1).

Usage
-----
    with SerialSource("/dev/ttyACM0", 9600) as src:
        chunk = src.read()     # b"" after `timeout` seconds of silence

Open and read failures are raised as `SourceError`; the caller treats them
as fatal.
"""
from __future__ import annotations

import logging

import serial

from radarscope.errors import SourceError

log = logging.getLogger(__name__)


class SerialSource:
    exhausted = False                  # a port never runs dry

    def __init__(self, port: str, baud: int, timeout: float = 0.05) -> None:
        self.port, self.baud, self.timeout = port, baud, timeout
        self.ser = None

    # ───────────────────────── lifecycle
    def open(self) -> "SerialSource":
        try:
            self.ser = serial.Serial(self.port, self.baud,
                                     bytesize=serial.EIGHTBITS,
                                     parity=serial.PARITY_NONE,
                                     stopbits=serial.STOPBITS_ONE,
                                     timeout=self.timeout)
        except serial.SerialException as exc:
            raise SourceError(f"cannot open serial port {self.port}: {exc}") from exc
        log.info("opened %s @ %d baud", self.port, self.baud)
        return self

    def close(self) -> None:
        if self.ser is not None:
            self.ser.close()
            self.ser = None
            log.info("closed %s", self.port)

    def __enter__(self) -> "SerialSource":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    # ───────────────────────── reading
    def read(self) -> bytes:
        if self.ser is None:
            raise SourceError(f"serial port {self.port} is not open")
        try:
            return self.ser.read(self.ser.in_waiting or 1)
        except serial.SerialException as exc:
            raise SourceError(f"read from {self.port} failed: {exc}") from exc
