# arduino_bridge/link.py
from __future__ import annotations

import enum
import logging
import threading
from typing import Callable, Optional

import serial

from arduino_bridge.utils.serial_helpers import find_serial_port

logger = logging.getLogger(__name__)

AUTO_PORT = "auto"


class LinkStatus(enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"


class LinkError(Exception):
    """Base class for everything the serial link can report."""


class NotConnected(LinkError):
    def __init__(self, message: str = "Arduino not connected"):
        super().__init__(message)


class WriteFailed(LinkError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class OpenFailed(LinkError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class TransportClosed(LinkError):
    def __init__(self, message: str = "Arduino connection closed"):
        super().__init__(message)


def _log_line(line: str) -> None:
    logger.info("Arduino says: %s", line)


class LinkManager:
    """
    Owns the one serial connection to the Arduino.

    Status only changes from the transport side (open, error, close). A failed
    or closed link stays that way until the process restarts.
    """

    def __init__(self, transport_factory: Optional[Callable[..., serial.SerialBase]] = None,
                 read_timeout: float = 1.0):
        self._factory = transport_factory or serial.serial_for_url
        self._read_timeout = read_timeout
        self._ser: Optional[serial.SerialBase] = None
        self._reader: Optional[threading.Thread] = None
        self._closing = threading.Event()
        self._write_lock = threading.Lock()
        self._line_hooks: list[Callable[[str], None]] = [_log_line]

        self.status = LinkStatus.DISCONNECTED
        self.port: Optional[str] = None
        self.baudrate: Optional[int] = None
        self.last_error: Optional[str] = None

    # ---- Flask wiring ----
    def init_app(self, app) -> None:
        app.extensions["arduino_link"] = self
        self._read_timeout = app.config.get("ARDUINO_READ_TIMEOUT", self._read_timeout)
        if app.config.get("ARDUINO_AUTOCONNECT", True):
            logger.info("Attempting to connect to Arduino...")
            self.open(app.config["ARDUINO_PORT"], app.config["ARDUINO_BAUDRATE"],
                      hint=app.config.get("ARDUINO_HINT", ""))

    @property
    def is_connected(self) -> bool:
        return self.status is LinkStatus.CONNECTED

    def add_line_hook(self, hook: Callable[[str], None]) -> None:
        self._line_hooks.append(hook)

    def snapshot(self) -> dict:
        return {
            "connected": self.is_connected,
            "status": self.status.value,
            "port": self.port,
            "baudrate": self.baudrate,
            "last_error": self.last_error,
        }

    # ---- lifecycle ----
    def open(self, path: str, baudrate: int, hint: str = "") -> None:
        """Open the device; failures are recorded on the link, never raised."""
        if self.is_connected:
            return

        self.baudrate = baudrate
        self.status = LinkStatus.CONNECTING
        try:
            if not path or path.strip().lower() == AUTO_PORT:
                path = find_serial_port(hint)
                if not path:
                    raise OpenFailed("no serial port found")
            self.port = path
            ser = self._factory(path, baudrate=baudrate, timeout=self._read_timeout)
        except (LinkError, serial.SerialException, OSError, ValueError) as e:
            err = e if isinstance(e, OpenFailed) else OpenFailed(str(e))
            self.status = LinkStatus.FAILED
            self.last_error = err.reason
            logger.error("Failed to connect to Arduino on %s: %s", path or "?", err.reason)
            return

        self._ser = ser
        self._closing.clear()
        self.last_error = None
        self.status = LinkStatus.CONNECTED
        logger.info("Connected to Arduino on %s @ %s baud", path, baudrate)

        self._reader = threading.Thread(
            target=self._read_loop, args=(ser,), name="arduino-reader", daemon=True
        )
        self._reader.start()

    def close(self) -> None:
        """Close the port on shutdown."""
        self._closing.set()
        ser, self._ser = self._ser, None
        if ser is not None:
            try:
                ser.close()
            except (serial.SerialException, OSError) as e:
                logger.debug("Ignoring error while closing %s: %s", self.port, e)
        if self._reader is not None and self._reader is not threading.current_thread():
            self._reader.join(timeout=self._read_timeout + 1.0)
        self._reader = None
        if self.status is not LinkStatus.FAILED:
            self.handle_close()

    # ---- transport events ----
    def handle_error(self, exc: BaseException) -> None:
        """Transport error: the link goes to FAILED and keeps the message."""
        self.last_error = str(exc)
        self.status = LinkStatus.FAILED
        logger.error("Serial port error: %s", exc)

    def handle_close(self) -> None:
        """Port closed underneath us: the link goes to DISCONNECTED."""
        if self.status is LinkStatus.DISCONNECTED:
            return
        self.last_error = str(TransportClosed())
        self.status = LinkStatus.DISCONNECTED
        logger.warning("Arduino connection closed")

    def handle_line(self, raw: bytes) -> None:
        line = raw.decode("utf-8", errors="replace").strip()
        if not line:
            return
        for hook in self._line_hooks:
            try:
                hook(line)
            except Exception:
                logger.exception("line hook %r failed", hook)

    def _read_loop(self, ser) -> None:
        while not self._closing.is_set():
            if not ser.is_open:
                if not self._closing.is_set():
                    self.handle_close()
                return
            try:
                raw = ser.readline()
            except (serial.SerialException, OSError) as e:
                if not self._closing.is_set():
                    self.handle_error(e)
                return
            if raw:
                self.handle_line(raw)

    # ---- writes ----
    def send(self, token: str) -> None:
        """
        Write one command token, newline-terminated.

        Raises NotConnected if the link is not up, WriteFailed if the transport
        rejects the write. Neither changes the link status.
        """
        ser = self._ser
        if not self.is_connected or ser is None:
            raise NotConnected()

        payload = (token + "\n").encode("ascii")
        with self._write_lock:
            try:
                ser.write(payload)
                ser.flush()
            except (serial.SerialException, OSError) as e:
                logger.error("Error writing to Arduino: %s", e)
                raise WriteFailed(str(e) or e.__class__.__name__) from e
