import queue
import time

import pytest

from arduino_bridge import create_app


class FakeSerial:
    """Stand-in for a pyserial port: records writes, serves queued input lines."""

    def __init__(self, url, baudrate=9600, timeout=None, **kwargs):
        self.url = url
        self.baudrate = baudrate
        self.timeout = timeout or 0.05
        self.is_open = True
        self.written = []
        self.write_error = None
        self._incoming = queue.Queue()

    # pyserial surface
    def write(self, data):
        if self.write_error is not None:
            raise self.write_error
        self.written.append(bytes(data))
        return len(data)

    def flush(self):
        pass

    def readline(self):
        try:
            item = self._incoming.get(timeout=self.timeout)
        except queue.Empty:
            return b""
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self):
        self.is_open = False

    # test helpers
    def feed(self, data: bytes):
        self._incoming.put(data)

    def fail_read(self, exc: BaseException):
        self._incoming.put(exc)


class FakeSerialFactory:
    def __init__(self):
        self.instances = []

    def __call__(self, url, **kwargs):
        ser = FakeSerial(url, **kwargs)
        self.instances.append(ser)
        return ser

    @property
    def last(self) -> FakeSerial:
        return self.instances[-1]


def wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


TEST_CONFIG = {
    "TESTING": True,
    "ARDUINO_PORT": "/dev/ttyFAKE0",
    "ARDUINO_BAUDRATE": 9600,
    "ARDUINO_READ_TIMEOUT": 0.05,
    "ARDUINO_AUTOCONNECT": True,
    "LOG_LEVEL": "DEBUG",
}


@pytest.fixture
def transport():
    return FakeSerialFactory()


@pytest.fixture
def app(transport):
    app = create_app(dict(TEST_CONFIG), transport_factory=transport)
    yield app
    app.extensions["arduino_link"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def link(app):
    return app.extensions["arduino_link"]


@pytest.fixture
def offline_app():
    """Bridge whose device path does not exist; real pyserial does the open."""
    app = create_app({**TEST_CONFIG, "ARDUINO_PORT": "/dev/does-not-exist-arduino"})
    yield app
    app.extensions["arduino_link"].close()


@pytest.fixture
def offline_client(offline_app):
    return offline_app.test_client()
