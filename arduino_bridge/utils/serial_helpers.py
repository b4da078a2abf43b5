# arduino_bridge/utils/serial_helpers.py
from serial.tools import list_ports

USB_SERIAL_MARKERS = ("usbserial", "usbmodem", "ttyacm", "ttyusb")

# USB vendor IDs: genuine boards first, then the bridge chips clones ship with
ARDUINO_VIDS = (0x2341, 0x2A03)
CLONE_VIDS = (0x1A86, 0x10C4, 0x0403)  # CH340, CP210x, FTDI


def looks_like_usb_serial(device: str) -> bool:
    d = (device or "").lower()
    return any(marker in d for marker in USB_SERIAL_MARKERS)


def _port_text(p) -> str:
    return " ".join(str(v) for v in (p.device, p.description, p.manufacturer) if v).lower()


def _rank(p, hint: str) -> int:
    vid = getattr(p, "vid", None)
    if hint and hint in _port_text(p):
        return 0
    if vid in ARDUINO_VIDS:
        return 1
    if vid in CLONE_VIDS:
        return 2
    if looks_like_usb_serial(p.device):
        return 3
    return 4


def find_serial_port(hint: str = "") -> str | None:
    """
    Pick the port the Arduino is most likely on.

    Order: hint match (device/description/manufacturer), an official Arduino
    vendor ID, a common clone bridge chip, a USB serial device name, then
    whatever the OS listed first.
    """
    ports = list(list_ports.comports())
    if not ports:
        return None
    hint_low = (hint or "").lower()
    # min() is stable, so ties keep the OS ordering
    return min(ports, key=lambda p: _rank(p, hint_low)).device
