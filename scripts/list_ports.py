# scripts/list_ports.py — show serial ports and the one ARDUINO_PORT=auto would pick
from serial.tools import list_ports

from arduino_bridge.utils.serial_helpers import find_serial_port, looks_like_usb_serial
from config import Config

ports = list(list_ports.comports())
if not ports:
    print("No serial ports found.")
for p in ports:
    mark = "usb" if looks_like_usb_serial(p.device) else "   "
    print(f"[{mark}] {p.device:<28} {p.description} ({p.manufacturer or '-'})")

chosen = find_serial_port(Config.ARDUINO_HINT)
print(f"auto-detect (hint={Config.ARDUINO_HINT!r}): {chosen or 'none'}")
