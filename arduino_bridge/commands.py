# arduino_bridge/commands.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    action: str
    token: str
    message: str

    @property
    def route(self) -> str:
        return "/arduino/" + self.action.replace(".", "/")

    @property
    def endpoint(self) -> str:
        return "arduino_" + self.action.replace(".", "_")


# action -> wire token understood by the sketch; order is the order routes are registered
COMMANDS: tuple[Command, ...] = (
    Command("toggle", "T", "LED toggled"),
    Command("on", "1", "LED turned ON"),
    Command("off", "0", "LED turned OFF"),
    # red LED (pin 13)
    Command("red.on", "R1", "Red LED turned ON"),
    Command("red.off", "R0", "Red LED turned OFF"),
    # blue LED (pin 12)
    Command("blue.on", "B1", "Blue LED turned ON"),
    Command("blue.off", "B0", "Blue LED turned OFF"),
    Command("all.on", "ALL_ON", "Both LEDs turned ON"),
    Command("all.off", "ALL_OFF", "Both LEDs turned OFF"),
    Command("alternate.start", "ALTERNATE", "Alternate mode started"),
    Command("alternate.stop", "STOP", "Alternate mode stopped"),
)

_BY_ACTION = {c.action: c for c in COMMANDS}


def get_command(action: str) -> Command:
    return _BY_ACTION[action]
