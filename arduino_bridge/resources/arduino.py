# arduino_bridge/resources/arduino.py
from __future__ import annotations

import logging

from flask_restful import Resource

from arduino_bridge.commands import Command
from arduino_bridge.extensions import get_link
from arduino_bridge.link import NotConnected, WriteFailed

logger = logging.getLogger(__name__)


def _not_connected() -> tuple[dict, int]:
    return {"success": False, "error": str(NotConnected())}, 503


class CommandResource(Resource):
    """One catalog action; the command is bound per route at registration."""

    def __init__(self, command: Command):
        self.command = command

    def post(self):
        link = get_link()
        if not link.is_connected:
            return _not_connected()

        try:
            link.send(self.command.token)
        except NotConnected:
            return _not_connected()
        except WriteFailed as e:
            return {"success": False, "error": e.reason}, 500

        logger.info("Sent %r to Arduino (%s)", self.command.token, self.command.message)
        return {"success": True, "message": self.command.message}, 200


class StatusResource(Resource):
    def get(self):
        return {"connected": get_link().is_connected}, 200
