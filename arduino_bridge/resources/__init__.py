# arduino_bridge/resources/__init__.py
from flask_restful import Api

from arduino_bridge.commands import COMMANDS
from .arduino import CommandResource, StatusResource


def register_resources(api: Api) -> None:
    # Status
    api.add_resource(StatusResource, "/arduino/status", endpoint="arduino_status")

    # Commands (POST only)
    for command in COMMANDS:
        api.add_resource(
            CommandResource,
            command.route,
            endpoint=command.endpoint,
            resource_class_kwargs={"command": command},
        )
