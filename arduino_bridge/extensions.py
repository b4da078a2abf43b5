# arduino_bridge/extensions.py
from flask import current_app
from flask_cors import CORS

cors = CORS()


def get_link():
    """The LinkManager bound to the running app."""
    return current_app.extensions["arduino_link"]
