import os

class Config:
    # Serial link to the Arduino; "auto" (or empty) picks the first USB serial port
    ARDUINO_PORT = os.getenv("ARDUINO_PORT", "/dev/cu.usbmodem14101")
    ARDUINO_BAUDRATE = int(os.getenv("ARDUINO_BAUDRATE", "9600"))
    ARDUINO_HINT = os.getenv("ARDUINO_HINT", "")
    ARDUINO_READ_TIMEOUT = float(os.getenv("ARDUINO_READ_TIMEOUT", "1.0"))
    ARDUINO_AUTOCONNECT = os.getenv("ARDUINO_AUTOCONNECT", "1") == "1"

    # HTTP
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    CORS_SEND_WILDCARD = os.getenv("CORS_SEND_WILDCARD", "1") == "1"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
