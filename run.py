# run.py — single entrypoint
from arduino_bridge import create_app

app = create_app()

if __name__ == "__main__":
    # threaded=False keeps request handling on a single dispatcher thread
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=False)
