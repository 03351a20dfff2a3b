import logging

from txlog.main import create_app

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

app = create_app()


if __name__ == "__main__":
    app.run(port=3000, debug=app.config["DEBUG"])
