from flask import Flask, current_app, jsonify
import json
import logging
import os

app = Flask(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# unknown level names fall back to INFO
app.logger.setLevel(LOG_LEVEL if isinstance(logging.getLevelName(LOG_LEVEL), int) else "INFO")

DEFAULT_ITEMS_FILE = os.path.join(os.path.dirname(__file__), "data", "items.json")

app.config["ITEMS_FILE"] = os.getenv("ITEMS_FILE", DEFAULT_ITEMS_FILE)
app.config["SERVICE_NAME"] = os.getenv("SERVICE_NAME", "itemservice")
PORT = int(os.getenv("PORT", "5000"))


def load_items(path):
    # read on every call so edits to the file show up on the next request
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


@app.after_request
def allow_any_origin(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    return response


@app.route("/api/items")
def items():
    return jsonify(load_items(current_app.config["ITEMS_FILE"]))


@app.route("/healthz")
def healthz():
    return jsonify(status="ok", service=current_app.config["SERVICE_NAME"])


if __name__ == "__main__":
    app.logger.info("Serving items from %s", app.config["ITEMS_FILE"])
    app.logger.info("Server running on port %s", PORT)
    app.run(host="0.0.0.0", port=PORT)
