from flask import Flask, current_app, jsonify, render_template
import logging
import os
import requests

from itemviewer.models import Item

app = Flask(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
app.logger.setLevel(LOG_LEVEL if isinstance(logging.getLevelName(LOG_LEVEL), int) else "INFO")

app.config["BACKEND_URL"] = os.getenv("BACKEND_URL", "http://localhost:5000").rstrip("/")
app.config["SERVICE_NAME"] = os.getenv("SERVICE_NAME", "itemviewer")
PORT = int(os.getenv("PORT", "3000"))


def fetch_items(backend_url):
    """Fetch the item list from the item service. No timeout and no retry."""
    data = requests.get(f"{backend_url}/api/items").json()
    return [Item.from_dict(entry) for entry in data]


@app.route("/")
def index():
    items = []
    try:
        items = fetch_items(current_app.config["BACKEND_URL"])
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        current_app.logger.error(f"Error fetching items: {e}")
    return render_template("index.html", items=items)


@app.route("/healthz")
def healthz():
    return jsonify(status="ok", service=current_app.config["SERVICE_NAME"])


if __name__ == "__main__":
    app.logger.info("Fetching items from %s", app.config["BACKEND_URL"])
    app.run(host="0.0.0.0", port=PORT)
