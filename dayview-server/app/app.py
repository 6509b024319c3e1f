# -*- coding:utf8 -*-
import copy
import io
import logging
import os

import arrow
import yaml
from flask import Flask, jsonify, redirect, request, send_file, url_for
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from dayboard import DayBoard
from dayview import LiveClock
from dayview.sources import get_system_tz, load_events

logger = logging.getLogger(__name__)

app = Flask(__name__)

CONFIG_PATH = os.getenv("DAYVIEW_CONFIG", "/config/config.yaml")

# ------------------------------------------------------------------
# DEFAULT CONFIG
# ------------------------------------------------------------------
DEFAULT_CONFIG = {
    "calendar": {
        "feeds": [
            {"name": "Familie", "url": "https://ics", "priority": 1}
        ]
    },
    "dayview": {
        "width": 480,
        "padding_top": 5,
        "padding_bottom": 5,
        "fontsize": 14,
        "height_per_hour": 48,
        "margin": 2,
        "indent_step": 16,
        "width_step": 8,
        "fallback_hour": 8,
        "time_format": "HH:mm",
        "locale": "en",
        "colors": {1: "#60a5fa", 2: "#93c5fd"},
    },
    "clock": {"interval": 1.0},
}

current_config = copy.deepcopy(DEFAULT_CONFIG)
live_clock = LiveClock(interval=DEFAULT_CONFIG["clock"]["interval"])


def _requested_day():
    value = request.args.get("date")
    tzinfo = get_system_tz()
    if not value:
        return arrow.now(tzinfo) if tzinfo else arrow.now()
    day = arrow.get(value, "YYYY-MM-DD")
    return day.replace(tzinfo=tzinfo) if tzinfo else day


def _events_around(day):
    feeds = current_config.get("calendar", {}).get("feeds", [])
    start = day.floor("day").shift(days=-1)
    end = day.floor("day").shift(days=2)
    return load_events(feeds, start, end)


def _bad_date(exc):
    return jsonify({"ok": False, "error": f"date must be YYYY-MM-DD: {exc}"}), 400


# ------------------------------------------------------------------
# CONFIG WATCHER
# ------------------------------------------------------------------
class ConfigFileHandler(FileSystemEventHandler):
    def __init__(self, path, callback):
        self.path = path
        self.callback = callback

    def on_modified(self, event):
        if event.src_path == self.path:
            with open(self.path) as f:
                cfg = yaml.safe_load(f)
            self.callback(cfg)


def _apply_clock_config(cfg):
    global live_clock
    interval = float(cfg.get("clock", {}).get("interval", DEFAULT_CONFIG["clock"]["interval"]))
    if interval == live_clock.interval:
        return
    was_running = live_clock.running
    live_clock.stop()
    live_clock = LiveClock(interval=interval)
    if was_running:
        live_clock.start()
    logger.info("clock interval changed to %.2fs", interval)


def update_app_config(cfg):
    global current_config
    if not isinstance(cfg, dict):
        logger.warning("ignoring config without a mapping at the top level")
        return
    current_config = cfg
    _apply_clock_config(cfg)
    logger.info("config reloaded")


# ------------------------------------------------------------------
# ROUTES
# ------------------------------------------------------------------
@app.route("/")
def index():
    return redirect(url_for("dayview_png"))


@app.route("/dayview.png")
def dayview_png():
    try:
        day = _requested_day()
    except ValueError as exc:
        return _bad_date(exc)
    board = DayBoard(current_config)
    image = board.generate_image(day, _events_around(day), now=live_clock.state)
    bio = io.BytesIO()
    image.save(bio, format="PNG")
    bio.seek(0)
    return send_file(bio, mimetype="image/png", download_name="dayview.png")


@app.route("/layout")
def layout_get():
    try:
        day = _requested_day()
    except ValueError as exc:
        return _bad_date(exc)
    board = DayBoard(current_config)
    return jsonify(board.layout(day, _events_around(day), now=live_clock.state).to_dict())


@app.route("/clock")
def clock_get():
    state = live_clock.state
    return {"ready": state.ready, "time": state.time.isoformat() if state.time else None}


# ------------------------------------------------------------------
# MAIN
# ------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    os.makedirs(os.path.dirname(CONFIG_PATH), exist_ok=True)
    if not os.path.exists(CONFIG_PATH):
        with open(CONFIG_PATH, "w") as f:
            yaml.safe_dump(DEFAULT_CONFIG, f)
    with open(CONFIG_PATH) as f:
        update_app_config(yaml.safe_load(f))
    observer = Observer()
    observer.schedule(ConfigFileHandler(CONFIG_PATH, update_app_config), os.path.dirname(CONFIG_PATH), recursive=False)
    observer.start()

    live_clock.start()
    try:
        app.run(host="0.0.0.0", port=5000, use_reloader=False, threaded=True)
    finally:
        live_clock.stop()
        observer.stop()
        observer.join()


if __name__ == "__main__":
    main()
