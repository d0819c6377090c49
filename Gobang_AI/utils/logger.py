"""Timestamped console logging for games and search statistics."""

import datetime


def log_event(message, level="INFO"):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    tag = "" if level == "INFO" else f" {level}"
    print(f"[{timestamp}]{tag} {message}")
