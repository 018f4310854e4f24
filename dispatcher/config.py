"""
Centralized config for the emergency dispatcher.
Reads overrides from the environment (or a local .env); defaults match the
stock simulator: emergencies.txt and a 100-record cap.
"""
import os
import sys

from dotenv import load_dotenv

load_dotenv()


def env_int(name: str, default: int) -> int:
    """Integer setting from the environment; a bad value falls back to the default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"[Config] {name}={raw!r} is not an integer, using {default}", file=sys.stderr)
        return default


DATA_FILE = os.getenv("DISPATCH_DATA_FILE", "emergencies.txt")
MAX_EMERGENCIES = env_int("DISPATCH_MAX_EMERGENCIES", 100)
