# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "tolerance": 2,  # edit distance for corrections
    "neighbor_radius": 1,  # edit distance for near neighbours of known words
    "max_suggestions": 20,
    "min_token_length": 3,
    "dictionary_path": None,
}

# options whose value may be null
_OPTIONAL_STR = {"dictionary_path"}


def _coerce(key, val):
    """Convert `val` to the type of the key's default. Raises TypeError/ValueError."""
    if key in _OPTIONAL_STR:
        if val is None or val == "":
            return None
        if not isinstance(val, str):
            raise TypeError(f"{key} must be a string, got {type(val).__name__}")
        return val
    if val is None:
        raise TypeError(f"{key} cannot be null")
    return type(DEFAULTS[key])(val)


class Config:
    def __init__(self, path=None, create=False):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load(create)

    def _load(self, create):
        if not self.path:
            return
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("config %s unreadable, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            for k, v in loaded.items():
                if k not in self.data:
                    logger.warning("ignoring unknown config key %r", k)
                    continue
                try:
                    self.data[k] = _coerce(k, v)
                except (TypeError, ValueError) as e:
                    logger.warning("bad value for %r (%s), keeping default %r", k, e, DEFAULTS[k])
        elif create:
            self.save()

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def items(self):
        return self.data.items()

    def set(self, key, val):
        """Coerce `val` to the default's type. Raises KeyError/TypeError/ValueError on bad input."""
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(key, val)
        self.save()
