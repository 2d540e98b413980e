# tests/test_config.py
import json

import pytest

from spellcheck_assistant.utils.config_manager import DEFAULTS, Config


def test_defaults_without_file():
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg.get("tolerance") == 2
    cfg.save()  # no path: nothing written


def test_file_overrides_and_unknown_keys(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"tolerance": "3", "theme": "dark"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("tolerance") == 3
    assert "theme" not in cfg.data


def test_unreadable_file_falls_back_to_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf8")
    assert Config(str(p)).data == DEFAULTS


def test_set_coerces_and_persists(tmp_path):
    p = tmp_path / "config.json"
    cfg = Config(str(p), create=True)
    assert p.exists()
    cfg.set("neighbor_radius", "2")
    assert cfg.get("neighbor_radius") == 2
    assert json.loads(p.read_text(encoding="utf8"))["neighbor_radius"] == 2

    with pytest.raises(KeyError):
        cfg.set("balance", 1)
    with pytest.raises(ValueError):
        cfg.set("tolerance", "many")


def test_metrics_running_average():
    from spellcheck_assistant.utils.metrics_tracker import Metrics

    m = Metrics()
    assert m.avg("update_time") == 0.0
    m.record("update_time", 0.5)
    m.record("update_time", 1.5)
    assert m.avg("update_time") == 1.0
    assert m.summary()["update_time"] == (2, 1.0)


def test_bad_values_keep_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(
        json.dumps({"tolerance": "many", "max_suggestions": None, "neighbor_radius": [1], "min_token_length": "4"}),
        encoding="utf8",
    )
    cfg = Config(str(p))
    assert cfg.get("tolerance") == 2
    assert cfg.get("max_suggestions") == 20
    assert cfg.get("neighbor_radius") == 1
    assert cfg.get("min_token_length") == 4


def test_dictionary_path_is_optional(tmp_path):
    assert DEFAULTS["dictionary_path"] is None
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"dictionary_path": None}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg.get("dictionary_path") is None

    p.write_text(json.dumps({"dictionary_path": 7}), encoding="utf8")
    assert Config(str(p)).get("dictionary_path") is None

    cfg.set("dictionary_path", "words.txt")
    assert cfg.get("dictionary_path") == "words.txt"
    cfg.set("dictionary_path", "")
    assert cfg.get("dictionary_path") is None
