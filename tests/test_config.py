# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from sitemapper.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("concurrency: 3\nscript_attr: href", ".yaml", None),
        (json.dumps({"concurrency": 3, "script_attr": "href"}), ".json", None),
        (json.dumps({"concurrency": 0}), ".json", ValidationError),
        ("unknown_key: 1", ".yml", ValidationError),
        ("script_attr: data-src", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("::invalid yaml", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("concurrency = 3", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.concurrency == 3
        assert cfg.script_attr == "href"
        assert cfg.depth == 2


def test_defaults_without_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == CrawlerConfig()
    assert cfg.script_attr == "src"
    assert cfg.max_duration is None


def test_default_config_file_is_used(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("timeout: 3.5\n", encoding="utf-8")
    assert load_config(None).timeout == 3.5


def test_overrides_replace_file_values(tmp_path):
    cfg_path = write_file(tmp_path, "concurrency: 3\ntimeout: 1.0", ".yaml")
    cfg = load_config(cfg_path, concurrency=8, timeout=None)
    assert cfg.concurrency == 8
    assert cfg.timeout == 1.0


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.concurrency = 5
