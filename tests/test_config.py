# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from site_mirror.config import DEFAULT_USER_AGENT, MirrorConfig, load_config, read_config_file


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: http://example.com\nrecursive: true", ".yaml", None),
        (json.dumps({"seed_url": "http://example.com", "recursive": True}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yml", TypeError),
        ("seed_url = 'http://example.com'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, MirrorConfig)
        assert str(cfg.seed_url) == "http://example.com/"
        assert cfg.recursive is True


def test_defaults():
    cfg = MirrorConfig(seed_url="https://example.com/docs/")
    assert cfg.output_dir == Path(".")
    assert cfg.recursive is False
    assert cfg.timeout == 30.0
    assert cfg.user_agent == DEFAULT_USER_AGENT
    assert "Mozilla/5.0" in cfg.user_agent


def test_overrides_win_over_file_and_none_is_ignored(tmp_path):
    cfg_path = write_file(
        tmp_path, "seed_url: http://example.com\ntimeout: 5\noutput_dir: from_file", ".yaml"
    )
    cfg = load_config(cfg_path, seed_url="https://other.example/start", timeout=None, output_dir="cli_dir")
    assert str(cfg.seed_url) == "https://other.example/start"
    assert cfg.timeout == 5.0
    assert cfg.output_dir == Path("cli_dir")


def test_load_config_without_file():
    cfg = load_config(None, seed_url="http://example.com/a")
    assert str(cfg.seed_url) == "http://example.com/a"


def test_config_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config_file(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "seed",
    ["not a url", "ftp://example.com/file", "/relative/path", "http://"],
)
def test_invalid_seed_rejected(seed):
    with pytest.raises(ValidationError):
        MirrorConfig(seed_url=seed)


def test_unknown_keys_and_bad_timeout_rejected():
    with pytest.raises(ValidationError):
        MirrorConfig(seed_url="http://example.com", max_depth=3)
    with pytest.raises(ValidationError):
        MirrorConfig(seed_url="http://example.com", timeout=0)


def test_config_is_frozen():
    cfg = MirrorConfig(seed_url="http://example.com")
    with pytest.raises(ValidationError):
        cfg.recursive = True
