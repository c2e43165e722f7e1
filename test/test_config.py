"""Test loading forthy.toml"""
import pytest

from forthy import config
from forthy.config_classes import ReplConfig


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = config.load({"--config": None})
    assert cfg.config_file is None
    assert cfg.repl == ReplConfig()
    assert cfg.repl.prompt == "> "


def test_explicit_missing_file(tmp_path):
    with pytest.raises(config.ConfigError):
        config.load({"--config": str(tmp_path / "nope.toml")})


def test_load_repl_section(tmp_path):
    path = tmp_path / "my.toml"
    path.write_text(
        '[repl]\nprompt = "ok> "\nshow_stack = true\nprelude = [": sq dup * ;"]\n'
    )
    cfg = config.load({"--config": str(path)})
    assert cfg.config_file == path
    assert cfg.repl.prompt == "ok> "
    assert cfg.repl.show_stack
    assert cfg.repl.banner
    assert cfg.repl.prelude == (": sq dup * ;",)


def test_unknown_key(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[repl]\ncolour = 1\n")
    with pytest.raises(config.ConfigError):
        config.load({"--config": str(path)})


def test_bad_toml(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[repl\n")
    with pytest.raises(config.ConfigError):
        config.load({"--config": str(path)})


def test_skeleton(tmp_path):
    filename = config.create_skeleton(tmp_path)
    cfg = config.load({"--config": str(filename)})
    assert cfg.repl.prelude == (": square dup * ;",)

    with pytest.raises(config.UserResolvableError):
        config.create_skeleton(tmp_path)
