import json

import pytest

import config
import main
from world.session import default_params


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    d = tmp_path / "configs"
    monkeypatch.setattr(config, "CONFIG_DIR", d)
    monkeypatch.setattr(config, "LAST_FILE", d / "last.txt")
    return d


def test_defaults_cover_all_sim_params(config_dir):
    cfg = config.load_config(env={})
    for key, value in default_params().items():
        assert cfg["sim"][key] == value
    assert cfg["sim"]["seed"] == -1
    assert cfg["sim"]["dissolve_interval_ms"] == 15000
    assert cfg["sim"]["dissolve_strength"] == 0.95
    assert cfg["sim"]["pointer_radius"] == 5
    assert cfg["hub"]["brand"] == "Chatooly"


def test_merge_keeps_defaults_and_drops_unknown_keys(tmp_path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"sim": {"feed": 0.04, "bogus": 1}, "window": {"fps": 30}, "extra": {}}))
    cfg = config.load_config(path, env={})
    assert cfg["sim"]["feed"] == 0.04
    assert cfg["sim"]["kill"] == 0.062
    assert "bogus" not in cfg["sim"]
    assert cfg["window"]["fps"] == 30
    assert cfg["window"]["width"] == 960
    assert "extra" not in cfg


def test_env_overrides_hub_section(config_dir):
    cfg = config.load_config(env={"HUB_TOOLS_DIR": "/srv/tools", "HUB_BASE_URL": "https://x.test"})
    assert cfg["hub"]["tools_dir"] == "/srv/tools"
    assert cfg["hub"]["base_url"] == "https://x.test"


def test_save_load_and_delete(config_dir):
    cfg = config._default_config()
    cfg["sim"]["pointer_radius"] = 3
    path = config.save_config(cfg, "My Setup!")
    assert path.name == "My_Setup.json"
    assert config.get_last_config() == "My_Setup"
    assert config.list_configs() == ["My_Setup"]
    assert config.load_config(env={})["sim"]["pointer_radius"] == 3

    config.delete_config("My Setup!")
    assert config.list_configs() == []
    assert config.get_last_config() is None
    assert config.load_config(env={})["sim"]["pointer_radius"] == 5


def test_cli_parser():
    args = main.build_parser().parse_args(["serve", "--port", "8080"])
    assert args.command == "serve"
    assert args.port == 8080
    assert main.build_parser().parse_args([]).command is None
