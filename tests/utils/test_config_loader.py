import tempfile
from pathlib import Path

import pytest
import yaml

from lifegrid.core.exceptions import ConfigurationError
from lifegrid.interfaces.grid import BoundaryPolicy
from lifegrid.utils import config_loader
from lifegrid.utils.config_loader import (
    GridConfig,
    PatternPlacement,
    SessionConfig,
    SimulationConfig,
    _get_config_path,
    _load_yaml_file,
    clear_config_cache,
    get_config,
    load_config,
    parse_config,
)


class TestDataclasses:
    def test_defaults(self):
        cfg = SessionConfig()
        assert cfg.grid == GridConfig(48, 27, BoundaryPolicy.CLAMPED)
        assert cfg.simulation.tick_interval_seconds == pytest.approx(0.1)
        assert cfg.seed == ()

    def test_immutable(self):
        cfg = GridConfig()
        with pytest.raises(AttributeError):
            cfg.width = 3


class TestGetConfigPath:
    def test_default(self):
        path = _get_config_path()
        assert path.endswith("config.yaml")
        assert Path(path).exists()

    def test_custom(self):
        assert _get_config_path("/path/to/custom.yaml") == "/path/to/custom.yaml"


class TestLoadYamlFile:
    def test_load_valid_yaml(self, temp_yaml_file):
        content = {"grid": {"width": 3}}
        temp_yaml_file.write_text(yaml.dump(content), encoding="utf-8")
        assert _load_yaml_file(temp_yaml_file) == content

    def test_load_invalid_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("{ invalid: yaml: content", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_empty_file_is_empty_mapping(self, temp_yaml_file):
        temp_yaml_file.write_text("", encoding="utf-8")
        assert _load_yaml_file(temp_yaml_file) == {}

    def test_non_mapping_root(self, temp_yaml_file):
        temp_yaml_file.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_missing_file(self):
        with pytest.raises(ConfigurationError):
            _load_yaml_file(Path(tempfile.gettempdir()) / "lifegrid-missing.yaml")


class TestParseConfig:
    def test_full(self, valid_session_config_dict):
        cfg = parse_config(valid_session_config_dict)
        assert cfg.grid == GridConfig(12, 10, BoundaryPolicy.TOROIDAL)
        assert cfg.simulation == SimulationConfig(0.25)
        assert cfg.seed == (
            PatternPlacement("glider", 1, 1),
            PatternPlacement("block", 8, 6),
        )

    def test_empty_uses_defaults(self):
        assert parse_config({}) == SessionConfig()

    def test_integer_interval_becomes_float(self):
        cfg = parse_config({"simulation": {"tick_interval_seconds": 1}})
        assert cfg.simulation.tick_interval_seconds == 1.0
        assert isinstance(cfg.simulation.tick_interval_seconds, float)

    @pytest.mark.parametrize(
        "grid,key",
        [
            ({"width": 0}, "grid.width"),
            ({"height": -3}, "grid.height"),
            ({"width": "wide"}, "grid.width"),
            ({"width": True}, "grid.width"),
            ({"boundary": "mobius"}, "grid.boundary"),
        ],
    )
    def test_invalid_grid(self, grid, key):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config({"grid": grid})
        assert exc_info.value.config_key == key

    @pytest.mark.parametrize("interval", [-1, "slow", None, False])
    def test_invalid_interval(self, interval):
        with pytest.raises(ConfigurationError):
            parse_config({"simulation": {"tick_interval_seconds": interval}})

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            parse_config({"grid": [1, 2]})

    def test_seed_must_be_list(self):
        with pytest.raises(ConfigurationError):
            parse_config({"seed": {"pattern": "block"}})

    @pytest.mark.parametrize(
        "entry",
        [
            "block",
            {"x": 1, "y": 1},
            {"pattern": "block", "x": 1},
            {"pattern": "block", "x": 1.5, "y": 1},
            {"pattern": "unknown", "x": 1, "y": 1},
        ],
    )
    def test_invalid_seed_entry(self, entry):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config({"seed": [entry]})
        assert exc_info.value.config_key == "seed[0]"

    def test_seed_must_fit_grid(self):
        raw = {
            "grid": {"width": 4, "height": 4},
            "seed": [{"pattern": "glider", "x": 2, "y": 2}],
        }
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config(raw)
        assert "glider" in str(exc_info.value)


class TestLoadConfig:
    def test_load_custom_file(self, temp_config_yaml_file):
        cfg = load_config(str(temp_config_yaml_file))
        assert cfg.grid.width == 12
        assert len(cfg.seed) == 2

    def test_bundled_defaults(self):
        cfg = load_config()
        assert cfg == SessionConfig()

    def test_get_config_caches(self, monkeypatch):
        clear_config_cache()
        calls = []
        real_load = config_loader.load_config

        def counting_load(path=None):
            calls.append(path)
            return real_load(path)

        monkeypatch.setattr(config_loader, "load_config", counting_load)
        first = get_config()
        second = get_config()

        assert first is second
        assert len(calls) == 1

        clear_config_cache()
        get_config()
        assert len(calls) == 2
        clear_config_cache()
