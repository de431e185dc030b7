import pytest
from pydantic import ValidationError

from decidemodel.config.settings import DEFAULT_CONFIG, ModelConfig, load_config
from decidemodel.errors import ConfigError

def test_packaged_config_matches_defaults():
    assert load_config() == DEFAULT_CONFIG
    assert DEFAULT_CONFIG.weights == (1.0, 1.2, 1.5, 1.1, 1.0)
    assert DEFAULT_CONFIG.thresholds.yes_above == 8.0
    assert DEFAULT_CONFIG.thresholds.confused_above == 3.0

def test_partial_override_keeps_defaults(tmp_path):
    p = tmp_path / "model.yaml"
    p.write_text("thresholds:\n  yes_above: 9.5\n")
    cfg = load_config(p)
    assert cfg.thresholds.yes_above == 9.5
    assert cfg.thresholds.confused_above == 3.0
    assert cfg.weights == DEFAULT_CONFIG.weights

def test_empty_file_is_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == DEFAULT_CONFIG

def test_wrong_weight_count(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("weights: [1, 2, 3]\n")
    with pytest.raises(ConfigError):
        load_config(p)

def test_inverted_thresholds(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("thresholds:\n  yes_above: 2\n  confused_above: 4\n")
    with pytest.raises(ConfigError):
        load_config(p)

def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")

def test_non_mapping(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(p)

def test_config_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.weights = (0, 0, 0, 0, 0)
    assert isinstance(DEFAULT_CONFIG, ModelConfig)

def test_misspelled_keys_are_rejected(tmp_path):
    for body in ("weight: [1, 1, 1, 1, 1]\n", "thresholds:\n  yes_abov: 9\n", "neuron:\n  leak: 0.0\n"):
        p = tmp_path / "typo.yaml"
        p.write_text(body)
        with pytest.raises(ConfigError):
            load_config(p)
