import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.settings import DEFAULT_SETTINGS, ConverterSettings, SettingsError, SettingsStore
from tailwind.config_reader import ConverterConfigReader, load_settings

def test_defaults():
    settings = ConverterSettings()
    assert settings.enable_size_optimization is True
    assert settings.enable_repeater_optimization is True
    assert settings.repeater_threshold == 3
    assert settings.enable_arbitrary_values is True
    assert settings.prefer_short_class_names is True

@pytest.mark.parametrize('threshold', [1, 0, -3])
def test_threshold_below_two_is_rejected(threshold):
    with pytest.raises(SettingsError):
        ConverterSettings(repeater_threshold=threshold)

def test_threshold_must_be_an_integer():
    with pytest.raises(SettingsError):
        ConverterSettings(repeater_threshold='3')
    with pytest.raises(SettingsError):
        ConverterSettings(repeater_threshold=True)

def test_boolean_fields_are_checked():
    with pytest.raises(SettingsError):
        ConverterSettings(enable_size_optimization='yes')

def test_settings_error_is_a_value_error():
    assert issubclass(SettingsError, ValueError)

def test_from_dict_accepts_camel_and_snake_case():
    settings = ConverterSettings.from_dict({'repeaterThreshold': 4, 'enable_arbitrary_values': False})
    assert settings.repeater_threshold == 4
    assert settings.enable_arbitrary_values is False

def test_unknown_key_is_rejected():
    with pytest.raises(SettingsError):
        ConverterSettings.from_dict({'enableMagic': True})

def test_to_camel_dict():
    data = DEFAULT_SETTINGS.to_camel_dict()
    assert data == {
        'enableSizeOptimization': True,
        'enableRepeaterOptimization': True,
        'repeaterThreshold': 3,
        'enableArbitraryValues': True,
        'preferShortClassNames': True,
    }

def test_store_update_and_reset():
    store = SettingsStore()
    assert store.get() == DEFAULT_SETTINGS
    store.update(repeater_threshold=5)
    store.update({'enableSizeOptimization': False})
    assert store.get().repeater_threshold == 5
    assert store.get().enable_size_optimization is False
    store.reset()
    assert store.get() == DEFAULT_SETTINGS

def test_store_rejects_invalid_update_and_keeps_value():
    store = SettingsStore()
    with pytest.raises(SettingsError):
        store.update(repeater_threshold=1)
    assert store.get().repeater_threshold == 3

def test_read_config_file(tmp_path):
    config = tmp_path / 'css2tw.json'
    config.write_text(json.dumps({'repeaterThreshold': 2, 'enableSizeOptimization': False}))
    data = ConverterConfigReader().read_config(config)
    assert data['repeaterThreshold'] == 2

def test_read_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConverterConfigReader().read_config(tmp_path / 'missing.json')

def test_read_config_invalid_json(tmp_path):
    config = tmp_path / 'bad.json'
    config.write_text('{not json')
    with pytest.raises(json.JSONDecodeError):
        ConverterConfigReader().read_config(config)

def test_read_config_requires_object(tmp_path):
    config = tmp_path / 'list.json'
    config.write_text('[1, 2]')
    with pytest.raises(SettingsError):
        ConverterConfigReader().read_config(config)

def test_read_env():
    environ = {
        'CSS2TW_SIZE_OPTIMIZATION': 'false',
        'CSS2TW_REPEATER_THRESHOLD': '6',
        'CSS2TW_SHORT_CLASS_NAMES': 'off',
        'UNRELATED': 'x',
    }
    data = ConverterConfigReader().read_env(environ)
    assert data == {
        'enable_size_optimization': False,
        'repeater_threshold': 6,
        'prefer_short_class_names': False,
    }

def test_read_env_rejects_bad_values():
    with pytest.raises(SettingsError):
        ConverterConfigReader().read_env({'CSS2TW_ARBITRARY_VALUES': 'maybe'})
    with pytest.raises(SettingsError):
        ConverterConfigReader().read_env({'CSS2TW_REPEATER_THRESHOLD': 'three'})

def test_load_settings_layers_env_over_file(tmp_path):
    config = tmp_path / 'css2tw.json'
    config.write_text(json.dumps({'repeaterThreshold': 4, 'enableArbitraryValues': False}))
    settings = load_settings(config, environ={'CSS2TW_REPEATER_THRESHOLD': '5'})
    assert settings.repeater_threshold == 5
    assert settings.enable_arbitrary_values is False
    assert settings.enable_size_optimization is True

def test_load_settings_uses_process_environment(monkeypatch):
    monkeypatch.setenv('CSS2TW_REPEATER_OPTIMIZATION', '0')
    assert load_settings().enable_repeater_optimization is False

def test_load_settings_defaults_without_sources():
    assert load_settings(environ={}) == DEFAULT_SETTINGS
