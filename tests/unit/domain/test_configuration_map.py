import pytest

from propconf.domain.models.configuration import ConfigurationEntry, ConfigurationMap


@pytest.fixture
def config_map():
    return ConfigurationMap([
        ConfigurationEntry("Data:Inventory:Provider", "MySql", 1),
        ConfigurationEntry("DefaultKey", "", 2),
    ])

def test_lookup_ignores_case(config_map):
    assert config_map["data:inventory:provider"] == "MySql"
    assert config_map["DATA:INVENTORY:PROVIDER"] == "MySql"
    assert "dAtA:InVeNtOrY:pRoViDeR" in config_map

def test_missing_key_raises_key_error(config_map):
    with pytest.raises(KeyError):
        config_map["Data:Inventory"]

def test_try_get(config_map):
    assert config_map.try_get("defaultkey") == (True, "")
    assert config_map.try_get("nope") == (False, None)

def test_non_string_keys_are_never_contained(config_map):
    assert 1 not in config_map

def test_iteration_keeps_original_casing(config_map):
    assert list(config_map) == ["Data:Inventory:Provider", "DefaultKey"]
    assert len(config_map) == 2

def test_later_entry_replaces_earlier_one_with_same_folded_key():
    config_map = ConfigurationMap([
        ConfigurationEntry("Key", "1", 1),
        ConfigurationEntry("Other", "x", 2),
        ConfigurationEntry("KEY", "2", 3),
    ])
    assert list(config_map) == ["KEY", "Other"]
    assert config_map.entries()[0].line_number == 3

def test_map_is_read_only(config_map):
    with pytest.raises(TypeError):
        config_map["New"] = "value"
    assert not hasattr(config_map, "update")

def test_entry_segments():
    assert ConfigurationEntry("A:B:C", "v").segments == ["A", "B", "C"]
