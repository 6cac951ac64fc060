"""配置测试"""
import pytest

from config import config


class TestConfig:

    def test_default_config_is_valid(self):
        assert config.validate_config()

    def test_precedence_table(self):
        precedence = config.OPERATOR_CONFIG["precedence"]
        assert precedence["+"] == precedence["-"] == 1
        assert precedence["×"] == precedence["÷"] == 2

    def test_missing_precedence_fails(self, monkeypatch):
        monkeypatch.setitem(config.OPERATOR_CONFIG, "precedence", {"+": 1})
        with pytest.raises(AssertionError):
            config.validate_config()

    def test_overlapping_characters_fail(self, monkeypatch):
        monkeypatch.setitem(config.NUMBER_CONFIG, "decimal_point", "+")
        with pytest.raises(AssertionError):
            config.validate_config()
