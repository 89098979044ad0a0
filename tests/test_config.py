import logging

import pytest

from arma import config


def test_default_int_policy():
    assert config.get_int_policy() == config.INT_POLICY_STRICT


@pytest.mark.parametrize("raw,expected", [("lossy", "lossy"), (" LOSSY ", "lossy"), ("strict", "strict"), ("", "strict")])
def test_int_policy_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("ARMA_INT_POLICY", raw)
    assert config.get_int_policy() == expected


def test_unknown_int_policy_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("ARMA_INT_POLICY", "round")
    with caplog.at_level(logging.WARNING, logger="arma.config"):
        assert config.get_int_policy() == config.INT_POLICY_STRICT
    assert "ARMA_INT_POLICY" in caplog.text


def test_max_exact_int_is_double_mantissa():
    assert float(config.MAX_EXACT_INT) == config.MAX_EXACT_INT
    assert float(config.MAX_EXACT_INT + 1) != config.MAX_EXACT_INT + 1
