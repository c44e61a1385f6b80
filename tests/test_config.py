"""
Tests for environment configuration and id generators.
"""

import logging

import pytest

from recipe_catalog.config import DEFAULT_PREVIEW_LIMIT, CatalogConfig, configure_logging
from recipe_catalog.ids import CounterIdGenerator, get_id_generator, uuid_id_generator


class TestCatalogConfig:
    """Test cases for CatalogConfig getters."""

    def test_defaults(self, monkeypatch):
        for var in (
            "CATALOG_ID_STRATEGY",
            "CATALOG_PREVIEW_LIMIT",
            "CATALOG_CURRENCY_SYMBOL",
            "CATALOG_LOG_LEVEL",
        ):
            monkeypatch.delenv(var, raising=False)

        assert CatalogConfig.get_id_strategy() == "uuid"
        assert CatalogConfig.get_preview_limit() == DEFAULT_PREVIEW_LIMIT == 6
        assert CatalogConfig.get_currency_symbol() == "R"
        assert CatalogConfig.get_log_level() == logging.INFO

    def test_id_strategy_is_normalized(self, monkeypatch):
        monkeypatch.setenv("CATALOG_ID_STRATEGY", " Counter ")
        assert CatalogConfig.get_id_strategy() == "counter"

    def test_unknown_id_strategy(self, monkeypatch):
        monkeypatch.setenv("CATALOG_ID_STRATEGY", "clock")
        with pytest.raises(RuntimeError, match="CATALOG_ID_STRATEGY"):
            CatalogConfig.get_id_strategy()

    @pytest.mark.parametrize("raw", ["six", "-1", "2.5"])
    def test_invalid_preview_limit(self, monkeypatch, raw):
        monkeypatch.setenv("CATALOG_PREVIEW_LIMIT", raw)
        with pytest.raises(RuntimeError, match="CATALOG_PREVIEW_LIMIT"):
            CatalogConfig.get_preview_limit()

    def test_blank_preview_limit_uses_default(self, monkeypatch):
        monkeypatch.setenv("CATALOG_PREVIEW_LIMIT", "")
        assert CatalogConfig.get_preview_limit() == 6

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")
        assert CatalogConfig.get_log_level() == logging.DEBUG

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "LOUD")
        with pytest.raises(RuntimeError, match="CATALOG_LOG_LEVEL"):
            CatalogConfig.get_log_level()

    def test_configure_logging_rejects_bad_level(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "LOUD")
        with pytest.raises(RuntimeError):
            configure_logging()


class TestIdGenerators:
    """Test cases for id generators."""

    def test_counter_sequence(self):
        generate = CounterIdGenerator()
        assert [generate() for _ in range(3)] == ["recipe-1", "recipe-2", "recipe-3"]

    def test_counter_start_and_prefix(self):
        generate = CounterIdGenerator(start=10, prefix="dish-")
        assert generate() == "dish-10"

    def test_uuid_ids_are_hex(self):
        recipe_id = uuid_id_generator()
        assert len(recipe_id) == 32
        int(recipe_id, 16)

    @pytest.mark.parametrize("strategy", ["uuid", "UUID"])
    def test_get_uuid_generator(self, strategy):
        assert get_id_generator(strategy) is uuid_id_generator

    def test_get_counter_generator(self):
        generate = get_id_generator("counter")
        assert isinstance(generate, CounterIdGenerator)
        assert generate() == "recipe-1"

    def test_get_unknown_generator(self):
        with pytest.raises(ValueError, match="Unknown id strategy"):
            get_id_generator("timestamp")
