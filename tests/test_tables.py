"""
Tests for normalization tables loaded from JSON.
"""
import json

import pytest

from troubleshoot_kb.exceptions import ConfigurationError
from troubleshoot_kb.normalization import NormalizationTables, load_tables
from troubleshoot_kb.normalization.tables import (
    DEFAULT_CONTEXT_EXPANSIONS,
    DEFAULT_NORMALIZATION_RULES,
    DEFAULT_PHRASE_MAP,
)
from troubleshoot_kb.resolution import create_knowledge_resolver


class TestNormalizationTables:
    """Test NormalizationTables.from_dict."""

    def test_defaults(self):
        tables = NormalizationTables()

        assert tables.normalization_rules == DEFAULT_NORMALIZATION_RULES
        assert tables.context_expansions == DEFAULT_CONTEXT_EXPANSIONS
        assert tables.phrase_map == DEFAULT_PHRASE_MAP

    def test_missing_keys_keep_defaults(self):
        tables = NormalizationTables.from_dict({"phrase_map": [["vpn", "VPN Connection Fails"]]})

        assert tables.phrase_map == (("vpn", "VPN Connection Fails"),)
        assert tables.normalization_rules == DEFAULT_NORMALIZATION_RULES

    def test_preserves_order(self):
        tables = NormalizationTables.from_dict({
            "normalization_rules": [["foo", "bar"], ["bar", "baz"]],
            "context_expansions": [["vpn", ["tunnel", "remote"]]],
        })

        assert tables.normalization_rules == (("foo", "bar"), ("bar", "baz"))
        assert tables.context_expansions == (("vpn", ("tunnel", "remote")),)

    @pytest.mark.parametrize("data", [
        [],
        "rules",
        {"normalization_rules": [["only-pattern"]]},
        {"context_expansions": [1, 2]},
        {"phrase_map": 5},
    ])
    def test_malformed(self, data):
        with pytest.raises(ConfigurationError):
            NormalizationTables.from_dict(data)


class TestLoadTables:
    """Test load_tables."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({"phrase_map": [["locked out", "Forgot Password"]]}), encoding="utf-8")

        tables = load_tables(str(path))

        assert tables.phrase_map == (("locked out", "Forgot Password"),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot load"):
            load_tables(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_tables(str(path))

    def test_custom_phrase_map_drives_resolution(self, sample_entries):
        tables = NormalizationTables(phrase_map=(("locked out", "Forgot Password"),))
        resolver = create_knowledge_resolver(sample_entries, tables=tables)

        decision = resolver.resolve("locked out")

        assert decision.found
        assert decision.candidate.entry.error == "Forgot Password"
