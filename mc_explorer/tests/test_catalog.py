"""Tests for catalog loading and the bundled catalog."""

import json
from pathlib import Path

import pytest

from mc_explorer.models.command import Category
from mc_explorer.models.exceptions import CatalogError, DuplicateKeyError, InvalidCategoryError
from mc_explorer.services.catalog import (
    DEFAULT_COMMANDS,
    default_catalog,
    load_catalog,
    parse_catalog,
)
from mc_explorer.services.fuzzy import search
from mc_explorer.services.index import build_index


class TestParseCatalog:
    """Tests for parse_catalog."""

    def test_parses_entries(self):
        """Entries become records in order."""
        records = parse_catalog([{"name": "tp"}, {"name": "time"}])
        assert [r.name for r in records] == ["tp", "time"]

    def test_duplicate_names(self):
        """Duplicate names are rejected."""
        with pytest.raises(DuplicateKeyError):
            parse_catalog([{"name": "tp"}, {"name": "tp"}])

    def test_non_object_entry(self):
        """Entries must be objects."""
        with pytest.raises(CatalogError):
            parse_catalog([{"name": "tp"}, "time"])

    def test_bad_category(self):
        """Unknown categories are rejected."""
        with pytest.raises(InvalidCategoryError):
            parse_catalog([{"name": "tp", "category": "Movement"}])


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_list_file(self, tmp_path: Path):
        """A JSON list of commands loads."""
        path = tmp_path / "commands.json"
        path.write_text(json.dumps([{"name": "tp", "category": "Player"}, {"name": "seed"}]))
        records = load_catalog(path)
        assert [r.name for r in records] == ["tp", "seed"]
        assert records[0].category is Category.PLAYER

    def test_object_file(self, tmp_path: Path):
        """An object with a commands list loads."""
        path = tmp_path / "commands.json"
        path.write_text(json.dumps({"version": 2, "commands": [{"name": "seed"}]}))
        assert [r.name for r in load_catalog(path)] == ["seed"]

    def test_missing_file(self, tmp_path: Path):
        """Unreadable files raise CatalogError."""
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        """Malformed JSON raises CatalogError with a suggestion."""
        path = tmp_path / "commands.json"
        path.write_text("[{")
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)
        assert exc_info.value.suggestion

    def test_not_utf8(self, tmp_path: Path):
        """Undecodable bytes raise CatalogError."""
        path = tmp_path / "commands.json"
        path.write_bytes(b'[{"name": "\xff"}]')
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_malformed_field(self, tmp_path: Path):
        """Wrongly typed entry fields raise CatalogError."""
        path = tmp_path / "commands.json"
        path.write_text(json.dumps([{"name": "x", "aliases": 3}]))
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_no_command_list(self, tmp_path: Path):
        """Objects without a commands list are rejected."""
        path = tmp_path / "commands.json"
        path.write_text(json.dumps({"name": "tp"}))
        with pytest.raises(CatalogError):
            load_catalog(path)


class TestDefaultCatalog:
    """Tests for the bundled catalog."""

    def test_loads(self):
        """Bundled catalog parses with unique names."""
        records = default_catalog()
        assert len(records) == len(DEFAULT_COMMANDS)
        assert len({r.name for r in records}) == len(records)

    def test_every_category_used(self):
        """Each category has at least one command."""
        used = {r.category for r in default_catalog()}
        assert set(Category) <= used

    def test_has_admin_only_commands(self):
        """Some commands are hidden by the safety filter."""
        assert any(r.admin_only for r in default_catalog())

    def test_no_leading_slashes(self):
        """Syntax and examples are stored without slashes."""
        for record in default_catalog():
            assert not record.syntax.startswith("/")
            assert not any(e.startswith("/") for e in record.examples)

    def test_tp_finds_teleport(self):
        """The alias query ranks teleport first."""
        hits = search(build_index(default_catalog()), "tp")
        assert hits[0].record.name == "teleport"

    def test_wether_finds_weather(self):
        """A misspelled query finds weather."""
        hits = search(build_index(default_catalog()), "wether")
        assert "weather" in [h.record.name for h in hits]

    def test_exact_names_rank_first(self):
        """Every bundled command ranks first for its own name."""
        index = build_index(default_catalog())
        for record in index.records:
            assert search(index, record.name)[0].record.name == record.name
