"""Shared test fixtures for the commands explorer."""

import pytest
from pathlib import Path

from mc_explorer.models.command import Category, CommandRecord
from mc_explorer.services.config import ConfigManager
from mc_explorer.services.index import SearchIndex, build_index
from mc_explorer.services.query import QueryOrchestrator


@pytest.fixture
def catalog() -> list[CommandRecord]:
    """Small catalog covering aliases, admin-only and uncategorized commands."""
    return [
        CommandRecord(
            name="teleport",
            aliases=("tp",),
            description="Move players or entities to a location.",
            syntax="teleport <targets> <location>",
            examples=("teleport @s ~ ~10 ~",),
            tags=("move", "travel"),
            category=Category.PLAYER,
            permission="Cheats enabled / operator",
        ),
        CommandRecord(
            name="time",
            description="Change or query the world's game time.",
            syntax="time set <day|night>",
            examples=("time set day",),
            tags=("day", "night", "clock"),
            category=Category.WORLD,
        ),
        CommandRecord(
            name="weather",
            description="Set the weather to clear, rain or thunder.",
            syntax="weather <clear|rain|thunder>",
            examples=("weather clear",),
            tags=("rain", "storm"),
            category=Category.WORLD,
        ),
        CommandRecord(
            name="op",
            description="Grant operator status to a player.",
            syntax="op <player>",
            examples=("op Steve",),
            tags=("operator", "admin"),
            category=Category.SERVER_ADMIN,
            permission="Server operator",
            admin_only=True,
        ),
        CommandRecord(
            name="deop",
            description="Revoke operator status from a player.",
            syntax="deop <player>",
            tags=("operator", "admin"),
            category=Category.SERVER_ADMIN,
            admin_only=True,
        ),
        CommandRecord(
            name="say",
            description="Broadcast a message to every player.",
            syntax="say <message>",
            tags=("chat", "broadcast"),
            category=Category.COMMUNICATION,
        ),
        CommandRecord(
            name="give",
            description="Give items to players.",
            syntax="give <targets> <item> [count]",
            examples=("give @s minecraft:diamond 64",),
            tags=("items", "inventory"),
            category=Category.ITEMS_BLOCKS,
        ),
        CommandRecord(
            name="reload",
            description="Reload datapacks and functions.",
            syntax="reload",
            tags=("datapack",),
        ),
    ]


@pytest.fixture
def index(catalog: list[CommandRecord]) -> SearchIndex:
    """Search index over the test catalog."""
    return build_index(catalog)


@pytest.fixture
def orchestrator(catalog: list[CommandRecord]) -> QueryOrchestrator:
    """Orchestrator with default state (admin-only commands hidden)."""
    return QueryOrchestrator(catalog)


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir)
