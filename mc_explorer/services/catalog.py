"""Command catalog: bundled Minecraft commands and JSON loading.

The catalog is loaded once at startup and never mutated. Entries use the
same shape as the JSON catalog files accepted by load_catalog().
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.command import CommandRecord
from ..models.exceptions import CatalogError
from .index import check_unique_names

logger = logging.getLogger(__name__)


def parse_catalog(entries: Iterable[dict[str, Any]]) -> tuple[CommandRecord, ...]:
    """Build records from catalog entries.

    Raises:
        CatalogError: If an entry is malformed
        DuplicateKeyError: If two entries share a name
        InvalidCategoryError: If an entry has an unknown category
    """
    records = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog entry must be an object, got {entry!r}")
        records.append(CommandRecord.from_dict(entry))
    check_unique_names(records)
    return tuple(records)


def load_catalog(path: Path) -> tuple[CommandRecord, ...]:
    """Load a catalog from a JSON file.

    The file holds either a list of command objects or an object with a
    ``commands`` list.

    Raises:
        CatalogError: If the file cannot be read or parsed
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogError(
            f"Catalog {path} is not valid UTF-8 JSON: {e}",
            suggestion="check the file with a JSON validator",
        ) from e

    if isinstance(data, dict):
        data = data.get("commands")
    if not isinstance(data, list):
        raise CatalogError(
            f"Catalog {path} has no command list",
            suggestion="use a JSON list or an object with a 'commands' list",
        )

    records = parse_catalog(data)
    logger.info(f"Loaded {len(records)} commands from {path}")
    return records


def default_catalog() -> tuple[CommandRecord, ...]:
    """Bundled Minecraft commands catalog."""
    return parse_catalog(DEFAULT_COMMANDS)


DEFAULT_COMMANDS: list[dict[str, Any]] = [
    # Player
    {
        "name": "gamemode",
        "aliases": ["gm"],
        "description": "Change a player's game mode to survival, creative, adventure or spectator.",
        "syntax": "gamemode <mode> [player]",
        "examples": ["gamemode creative", "gamemode survival @a"],
        "tags": ["mode", "creative", "survival", "player"],
        "category": "Player",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "teleport",
        "aliases": ["tp"],
        "description": "Move players or entities to a location or to another entity.",
        "syntax": "teleport <targets> <location>",
        "examples": ["tp @s ~ ~10 ~", "teleport Steve Alex"],
        "tags": ["move", "travel", "position", "warp"],
        "category": "Player",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "effect",
        "description": "Give or clear status effects such as speed, night vision or regeneration.",
        "syntax": "effect give <targets> <effect> [seconds] [amplifier]",
        "examples": ["effect give @s minecraft:night_vision 600", "effect clear @a"],
        "tags": ["potion", "buff", "status"],
        "category": "Player",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "xp",
        "aliases": ["experience"],
        "description": "Add, set or query experience points and levels.",
        "syntax": "xp add <targets> <amount> [levels|points]",
        "examples": ["xp add @s 30 levels", "experience query @s points"],
        "tags": ["experience", "levels", "enchanting"],
        "category": "Player",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "spawnpoint",
        "description": "Set the spawn point for a player.",
        "syntax": "spawnpoint [targets] [pos]",
        "examples": ["spawnpoint @s", "spawnpoint Steve 100 64 -200"],
        "tags": ["respawn", "bed", "home"],
        "category": "Player",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "clear",
        "description": "Remove items from a player's inventory.",
        "syntax": "clear [targets] [item] [maxCount]",
        "examples": ["clear @s", "clear @s minecraft:dirt 64"],
        "tags": ["inventory", "remove", "items"],
        "category": "Player",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "enchant",
        "description": "Add an enchantment to the item a player is holding.",
        "syntax": "enchant <targets> <enchantment> [level]",
        "examples": ["enchant @s minecraft:sharpness 5"],
        "tags": ["enchanting", "weapon", "tool"],
        "category": "Player",
        "permission": "Cheats enabled / operator",
    },
    # World
    {
        "name": "time",
        "description": "Change or query the world's game time.",
        "syntax": "time set <day|night|noon|midnight|value>",
        "examples": ["time set day", "time add 1000", "time query daytime"],
        "tags": ["day", "night", "clock"],
        "category": "World",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "weather",
        "description": "Set the weather to clear, rain or thunder.",
        "syntax": "weather <clear|rain|thunder> [duration]",
        "examples": ["weather clear", "weather rain 600"],
        "tags": ["rain", "storm", "sky"],
        "category": "World",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "difficulty",
        "description": "Set the difficulty level: peaceful, easy, normal or hard.",
        "syntax": "difficulty <peaceful|easy|normal|hard>",
        "examples": ["difficulty peaceful", "difficulty hard"],
        "tags": ["mobs", "challenge"],
        "category": "World",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "gamerule",
        "description": "Change world rules such as keepInventory or doDaylightCycle.",
        "syntax": "gamerule <rule> [value]",
        "examples": ["gamerule keepInventory true", "gamerule doDaylightCycle false"],
        "tags": ["rules", "settings", "keepinventory"],
        "category": "World",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "locate",
        "description": "Find the nearest structure, biome or point of interest.",
        "syntax": "locate <structure|biome|poi> <name>",
        "examples": ["locate structure minecraft:village_plains", "locate biome minecraft:cherry_grove"],
        "tags": ["find", "village", "biome", "structure"],
        "category": "World",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "setworldspawn",
        "description": "Set the world spawn point for new players.",
        "syntax": "setworldspawn [pos]",
        "examples": ["setworldspawn", "setworldspawn 0 64 0"],
        "tags": ["spawn", "world"],
        "category": "World",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "worldborder",
        "description": "Control the size and center of the world border.",
        "syntax": "worldborder set <distance> [time]",
        "examples": ["worldborder set 1000", "worldborder center 0 0"],
        "tags": ["border", "limit", "size"],
        "category": "World",
        "permission": "Server operator",
        "adminOnly": True,
    },
    # Server/Admin
    {
        "name": "op",
        "description": "Grant operator status to a player.",
        "syntax": "op <player>",
        "examples": ["op Steve"],
        "tags": ["operator", "permissions", "admin"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    {
        "name": "deop",
        "description": "Revoke operator status from a player.",
        "syntax": "deop <player>",
        "examples": ["deop Steve"],
        "tags": ["operator", "permissions", "admin"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    {
        "name": "kick",
        "description": "Disconnect a player from the server.",
        "syntax": "kick <player> [reason]",
        "examples": ["kick Steve Please take a break"],
        "tags": ["moderation", "remove", "admin"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    {
        "name": "ban",
        "description": "Ban a player from the server.",
        "syntax": "ban <player> [reason]",
        "examples": ["ban Griefer123 Griefing"],
        "tags": ["moderation", "block", "admin"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    {
        "name": "pardon",
        "description": "Remove a player from the ban list.",
        "syntax": "pardon <player>",
        "examples": ["pardon Griefer123"],
        "tags": ["moderation", "unban", "admin"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    {
        "name": "whitelist",
        "description": "Manage which players may join the server.",
        "syntax": "whitelist <add|remove|on|off|list> [player]",
        "examples": ["whitelist add Steve", "whitelist on"],
        "tags": ["allowlist", "access", "admin"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    {
        "name": "stop",
        "description": "Stop the server after saving the world.",
        "syntax": "stop",
        "examples": ["stop"],
        "tags": ["shutdown", "server", "admin"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    {
        "name": "save-all",
        "description": "Save the world to disk immediately.",
        "syntax": "save-all [flush]",
        "examples": ["save-all", "save-all flush"],
        "tags": ["save", "backup", "server"],
        "category": "Server/Admin",
        "permission": "Server operator",
        "adminOnly": True,
    },
    # Communication
    {
        "name": "say",
        "description": "Broadcast a message to every player.",
        "syntax": "say <message>",
        "examples": ["say Dinner time!"],
        "tags": ["chat", "broadcast", "message"],
        "category": "Communication",
    },
    {
        "name": "msg",
        "aliases": ["tell", "w"],
        "description": "Send a private message to a player.",
        "syntax": "msg <targets> <message>",
        "examples": ["msg Alex meet me at the base", "tell @p hi"],
        "tags": ["chat", "whisper", "private"],
        "category": "Communication",
    },
    {
        "name": "me",
        "description": "Show an action message in chat, like '* Steve waves'.",
        "syntax": "me <action>",
        "examples": ["me waves hello"],
        "tags": ["chat", "emote", "roleplay"],
        "category": "Communication",
    },
    {
        "name": "title",
        "description": "Show a big title or subtitle on players' screens.",
        "syntax": "title <targets> title <text>",
        "examples": ['title @a title {"text":"Welcome!"}'],
        "tags": ["screen", "announce", "text"],
        "category": "Communication",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "tellraw",
        "description": "Send a formatted JSON text message to players.",
        "syntax": "tellraw <targets> <json>",
        "examples": ['tellraw @a {"text":"Hello","color":"gold"}'],
        "tags": ["chat", "json", "formatted"],
        "category": "Communication",
        "permission": "Cheats enabled / operator",
    },
    # Entities
    {
        "name": "summon",
        "description": "Spawn an entity such as a mob, boat or lightning bolt.",
        "syntax": "summon <entity> [pos] [nbt]",
        "examples": ["summon minecraft:cat", "summon minecraft:lightning_bolt ~ ~ ~"],
        "tags": ["spawn", "mob", "create"],
        "category": "Entities",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "kill",
        "description": "Remove entities or defeat players.",
        "syntax": "kill [targets]",
        "examples": ["kill @e[type=minecraft:zombie]", "kill @s"],
        "tags": ["remove", "mobs", "despawn"],
        "category": "Entities",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "ride",
        "description": "Make an entity ride or dismount another entity.",
        "syntax": "ride <target> mount <vehicle>",
        "examples": ["ride @s mount @e[type=minecraft:horse,limit=1,sort=nearest]"],
        "tags": ["mount", "horse", "vehicle"],
        "category": "Entities",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "tag",
        "description": "Add, remove or list scoreboard tags on entities.",
        "syntax": "tag <targets> <add|remove|list> [name]",
        "examples": ["tag @s add builder", "tag @e list"],
        "tags": ["label", "selector", "entity"],
        "category": "Entities",
        "permission": "Cheats enabled / operator",
    },
    # Items/Blocks
    {
        "name": "give",
        "description": "Give items to players.",
        "syntax": "give <targets> <item> [count]",
        "examples": ["give @s minecraft:diamond 64", "give @a minecraft:cake"],
        "tags": ["items", "inventory", "loot"],
        "category": "Items/Blocks",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "setblock",
        "description": "Place a single block at a position.",
        "syntax": "setblock <pos> <block> [destroy|keep|replace]",
        "examples": ["setblock ~ ~1 ~ minecraft:torch"],
        "tags": ["build", "place", "block"],
        "category": "Items/Blocks",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "fill",
        "description": "Fill a region with a block.",
        "syntax": "fill <from> <to> <block> [mode]",
        "examples": ["fill ~ ~ ~ ~10 ~5 ~10 minecraft:glass hollow"],
        "tags": ["build", "area", "region"],
        "category": "Items/Blocks",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "clone",
        "description": "Copy blocks from one region to another.",
        "syntax": "clone <begin> <end> <destination>",
        "examples": ["clone 0 64 0 10 70 10 100 64 100"],
        "tags": ["copy", "build", "region"],
        "category": "Items/Blocks",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "item",
        "description": "Replace or modify items in inventories and containers.",
        "syntax": "item replace entity <targets> <slot> with <item>",
        "examples": ["item replace entity @s armor.head with minecraft:carved_pumpkin"],
        "tags": ["inventory", "slot", "armor"],
        "category": "Items/Blocks",
        "permission": "Cheats enabled / operator",
    },
    # Scoreboard/Data
    {
        "name": "scoreboard",
        "description": "Create and manage objectives and player scores.",
        "syntax": "scoreboard objectives add <objective> <criteria>",
        "examples": ["scoreboard objectives add kills playerKillCount", "scoreboard players set Steve kills 0"],
        "tags": ["score", "objectives", "points"],
        "category": "Scoreboard/Data",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "data",
        "description": "Read or change NBT data of blocks, entities and storage.",
        "syntax": "data get entity <target> [path]",
        "examples": ["data get entity @s Health", "data merge entity @e[limit=1] {NoAI:1b}"],
        "tags": ["nbt", "storage", "advanced"],
        "category": "Scoreboard/Data",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "bossbar",
        "description": "Create and control custom boss bars.",
        "syntax": "bossbar add <id> <name>",
        "examples": ['bossbar add quest "Find the treasure"'],
        "tags": ["ui", "progress", "bar"],
        "category": "Scoreboard/Data",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "trigger",
        "description": "Change a trigger objective; usable without cheats.",
        "syntax": "trigger <objective> [add|set] [value]",
        "examples": ["trigger vote set 1"],
        "tags": ["score", "vote", "map"],
        "category": "Scoreboard/Data",
    },
    # Utility
    {
        "name": "help",
        "aliases": ["?"],
        "description": "List commands or show usage for one command.",
        "syntax": "help [command]",
        "examples": ["help", "help give"],
        "tags": ["usage", "info"],
        "category": "Utility",
    },
    {
        "name": "seed",
        "description": "Show the world seed.",
        "syntax": "seed",
        "examples": ["seed"],
        "tags": ["world", "info", "generation"],
        "category": "Utility",
    },
    {
        "name": "list",
        "description": "Show the players currently online.",
        "syntax": "list [uuids]",
        "examples": ["list"],
        "tags": ["players", "online", "who"],
        "category": "Utility",
    },
    {
        "name": "function",
        "description": "Run a function from a datapack.",
        "syntax": "function <name>",
        "examples": ["function mypack:start"],
        "tags": ["datapack", "script", "automation"],
        "category": "Utility",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "execute",
        "description": "Run another command as or at entities, with conditions.",
        "syntax": "execute as <targets> run <command>",
        "examples": ["execute as @a at @s run summon minecraft:firework_rocket"],
        "tags": ["advanced", "conditions", "selector"],
        "category": "Utility",
        "permission": "Cheats enabled / operator",
    },
    {
        "name": "reload",
        "description": "Reload datapacks and functions without restarting.",
        "syntax": "reload",
        "examples": ["reload"],
        "tags": ["datapack", "refresh"],
        "permission": "Server operator",
        "adminOnly": True,
    },
]
