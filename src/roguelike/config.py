from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from .dungeon.generator import DEFAULT_LAYOUT, CarveOp, HTunnel, Room, VTunnel
from .dungeon.map import Rect
from .entities import Role
from .exceptions import ConfigError
from .input.actions import InputAction
from .rendering import colors
from .rendering.colors import Color

logger = logging.getLogger(__name__)

SETTINGS_FILE_ENV = "RL_SETTINGS_FILE"


@dataclass(frozen=True)
class DisplayConfig:
    """Window and presentation settings. Sizes are in character cells."""

    screen_width: int = 80
    screen_height: int = 50
    limit_fps: int = 20
    title: str = "Roguelike"
    # TTF/OTF file loaded at startup; None uses an installed system font.
    font_path: Optional[str] = None
    font_name: str = "Courier New"
    cell_px: int = 15


@dataclass(frozen=True)
class MapConfig:
    width: int = 80
    height: int = 45
    layout: Tuple[CarveOp, ...] = DEFAULT_LAYOUT


@dataclass(frozen=True)
class ColorConfig:
    dark_wall: Color = colors.DARK_WALL
    dark_ground: Color = colors.DARK_GROUND


@dataclass(frozen=True)
class SpawnConfig:
    name: str
    x: int
    y: int
    glyph: str = "@"
    color: Color = colors.WHITE
    role: Role = Role.NPC


DEFAULT_SPAWNS: Tuple[SpawnConfig, ...] = (
    SpawnConfig(name="player", x=25, y=23, glyph="@", color=colors.WHITE, role=Role.PLAYER),
    SpawnConfig(name="npc", x=25, y=25, glyph="@", color=colors.YELLOW, role=Role.NPC),
)


@dataclass(frozen=True)
class Settings:
    """Everything the game needs at startup, built once and passed around.

    Sources, lowest to highest precedence:
    - dataclass defaults
    - a YAML file (``--config`` or the RL_SETTINGS_FILE env var)
    - RL_* environment variables for the scalar display/map fields
    """

    display: DisplayConfig = field(default_factory=DisplayConfig)
    map: MapConfig = field(default_factory=MapConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    spawns: Tuple[SpawnConfig, ...] = DEFAULT_SPAWNS
    # Extra key bindings, action name -> key names, on top of the defaults.
    keys: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    source: Optional[Path] = None

    # ------------------------ Validation ------------------------
    def validate(self) -> "Settings":
        d, m = self.display, self.map
        for label, value in (
            ("display.screen_width", d.screen_width),
            ("display.screen_height", d.screen_height),
            ("display.limit_fps", d.limit_fps),
            ("display.cell_px", d.cell_px),
            ("map.width", m.width),
            ("map.height", m.height),
        ):
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{label} must be a positive integer, got {value!r}")
        if m.width > d.screen_width or m.height > d.screen_height:
            raise ConfigError(
                f"Map {m.width}x{m.height} does not fit on screen {d.screen_width}x{d.screen_height}"
            )
        if sum(1 for s in self.spawns if s.role is Role.PLAYER) != 1:
            raise ConfigError("Exactly one spawn must have the player role")
        known = {a.name.lower() for a in InputAction}
        unknown = sorted(a for a in self.keys if a.lower() not in known)
        if unknown:
            raise ConfigError(f"Unknown actions in keys: {', '.join(unknown)}")
        return self

    # ------------------------ Loading ------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: Optional[Path] = None) -> "Settings":
        if not isinstance(data, Mapping):
            raise ConfigError(f"Settings must be a mapping, got {type(data).__name__}")
        display = _build(DisplayConfig, _section(data, "display"), "display")
        map_data = _section(data, "map")
        layout = DEFAULT_LAYOUT
        if "layout" in map_data:
            entries = _as_list(map_data.pop("layout") or [], "map.layout")
            layout = tuple(_parse_carve_op(entry) for entry in entries)
        map_cfg = _build(MapConfig, map_data, "map")
        map_cfg = MapConfig(width=map_cfg.width, height=map_cfg.height, layout=layout)
        color_data = {k: _parse_color(v, f"colors.{k}") for k, v in _section(data, "colors").items()}
        color_cfg = _build(ColorConfig, color_data, "colors")
        spawns = DEFAULT_SPAWNS
        if "spawns" in data:
            spawns = tuple(_parse_spawn(entry) for entry in _as_list(data["spawns"] or [], "spawns"))
        keys = {
            str(action): tuple(str(k) for k in _as_list(names, f"keys.{action}"))
            for action, names in _section(data, "keys").items()
        }
        settings = cls(
            display=display, map=map_cfg, colors=color_cfg, spawns=spawns, keys=keys, source=source
        )
        return settings.validate()

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except OSError as exc:
            raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Dict[str, Any]]:
        env = os.environ if env is None else env
        mapping = {
            "RL_SCREEN_WIDTH": ("display", "screen_width", int),
            "RL_SCREEN_HEIGHT": ("display", "screen_height", int),
            "RL_LIMIT_FPS": ("display", "limit_fps", int),
            "RL_TITLE": ("display", "title", str),
            "RL_FONT_PATH": ("display", "font_path", str),
            "RL_MAP_WIDTH": ("map", "width", int),
            "RL_MAP_HEIGHT": ("map", "height", int),
        }
        out: Dict[str, Dict[str, Any]] = {}
        for env_key, (section, name, caster) in mapping.items():
            raw = env.get(env_key, "")
            if raw == "":
                continue
            try:
                out.setdefault(section, {})[name] = caster(raw)
            except ValueError as exc:
                raise ConfigError(f"Invalid value for {env_key}={raw!r}: {exc}") from exc
        return out

    @classmethod
    def load(
        cls,
        path: Optional[Path | str] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        env = os.environ if env is None else env
        chosen: Optional[Path] = None
        if path is not None:
            chosen = Path(path).expanduser()
        elif env.get(SETTINGS_FILE_ENV):
            chosen = Path(env[SETTINGS_FILE_ENV]).expanduser()

        data: Dict[str, Any] = {}
        if chosen is not None:
            if not chosen.exists():
                raise ConfigError(f"Settings file not found: {chosen}")
            data = cls._load_yaml(chosen)
            if not isinstance(data, dict):
                raise ConfigError(f"Settings file {chosen} must contain a mapping")
            logger.info("Loaded settings from %s", chosen)

        data = _deep_merge(data, cls.from_env(env))
        settings = cls.from_dict(data, source=chosen)
        logger.debug("Settings resolved: %s", settings)
        return settings


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for k, v in overlay.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            merged[k] = _deep_merge(base[k], v)
        else:
            merged[k] = v
    return merged


def _section(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"Section '{name}' must be a mapping")
    return dict(value)


def _build(cls: type, data: Any, section: str) -> Any:
    if not isinstance(data, Mapping):
        raise ConfigError(f"Section '{section}' must be a mapping")
    try:
        return cls(**data)
    except TypeError as exc:
        raise ConfigError(f"Invalid keys in section '{section}': {exc}") from exc


def _as_list(value: Any, label: str) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, (str, int)):
        return [value]
    raise ConfigError(f"{label} must be a list, got {value!r}")


def _parse_color(value: Any, label: str) -> Color:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 3
        or not all(isinstance(c, int) and 0 <= c <= 255 for c in value)
    ):
        raise ConfigError(f"{label} must be three integers in 0..255, got {value!r}")
    return (value[0], value[1], value[2])


def _ints(value: Any, count: int, label: str) -> List[int]:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != count
        or not all(isinstance(v, int) for v in value)
    ):
        raise ConfigError(f"{label} needs {count} integers, got {value!r}")
    return list(value)


def _parse_carve_op(entry: Any) -> CarveOp:
    """Parse one layout entry such as ``{room: [x, y, w, h]}``.

    Supported keys: ``room`` [x, y, w, h], ``h_tunnel`` [x1, x2, y],
    ``v_tunnel`` [y1, y2, x].
    """
    if not isinstance(entry, Mapping) or len(entry) != 1:
        raise ConfigError(f"Layout entry must be a single-key mapping, got {entry!r}")
    (kind, args), = entry.items()
    if kind == "room":
        x, y, w, h = _ints(args, 4, "room")
        try:
            return Room(Rect(x, y, w, h))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
    if kind == "h_tunnel":
        return HTunnel(*_ints(args, 3, "h_tunnel"))
    if kind == "v_tunnel":
        return VTunnel(*_ints(args, 3, "v_tunnel"))
    raise ConfigError(f"Unknown layout op: {kind!r}")


def _parse_spawn(entry: Any) -> SpawnConfig:
    if not isinstance(entry, Mapping):
        raise ConfigError(f"Spawn entry must be a mapping, got {entry!r}")
    data = dict(entry)
    if "color" in data:
        data["color"] = _parse_color(data["color"], "spawn color")
    if "role" in data:
        try:
            data["role"] = Role(str(data["role"]).lower())
        except ValueError as exc:
            raise ConfigError(f"Unknown spawn role: {data['role']!r}") from exc
    try:
        spawn = SpawnConfig(**data)
    except TypeError as exc:
        raise ConfigError(f"Invalid spawn entry {entry!r}: {exc}") from exc
    for axis in ("x", "y"):
        value = getattr(spawn, axis)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"Spawn {spawn.name!r} {axis} must be an integer, got {value!r}")
    if not isinstance(spawn.glyph, str) or len(spawn.glyph) != 1:
        raise ConfigError(f"Spawn glyph must be one character, got {spawn.glyph!r}")
    return spawn


__all__ = [
    "ColorConfig",
    "DEFAULT_SPAWNS",
    "DisplayConfig",
    "MapConfig",
    "Settings",
    "SpawnConfig",
]
