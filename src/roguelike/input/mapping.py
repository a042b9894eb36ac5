from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Union

from ..exceptions import ConfigError
from .actions import InputAction, KeyPress

logger = logging.getLogger(__name__)

Key = Union[str, int]


class InputMapper:
    """Rebindable mapping from physical keys to logical actions.

    Keys are strings normalized to uppercase, so "esc" and "ESC" are the same
    key. Backends with numeric key codes register aliases from their codes to
    canonical names instead of binding the codes directly:

        mapper = InputMapper.default()
        mapper.set_alias(65362, "UP")
        mapper.translate_key(65362)   # -> InputAction.MOVE_UP
    """

    def __init__(self, bindings: Optional[Dict[Key, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    # ---------- Canonicalization ----------
    @staticmethod
    def _normalize(key: Optional[Key]) -> Optional[str]:
        """Normalize a key into a canonical uppercase string, or None if unusable."""
        if key is None or isinstance(key, bool):
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    # ---------- Binding API ----------
    def bind(self, key: Key, action: InputAction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[Key], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: Key) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: Key, canonical_name: str) -> None:
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def apply_bindings(self, bindings: Mapping[str, Iterable[Key]]) -> None:
        """Add bindings given as ``{action_name: [keys]}``, e.g. from settings."""
        for name, keys in bindings.items():
            try:
                action = InputAction[name.strip().upper()]
            except KeyError:
                raise ConfigError(f"Unknown input action: {name!r}") from None
            self.bind_many(keys, action)
            logger.debug("Bound %s to %s", list(keys), action.name)

    # ---------- Translation ----------
    def translate_key(self, key: Key) -> Optional[InputAction]:
        """Translate a physical key into a logical action or None."""
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(canonical)

    def translate(self, press: KeyPress) -> Optional[InputAction]:
        """Translate a key press. Presses with shift/ctrl/alt held are ignored."""
        if press.modified:
            return None
        return self.translate_key(press.key)

    # ---------- Defaults ----------
    @classmethod
    def default(cls) -> "InputMapper":
        """Arrow keys move, Escape exits."""
        mapper = cls()
        mapper.bind("UP", InputAction.MOVE_UP)
        mapper.bind("DOWN", InputAction.MOVE_DOWN)
        mapper.bind("LEFT", InputAction.MOVE_LEFT)
        mapper.bind("RIGHT", InputAction.MOVE_RIGHT)
        mapper.bind("ESCAPE", InputAction.EXIT)
        mapper.set_alias("ESC", "ESCAPE")
        return mapper


__all__ = ["InputMapper"]
