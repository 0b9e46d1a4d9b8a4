"""Key resolution with numeric repeat prefixes.

Digits typed before a bound key multiply it: ``5j`` resolves to five copies
of the ``j`` action. Bindings are exact single-key matches.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..actions import Action
from .key_spec import is_digit_key

logger = logging.getLogger(__name__)

MAX_REPEAT_COUNT = 9999


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one key token to the action it triggers."""

    key: str
    action: Action


class KeyResolver:
    """Turn key tokens into repeated actions.

    The pending repeat count restarts instead of growing when it is exactly
    ``1``: typing ``1`` then ``2`` yields ``3``, not ``12``. Counts saturate
    at ``MAX_REPEAT_COUNT``.
    """

    def __init__(self, bindings: Iterable[KeyBinding] = ()) -> None:
        self._bindings: dict[str, Action] = {}
        self._count = 0
        for binding in bindings:
            self.register_binding(binding)

    def register_binding(self, binding: KeyBinding) -> KeyResolver:
        """Register one binding, overwriting an existing one for the same key."""
        self._bindings[binding.key] = binding.action
        return self

    def binding_for(self, key: str) -> Action | None:
        return self._bindings.get(key)

    @property
    def pending_count(self) -> int:
        """Repeat count typed so far, ``0`` when none is pending."""
        return self._count

    def press(self, key: str) -> list[Action]:
        """Consume one key and return the actions it resolves to, oldest first."""
        if is_digit_key(key):
            if self._count != 1:
                self._count *= 10
            self._count = min(self._count + int(key), MAX_REPEAT_COUNT)
            return []

        repeat = max(self._count, 1)
        self._count = 0
        action = self._bindings.get(key)
        if action is None:
            logger.debug("unbound key %r", key)
            return []
        return [action] * repeat


__all__ = ["MAX_REPEAT_COUNT", "KeyBinding", "KeyResolver"]
