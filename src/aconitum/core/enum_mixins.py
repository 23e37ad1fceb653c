# topmark:header:start
#
#   project      : Aconitum
#   file         : enum_mixins.py
#   file_relpath : src/aconitum/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Keyed string enums.

A `KeyedStrEnum` member is declared as ``(key, label, aliases)``. The key is the
stable ``.value`` written to JSON and TOML, the label is what people read, and
the aliases are extra spellings accepted by `KeyedStrEnum.parse`:

    ```python
    class SignalStandard(KeyedStrEnum):
        SYSTEMV = ("systemv", "System V", ("sysv",))

    assert SignalStandard.parse("System V") is SignalStandard.SYSTEMV
    assert SignalStandard.parse("SYSV") is SignalStandard.SYSTEMV
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """String enum carrying a label and parse aliases on each member.

    Attributes:
        label (str): Human-readable name.
        aliases (tuple[str, ...]): Extra tokens recognized by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return self.key

    @property
    def key(self) -> str:
        return str(self.value)

    def tokens(self) -> frozenset[str]:
        """Normalized spellings that select this member: key, name, label and aliases."""
        return frozenset(
            _norm_token(raw) for raw in (self.key, self.name, self.label, *self.aliases)
        )

    @classmethod
    def keys(cls) -> list[str]:
        """Return the member keys in declaration order."""
        return [member.key for member in cls]

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Return the member selected by ``raw``, or None.

        Matching ignores case and surrounding whitespace, and treats ``-`` and
        spaces like ``_``.
        """
        if raw is None:
            return None
        token = _norm_token(raw)
        return next((member for member in cls if token in member.tokens()), None)
