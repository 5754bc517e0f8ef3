"""
The Knight value type.

A knight is three non-negative counters: gold, weapon class and armour class.
Gold saturates at MAX_GOLD instead of overflowing.  Comparing two knights
resolves a fight between them, so ``==`` means "neither beats the other",
not "identical stats" (use same_stats() for that).
"""

from __future__ import annotations

from typing import Iterable, Literal, overload

MAX_GOLD = 2**64 - 1

Verdict = Literal["greater", "less", "equal"]


def _safe_add(a: int, b: int) -> int:
    return min(a + b, MAX_GOLD)


class Knight:
    """A contestant with gold, a weapon class and an armour class."""

    __slots__ = ("_gold", "_weapon_class", "_armour_class")

    MAX_GOLD = MAX_GOLD

    def __init__(self, gold: int, weapon_class: int, armour_class: int) -> None:
        if gold < 0:
            raise ValueError(f"gold must be >= 0, got {gold}")
        self._gold = min(gold, MAX_GOLD)
        self._weapon_class = weapon_class
        self._armour_class = armour_class

    # ------------------------------------------------------------------ #
    # Accessors                                                            #
    # ------------------------------------------------------------------ #

    def get_gold(self) -> int:
        return self._gold

    def get_weapon_class(self) -> int:
        return self._weapon_class

    def get_armour_class(self) -> int:
        return self._armour_class

    @property
    def gold(self) -> int:
        return self._gold

    @property
    def weapon_class(self) -> int:
        return self._weapon_class

    @property
    def armour_class(self) -> int:
        return self._armour_class

    @property
    def stats(self) -> tuple[int, int, int]:
        """The (gold, weapon_class, armour_class) triple."""
        return self._gold, self._weapon_class, self._armour_class

    # ------------------------------------------------------------------ #
    # Mutators                                                             #
    # ------------------------------------------------------------------ #

    @overload
    def take_gold(self) -> int: ...

    @overload
    def take_gold(self, amount: int) -> None: ...

    def take_gold(self, amount: int | None = None) -> int | None:
        """
        With an amount: add it to this knight's purse, saturating at MAX_GOLD.
        Negative amounts are rejected; gold is a counter, not a balance.
        Without one: hand over the whole purse (returns it, leaves 0 behind).
        """
        if amount is None:
            gold, self._gold = self._gold, 0
            return gold
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self._gold = _safe_add(self._gold, amount)
        return None

    def give_up_weapon(self) -> int:
        weapon_class, self._weapon_class = self._weapon_class, 0
        return weapon_class

    def take_off_armour(self) -> int:
        armour_class, self._armour_class = self._armour_class, 0
        return armour_class

    def change_weapon(self, new_class: int) -> None:
        self._weapon_class = new_class

    def change_armour(self, new_class: int) -> None:
        self._armour_class = new_class

    def copy(self) -> Knight:
        return Knight(self._gold, self._weapon_class, self._armour_class)

    # ------------------------------------------------------------------ #
    # Combining                                                            #
    # ------------------------------------------------------------------ #

    def __add__(self, other: object) -> Knight:
        if not isinstance(other, Knight):
            return NotImplemented
        return Knight(
            _safe_add(self._gold, other._gold),
            max(self._weapon_class, other._weapon_class),
            max(self._armour_class, other._armour_class),
        )

    def __iadd__(self, other: object) -> Knight:
        """Loot ``other``: its gold always, its weapon and armour only if better."""
        if not isinstance(other, Knight):
            return NotImplemented
        self._gold = _safe_add(self._gold, other.take_gold())
        if other._weapon_class > self._weapon_class:
            self._weapon_class = other.give_up_weapon()
        if other._armour_class > self._armour_class:
            self._armour_class = other.take_off_armour()
        return self

    # ------------------------------------------------------------------ #
    # Combat                                                               #
    # ------------------------------------------------------------------ #

    def can_defeat(self, other: Knight) -> bool:
        return self._weapon_class > other._armour_class

    def fight(self, other: Knight) -> Verdict:
        """
        Resolve a fight against ``other`` from this knight's point of view.

        A knight that can pierce the other's armour while its own armour holds
        wins outright.  If neither can hurt the other it's a draw.  If both can,
        the lighter-armoured knight loses, then the weaker weapon loses, and
        identical classes are a draw.
        """
        mine = self.can_defeat(other)
        theirs = other.can_defeat(self)

        if mine and not theirs:
            return "greater"
        if theirs and not mine:
            return "less"
        if not mine:
            return "equal"

        if self._armour_class != other._armour_class:
            return "less" if self._armour_class < other._armour_class else "greater"
        if self._weapon_class != other._weapon_class:
            return "less" if self._weapon_class < other._weapon_class else "greater"
        return "equal"

    def same_stats(self, other: Knight) -> bool:
        return self.stats == other.stats

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Knight):
            return NotImplemented
        return self.fight(other) == "equal"

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Knight):
            return NotImplemented
        return self.fight(other) != "equal"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Knight):
            return NotImplemented
        return self.fight(other) == "less"

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Knight):
            return NotImplemented
        return self.fight(other) != "greater"

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Knight):
            return NotImplemented
        return self.fight(other) == "greater"

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Knight):
            return NotImplemented
        return self.fight(other) != "less"

    # Equality is a draw, not identity, so knights can't be dict keys.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({self._gold}, {self._weapon_class}, {self._armour_class})"

    def __repr__(self) -> str:
        return (
            f"Knight(gold={self._gold}, weapon_class={self._weapon_class}, "
            f"armour_class={self._armour_class})"
        )


def trainee_knight() -> Knight:
    """A penniless, unarmed knight in a thin gambeson.  Fresh object every call."""
    return Knight(0, 0, 1)


def max_diff_classes(knights: Iterable[Knight]) -> tuple[int, int]:
    """
    Return (weapon_class, armour_class) of the most lopsided knight, i.e. the
    first one with the largest gap between its weapon and armour classes.
    (0, 0) if there are no knights or none is lopsided at all.
    """
    max_diff = 0
    result = (0, 0)

    for knight in knights:
        weapon, armour = knight.weapon_class, knight.armour_class
        diff = weapon - armour if weapon >= armour else armour - weapon
        if diff > max_diff:
            max_diff = diff
            result = (weapon, armour)

    return result
