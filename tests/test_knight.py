"""
Tests for Knight: accessors, read-and-clear mutators, saturating gold,
combining/looting, and the combat ordering.
"""

from __future__ import annotations

import itertools
import unittest

import pytest

from knights import MAX_GOLD, Knight, max_diff_classes, trainee_knight


def assert_stats(knight: Knight, gold: int, weapon_class: int, armour_class: int) -> None:
    assert knight.get_gold() == gold
    assert knight.get_weapon_class() == weapon_class
    assert knight.get_armour_class() == armour_class


# --------------------------------------------------------------------------- #
# Accessors and mutators                                                       #
# --------------------------------------------------------------------------- #

class TestMutators:
    def test_take_gold_adds_then_hands_over(self):
        knight = Knight(100, 21, 15)
        knight.take_gold(20)
        assert knight.get_gold() == 120
        assert knight.take_gold() == 120
        assert knight.get_gold() == 0

    def test_weapon_change_and_give_up(self):
        knight = Knight(100, 21, 15)
        knight.change_weapon(27)
        assert knight.get_weapon_class() == 27
        assert knight.give_up_weapon() == 27
        assert knight.get_weapon_class() == 0

    def test_armour_change_and_take_off(self):
        knight = Knight(100, 21, 15)
        knight.change_armour(11)
        assert knight.get_armour_class() == 11
        assert knight.take_off_armour() == 11
        assert knight.get_armour_class() == 0

    def test_properties_mirror_accessors(self):
        knight = Knight(7, 8, 9)
        assert (knight.gold, knight.weapon_class, knight.armour_class) == (7, 8, 9)
        assert knight.stats == (7, 8, 9)

    def test_copy_is_independent(self):
        knight = Knight(7, 8, 9)
        clone = knight.copy()
        clone.take_gold()
        assert knight.get_gold() == 7
        assert clone.same_stats(Knight(0, 8, 9))


class TestSaturation:
    def test_take_gold_saturates(self):
        knight = Knight(5, 0, 0)
        knight.take_gold(MAX_GOLD)
        assert knight.get_gold() == MAX_GOLD

    def test_take_gold_up_to_limit_is_exact(self):
        knight = Knight(MAX_GOLD - 10, 0, 0)
        knight.take_gold(10)
        assert knight.get_gold() == MAX_GOLD

    def test_class_constant_matches_module_constant(self):
        assert Knight.MAX_GOLD == MAX_GOLD == 2**64 - 1

    def test_constructor_clamps_gold(self):
        assert Knight(MAX_GOLD + 5, 1, 1).get_gold() == MAX_GOLD

    def test_negative_gold_rejected(self):
        with pytest.raises(ValueError, match="gold must be >= 0"):
            Knight(-1, 1, 1)

    def test_take_gold_rejects_negative_amount(self):
        knight = Knight(3, 1, 1)
        with pytest.raises(ValueError, match="amount must be >= 0"):
            knight.take_gold(-10)
        assert knight.get_gold() == 3

    def test_loot_saturates_gold(self):
        winner = Knight(MAX_GOLD, 1, 1)
        loser = Knight(5, 0, 0)
        winner += loser
        assert winner.get_gold() == MAX_GOLD
        assert loser.get_gold() == 0


# --------------------------------------------------------------------------- #
# Combining                                                                    #
# --------------------------------------------------------------------------- #

class TestCombining(unittest.TestCase):
    def test_add_takes_sum_and_best_classes(self):
        white = Knight(100, 21, 15)
        little = Knight(10, 20, 30)
        new = white + little
        assert_stats(new, 110, 21, 30)
        assert_stats(white, 100, 21, 15)
        assert_stats(little, 10, 20, 30)

    def test_add_saturates_gold(self):
        new = Knight(MAX_GOLD, 1, 1) + Knight(1, 2, 0)
        assert_stats(new, MAX_GOLD, 2, 1)

    def test_iadd_loots_the_loser(self):
        white = Knight(100, 21, 15)
        little = Knight(10, 20, 30)
        white += little
        assert_stats(white, 110, 21, 30)
        # weaker weapon stays with its owner, better armour is taken
        assert_stats(little, 0, 20, 0)

    def test_iadd_keeps_identity(self):
        winner = Knight(1, 1, 1)
        original = winner
        winner += Knight(1, 5, 5)
        self.assertIs(winner, original)
        assert_stats(winner, 2, 5, 5)

    def test_iadd_equal_classes_are_not_taken(self):
        winner = Knight(0, 4, 4)
        loser = Knight(3, 4, 4)
        winner += loser
        assert_stats(winner, 3, 4, 4)
        assert_stats(loser, 0, 4, 4)

    def test_add_rejects_non_knights(self):
        with self.assertRaises(TypeError):
            Knight(1, 1, 1) + 5


# --------------------------------------------------------------------------- #
# Combat ordering                                                              #
# --------------------------------------------------------------------------- #

class TestCombat(unittest.TestCase):
    def setUp(self) -> None:
        self.black_knight = Knight(100, 21, 15)

    def test_one_sided_win(self):
        other = Knight(2000, 14, 20)
        self.assertTrue(self.black_knight > other)
        self.assertTrue(self.black_knight >= other)
        self.assertTrue(self.black_knight != other)
        self.assertTrue(other < self.black_knight)

    def test_mutual_defeat_lower_armour_loses(self):
        other = Knight(25, 21, 16)
        self.assertTrue(self.black_knight < other)
        self.assertTrue(self.black_knight <= other)
        self.assertEqual(self.black_knight.fight(other), "less")
        self.assertEqual(other.fight(self.black_knight), "greater")

    def test_mutual_defeat_weaker_weapon_loses(self):
        self.assertEqual(Knight(0, 20, 15).fight(Knight(0, 21, 15)), "less")

    def test_mutual_defeat_identical_classes_draw(self):
        self.assertTrue(self.black_knight == Knight(150, 21, 15))

    def test_nobody_can_hurt_anybody(self):
        a = Knight(100, 10, 1)
        b = Knight(50, 1, 20)
        self.assertEqual(a.fight(b), "equal")
        self.assertTrue(a == b)
        self.assertFalse(a < b or a > b)

    def test_clear_winner(self):
        a = Knight(100, 20, 1)
        b = Knight(50, 1, 5)
        self.assertTrue(a.can_defeat(b))
        self.assertFalse(b.can_defeat(a))
        self.assertEqual(a.fight(b), "greater")

    def test_equality_ignores_gold_but_not_combat(self):
        self.assertTrue(Knight(1, 0, 0) == Knight(999, 0, 0))
        self.assertFalse(Knight(1, 0, 0).same_stats(Knight(999, 0, 0)))
        self.assertFalse(Knight(1, 5, 0) == Knight(1, 0, 0))

    def test_knights_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Knight(1, 2, 3))

    def test_comparison_with_other_types(self):
        self.assertFalse(Knight(1, 2, 3) == (1, 2, 3))
        with self.assertRaises(TypeError):
            Knight(1, 2, 3) < 4


class TestOrderingProperties:
    CLASSES = range(0, 4)

    def _knights(self):
        return [
            Knight(0, w, a)
            for w, a in itertools.product(self.CLASSES, self.CLASSES)
        ]

    def test_trichotomy(self):
        for a, b in itertools.product(self._knights(), repeat=2):
            outcomes = [a > b, a < b, a == b]
            assert outcomes.count(True) == 1, (a, b)

    def test_reflexive(self):
        for a in self._knights():
            assert a == a

    def test_symmetric(self):
        for a, b in itertools.product(self._knights(), repeat=2):
            assert (a == b) == (b == a)
            assert (a > b) == (b < a)


# --------------------------------------------------------------------------- #
# Helpers                                                                      #
# --------------------------------------------------------------------------- #

class TestHelpers:
    def test_trainee_is_fresh_each_time(self):
        first = trainee_knight()
        first.take_gold(50)
        assert_stats(trainee_knight(), 0, 0, 1)

    def test_str_and_repr(self):
        knight = Knight(100, 21, 15)
        assert str(knight) == "(100, 21, 15)"
        assert repr(knight) == "Knight(gold=100, weapon_class=21, armour_class=15)"

    @pytest.mark.parametrize(
        "stats, expected",
        [
            ([(0, 10, 2), (0, 1, 20), (0, 5, 5)], (1, 20)),
            ([(0, 4, 1), (0, 1, 4)], (4, 1)),
            ([(0, 3, 3)], (0, 0)),
            ([], (0, 0)),
        ],
    )
    def test_max_diff_classes(self, stats, expected):
        assert max_diff_classes(Knight(*s) for s in stats) == expected
