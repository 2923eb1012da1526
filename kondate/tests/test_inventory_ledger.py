from datetime import date, timedelta
import unittest
from kondate.domain.Categories import IngredientCategory, PriorityHint
from kondate.domain.Ingredient import Ingredient
from kondate.domain.Inventory import Inventory
from kondate.domain.InventoryItem import InventoryItem
from kondate.domain.Recipe import Recipe
from kondate.domain.ShoppingListItem import ShoppingListItem
from kondate.logic.inventory.analysis import extract_preferences, priority_hint
from kondate.logic.inventory.ledger import apply_purchases, consume_cooked, purchases_from_shopping_list

TODAY = date(2024, 4, 1)


def _lot(name, amount, unit="g", category="肉・魚", days=5, **kw):
    return InventoryItem(name, amount, unit, category, expiration_date=TODAY + timedelta(days=days), **kw)


class TestConsumeCooked(unittest.TestCase):

    def setUp(self):
        self.chicken = _lot("鶏もも肉", 500, id="inv-chicken")
        self.soy = _lot("醤油", 40, "ml", "調味料", days=200, id="inv-soy")
        self.inventory = Inventory([self.chicken, self.soy])

    def test_subtracts_and_removes_emptied_lots(self):
        cooked = Recipe(name="鶏の照り焼き", ingredients=[
            Ingredient("鶏もも肉", 300, "g", "肉・魚"),
            Ingredient("醤油", 60, "ml", "調味料"),
        ])
        result = consume_cooked(self.inventory, [cooked])
        self.assertEqual([(i.name, i.amount) for i in result], [("鶏もも肉", 200)])
        self.assertEqual(self.chicken.amount, 500)
        self.assertEqual(len(self.inventory), 2)

    def test_category_and_unit_must_match(self):
        cooked = Recipe(name="x", ingredients=[
            Ingredient("鶏もも肉", 300, "個", "肉・魚"),
            Ingredient("醤油", 10, "ml", "その他"),
        ])
        result = consume_cooked(self.inventory, [cooked])
        self.assertEqual([i.amount for i in result], [500, 40])

    def test_accepts_a_plain_list(self):
        result = consume_cooked([self.chicken], [])
        self.assertIsInstance(result, Inventory)
        self.assertEqual(len(result), 1)


class TestApplyPurchases(unittest.TestCase):

    def test_new_lot_gets_default_shelf_life(self):
        result = apply_purchases(Inventory(), [Ingredient("キャベツ", 1, "個", "野菜")], today=TODAY)
        lot = result.get_items()[0]
        self.assertEqual(lot.expiration_date, TODAY + timedelta(days=7))
        self.assertEqual(lot.added_date, TODAY)
        self.assertIs(lot.category, IngredientCategory.VEGETABLE)

    def test_tops_up_existing_lot_and_keeps_its_expiry(self):
        lot = _lot("豚肉", 100, days=2)
        result = apply_purchases([lot], [Ingredient("豚肉", 250, "g", "肉・魚")], today=TODAY)
        self.assertEqual(len(result), 1)
        self.assertEqual(result.get_items()[0].amount, 350)
        self.assertEqual(result.get_items()[0].expiration_date, TODAY + timedelta(days=2))
        self.assertEqual(lot.amount, 100)

    def test_zero_amounts_are_skipped(self):
        result = apply_purchases(Inventory(), [Ingredient("塩", 0, "g", "調味料")], today=TODAY)
        self.assertEqual(len(result), 0)

    def test_custom_shelf_life(self):
        result = apply_purchases(None, [Ingredient("豆腐", 300, "g", "その他")], today=TODAY, shelf_life_days=2)
        self.assertEqual(result.get_items()[0].expiration_date, TODAY + timedelta(days=2))

    def test_purchases_from_shopping_list(self):
        checked = ShoppingListItem(Ingredient("鮭", 400, "g", "肉・魚"), needed=400, in_stock=100, is_checked=True)
        unchecked = ShoppingListItem(Ingredient("レモン", 1, "個", "野菜"), needed=1)
        covered = ShoppingListItem(Ingredient("塩", 5, "g", "調味料"), needed=5, in_stock=50, is_checked=True)
        purchases = purchases_from_shopping_list([checked, unchecked, covered])
        self.assertEqual([(p.name, p.amount) for p in purchases], [("鮭", 300)])
        everything = purchases_from_shopping_list([checked, unchecked, covered], checked_only=False)
        self.assertEqual([p.name for p in everything], ["鮭", "レモン"])


class TestInventoryAnalysis(unittest.TestCase):

    def test_priority_hints(self):
        self.assertIs(priority_hint(_lot("鮭", 100, days=3), TODAY), PriorityHint.NEAR_EXPIRY)
        self.assertIs(priority_hint(_lot("鮭", 100, days=-1), TODAY), PriorityHint.NEAR_EXPIRY)
        self.assertIs(priority_hint(_lot("米", 2000, days=60), TODAY), PriorityHint.OVERSTOCK)
        self.assertIs(priority_hint(_lot("鮭", 100, days=4), TODAY), PriorityHint.NORMAL)
        self.assertIs(priority_hint(InventoryItem("塩", 10, "g"), TODAY), PriorityHint.NORMAL)

    def test_extract_preferences(self):
        prefs = extract_preferences("卵アレルギー、魚NG。辛いもの嫌い")
        self.assertEqual(prefs, {"allergies": ["卵"], "dislikes": ["魚", "辛い料理"]})

    def test_full_width_text_is_normalized(self):
        self.assertEqual(extract_preferences("えびＮＧ")["allergies"], ["えび"])

    def test_no_text(self):
        self.assertEqual(extract_preferences(None), {"allergies": [], "dislikes": []})
