from datetime import date, timedelta
import unittest
from kondate.domain.Categories import Cuisine, DishCategory, IngredientCategory
from kondate.domain.Ingredient import Ingredient
from kondate.domain.Inventory import Inventory
from kondate.domain.InventoryItem import InventoryItem
from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.MenuRequest import MenuRequest
from kondate.domain.Recipe import Recipe
from kondate.domain.ShoppingListItem import RecipeBreakdown, ShoppingListItem
from kondate.utilities.errors import ValidationError


class TestCategories(unittest.TestCase):

    def test_cuisine_parse(self):
        self.assertIs(Cuisine.parse("western"), Cuisine.WESTERN)
        self.assertIs(Cuisine.parse("中華"), Cuisine.CHINESE)
        self.assertIs(Cuisine.parse(Cuisine.JAPANESE), Cuisine.JAPANESE)
        with self.assertRaises(ValueError):
            Cuisine.parse("italian")

    def test_unknown_ingredient_category_is_other(self):
        self.assertIs(IngredientCategory.parse("果物"), IngredientCategory.OTHER)
        self.assertIs(IngredientCategory.parse(None), IngredientCategory.OTHER)
        self.assertIs(IngredientCategory.parse("野菜"), IngredientCategory.VEGETABLE)


class TestRecords(unittest.TestCase):

    def test_ingredient_from_remote_spelling(self):
        ing = Ingredient.from_dict({"name": "卵", "qty": 2, "unit": "個", "category": "その他", "invId": "inv-1"})
        self.assertEqual(ing.amount, 2)
        self.assertEqual(ing.inventory_id, "inv-1")
        self.assertEqual(ing.key, ("卵", "個"))

    def test_recipe_schedule_sets_sunday_first_label(self):
        recipe = Recipe(name="味噌汁", category=DishCategory.SOUP)
        recipe.schedule(date(2024, 1, 7))
        self.assertEqual(recipe.day, "日曜日")
        recipe.schedule(date(2024, 1, 8))
        self.assertEqual(recipe.day, "月曜日")

    def test_recipe_roundtrip_keeps_date(self):
        recipe = Recipe(name="親子丼", ingredients=[Ingredient("卵", 3, "個")]).schedule(date(2024, 3, 1))
        again = Recipe.from_dict(recipe.to_dict())
        self.assertEqual(again.scheduled_date, date(2024, 3, 1))
        self.assertEqual(again.ingredients, recipe.ingredients)

    def test_inventory_item_usable_only_before_expiry(self):
        today = date(2024, 5, 1)
        item = InventoryItem("鮭", 400, "g", "肉・魚", expiration_date=today)
        self.assertFalse(item.is_usable_on(today))
        item.expiration_date = today + timedelta(days=1)
        self.assertTrue(item.is_usable_on(today))

    def test_inventory_working_copy_is_independent(self):
        item = InventoryItem("鮭", 400, "g", "肉・魚")
        inventory = Inventory([item])
        copy = inventory.working_copy()
        copy.get_items()[0].set_amount(-100)
        self.assertEqual(item.amount, 400)

    def test_shortage_never_negative(self):
        entry = ShoppingListItem(Ingredient("塩", 5, "g"), needed=5, in_stock=100,
                                 breakdown=[RecipeBreakdown("鮭の塩焼き", "月曜日", 5)])
        self.assertEqual(entry.shortage, 0)
        entry.in_stock = 2
        self.assertEqual(entry.shortage, 3)

    def test_plan_out_of_range(self):
        inside = Recipe(name="a").schedule(date(2024, 1, 2))
        outside = Recipe(name="b").schedule(date(2024, 1, 9))
        plan = MenuPlan([inside, outside], date(2024, 1, 1), date(2024, 1, 3))
        self.assertEqual(plan.out_of_range(), [outside])
        self.assertEqual(len(plan.dates()), 3)


class TestMenuRequestValidation(unittest.TestCase):

    def _request(self, **overrides):
        values = dict(household_size=4, start_date=date(2024, 1, 1), end_date=date(2024, 1, 3))
        values.update(overrides)
        return MenuRequest(**values)

    def test_valid_request(self):
        request = self._request(cuisine_distribution={"japanese": 1, "western": 1, "chinese": 1})
        self.assertIs(request.validate(), request)
        self.assertEqual(request.day_count, 3)

    def test_end_before_start(self):
        with self.assertRaises(ValidationError):
            self._request(end_date=date(2023, 12, 31)).validate()

    def test_household_must_be_positive_int(self):
        for bad in (0, -2, 2.5, True):
            with self.assertRaises(ValidationError):
                self._request(household_size=bad).validate()

    def test_distribution_must_cover_every_day(self):
        with self.assertRaises(ValidationError):
            self._request(cuisine_distribution={"japanese": 1, "western": 1}).validate()

    def test_distribution_rejects_unknown_cuisine(self):
        with self.assertRaises(ValidationError):
            self._request(cuisine_distribution={"french": 3})

    def test_malformed_busy_date(self):
        for bad in ("2024-04-31", "next tuesday"):
            with self.assertRaises(ValidationError):
                self._request(busy_dates=[bad])

    def test_busy_dates_accept_strings(self):
        request = self._request(busy_dates=["2024-01-02"])
        self.assertTrue(request.is_busy(date(2024, 1, 2)))
        self.assertFalse(request.is_busy(date(2024, 1, 1)))


class TestRecordsFromDict(unittest.TestCase):

    def test_plan_from_dict_restores_recipes_and_notes(self):
        plan = MenuPlan([Recipe(name="親子丼").schedule(date(2024, 1, 2))], date(2024, 1, 1), date(2024, 1, 3),
                        notes=["在庫を活用: 卵"])
        again = MenuPlan.from_dict(plan.to_dict())
        self.assertEqual((again.start_date, again.end_date), (plan.start_date, plan.end_date))
        self.assertEqual(again.recipes[0].day, "火曜日")
        self.assertEqual(again.notes, ["在庫を活用: 卵"])
        self.assertEqual(again.generated_date, plan.generated_date)

    def test_inventory_from_dict_accepts_remote_spelling(self):
        inventory = Inventory.from_dict([{"invId": "inv-7", "name": "鮭", "qty": 200, "unit": "g",
                                          "category": "肉・魚", "expires_at": "2024-01-05"}])
        item = inventory.find("鮭", "g")
        self.assertEqual((item.id, item.amount), ("inv-7", 200))
        self.assertEqual(item.expiration_date, date(2024, 1, 5))
