"""Wire format of the remote (Dify chat app) menu generator.

build_remote_request() turns a MenuRequest into the JSON query the chat app
expects; RemoteMenuResponse validates its answer and to_menu_plan() turns it
into scheduled recipes.
"""
from datetime import date as _date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from kondate.domain.Categories import Cuisine, DishCategory
from kondate.domain.Ingredient import Ingredient
from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.MenuRequest import MenuRequest
from kondate.domain.Recipe import Recipe
from kondate.logic.inventory.analysis import extract_preferences, priority_hint
from kondate.logic.menu.distribution import default_distribution
from kondate.logic.menu.genre import genre_label
from kondate.utilities import config
from kondate.utilities.constants import PANTRY_STAPLES
from kondate.utilities.dates import format_date
from kondate.utilities.errors import ResponseParseError


# === Request ===
class RemoteInventoryItem(BaseModel):
    invId: str
    name: str
    qty: float
    unit: str
    category: str
    expires_at: str
    priority_hint: Literal['near_expiry', 'overstock', 'normal']


class RemotePantryItem(BaseModel):
    name: str
    unit: str


class RemoteMenuRequest(BaseModel):
    week_start_date: str
    days: int
    people: int
    diet_mode: bool
    budget_per_day_jpy: int
    time_limit_per_day_min: int
    preferred_genres: List[str]
    avoid_genres: List[str] = []
    allergies: List[str] = []
    dislikes: List[str] = []
    must_use_ingredients: List[str] = []
    inventory: List[RemoteInventoryItem] = []
    pantry: List[RemotePantryItem] = []
    busy_dates: List[str] = []
    max_cooking_time: int
    cuisine_distribution: Dict[str, int]


def build_remote_request(request: MenuRequest, today: _date, *,
                         daily_time_limit: int = config.DAILY_TIME_LIMIT_MIN,
                         busy_day_time_limit: int = config.BUSY_DAY_TIME_LIMIT_MIN,
                         budget_per_day_jpy: int = config.BUDGET_PER_DAY_JPY) -> RemoteMenuRequest:
    prefs = extract_preferences(request.preferences)
    distribution = request.cuisine_distribution or default_distribution(request.day_count)
    inventory = [
        RemoteInventoryItem(
            invId=item.id,
            name=item.name,
            qty=item.amount,
            unit=item.unit,
            category=item.category.value,
            expires_at=format_date(item.expiration_date),
            priority_hint=priority_hint(item, today).value,
        )
        for item in request.inventory
    ]
    return RemoteMenuRequest(
        week_start_date=format_date(request.start_date),
        days=request.day_count,
        people=request.household_size,
        diet_mode=request.diet_mode,
        budget_per_day_jpy=budget_per_day_jpy,
        time_limit_per_day_min=daily_time_limit,
        preferred_genres=[c.label for c in Cuisine],
        allergies=prefs['allergies'],
        dislikes=prefs['dislikes'],
        must_use_ingredients=request.must_use_ingredients,
        inventory=inventory,
        pantry=[RemotePantryItem(**p) for p in PANTRY_STAPLES],
        busy_dates=sorted(format_date(d) for d in request.busy_dates),
        max_cooking_time=request.max_cooking_time or busy_day_time_limit,
        cuisine_distribution={c.value: distribution.get(c, 0) for c in Cuisine},
    )


# === Response ===
class RemoteIngredient(BaseModel):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    qty: float = Field(gt=0)
    unit: str = ""
    category: str = "その他"
    invId: Optional[str] = None


class RemoteDish(BaseModel):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    genre: Optional[str] = None
    time: int = Field(ge=0)
    difficulty: int = Field(default=1, ge=1, le=5)
    ingredients: List[RemoteIngredient] = []

    def cuisine(self) -> Cuisine:
        '''Stated genre if recognisable, otherwise inferred from the dish name.'''
        try:
            return Cuisine.parse(self.genre)
        except ValueError:
            return genre_label(self.name)


class RemoteDayMenu(BaseModel):
    date: _date
    main: RemoteDish
    side: Optional[RemoteDish] = None
    soup: Optional[RemoteDish] = None


class RemoteMenuResponse(BaseModel):
    week_start_date: _date
    menus: List[RemoteDayMenu] = Field(min_length=1)
    notes: List[str] = []

    @field_validator('notes', mode='before')
    @classmethod
    def _none_notes(cls, v):
        return v or []


def _to_recipe(dish: RemoteDish, category: DishCategory, on: _date) -> Recipe:
    ingredients = [
        Ingredient(name=i.name, amount=i.qty, unit=i.unit, category=i.category, id=i.id, inventory_id=i.invId)
        for i in dish.ingredients
    ]
    recipe = Recipe(
        name=dish.name,
        cooking_time_minutes=dish.time,
        difficulty=dish.difficulty,
        ingredients=ingredients,
        category=category,
        id=dish.id,
        cuisine=dish.cuisine(),
    )
    return recipe.schedule(on)


def to_menu_plan(response: RemoteMenuResponse, request: MenuRequest) -> MenuPlan:
    """Convert a validated answer; every requested date needs exactly one menu inside the range."""
    wanted = set(request.dates())
    seen = set()
    recipes: List[Recipe] = []
    for menu in sorted(response.menus, key=lambda m: m.date):
        if menu.date not in wanted:
            raise ResponseParseError(f"Menu dated {format_date(menu.date)} is outside the requested range")
        if menu.date in seen:
            raise ResponseParseError(f"Two menus for {format_date(menu.date)}")
        seen.add(menu.date)
        for category, dish in ((DishCategory.MAIN, menu.main), (DishCategory.SIDE, menu.side),
                               (DishCategory.SOUP, menu.soup)):
            if dish is not None:
                recipes.append(_to_recipe(dish, category, menu.date))
    missing = sorted(wanted - seen)
    if missing:
        raise ResponseParseError("No menu for " + ", ".join(format_date(d) for d in missing))
    return MenuPlan(recipes=recipes, start_date=request.start_date, end_date=request.end_date,
                    notes=response.notes)


__all__ = [
    'RemoteMenuRequest', 'RemoteMenuResponse', 'RemoteDayMenu', 'RemoteDish', 'RemoteIngredient',
    'build_remote_request', 'to_menu_plan',
]
