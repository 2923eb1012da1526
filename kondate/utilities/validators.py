"""
Input validation schemas using Pydantic for the HTTP layer.

Each model checks shape and types; to_domain() builds the engine's records.
Business rules (date order, distribution sum, ...) are checked by the domain
and surface as kondate.utilities.errors.ValidationError.
"""
from datetime import date, datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from kondate.domain.Categories import Cuisine
from kondate.domain.Ingredient import Ingredient
from kondate.domain.Inventory import Inventory
from kondate.domain.InventoryItem import InventoryItem
from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.MenuRequest import MenuRequest
from kondate.domain.Recipe import Recipe

CategoryName = Literal['野菜', '肉・魚', '調味料', 'その他']


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


class IngredientInput(BaseModel):
    """Schema for a recipe ingredient or a purchased item."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., gt=0)
    unit: str = Field(default="", max_length=20)
    category: CategoryName = 'その他'
    inventory_id: Optional[str] = None

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _strip(v)

    def to_domain(self) -> Ingredient:
        return Ingredient(name=self.name, amount=self.amount, unit=self.unit, category=self.category,
                          id=self.id, inventory_id=self.inventory_id)


class InventoryItemInput(BaseModel):
    """Schema for one inventory lot."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    unit: str = Field(default="", max_length=20)
    category: CategoryName = 'その他'
    expiration_date: Optional[date] = None
    added_date: Optional[date] = None

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    def to_domain(self) -> InventoryItem:
        return InventoryItem(name=self.name, amount=self.amount, unit=self.unit, category=self.category,
                             expiration_date=self.expiration_date, added_date=self.added_date, id=self.id)


def _inventory(items: List[InventoryItemInput]) -> Inventory:
    return Inventory(i.to_domain() for i in items)


class RecipeInput(BaseModel):
    """Schema for a scheduled recipe as returned by the generate endpoints."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=200)
    cooking_time_minutes: int = Field(default=0, ge=0)
    difficulty: int = Field(default=1, ge=1, le=5)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    category: Literal['main', 'side', 'soup'] = 'main'
    cuisine: Optional[Literal['japanese', 'western', 'chinese']] = None
    day: str = ""
    scheduled_date: Optional[date] = None

    def to_domain(self) -> Recipe:
        recipe = Recipe(name=self.name, cooking_time_minutes=self.cooking_time_minutes,
                        difficulty=self.difficulty, ingredients=[i.to_domain() for i in self.ingredients],
                        category=self.category, day=self.day, id=self.id, cuisine=self.cuisine)
        if self.scheduled_date is not None:
            recipe.schedule(self.scheduled_date)
        return recipe


class MenuPlanInput(BaseModel):
    recipes: List[RecipeInput] = Field(default_factory=list)
    start_date: date
    end_date: date
    generated_date: Optional[datetime] = None
    notes: List[str] = Field(default_factory=list)

    def to_domain(self) -> MenuPlan:
        return MenuPlan(recipes=[r.to_domain() for r in self.recipes], start_date=self.start_date,
                        end_date=self.end_date, generated_date=self.generated_date, notes=self.notes)


class MenuRequestInput(BaseModel):
    """Schema for a generation request."""
    household_size: int
    start_date: date
    end_date: date
    inventory: List[InventoryItemInput] = Field(default_factory=list)
    diet_mode: bool = False
    preferences: str = ""
    busy_dates: List[date] = Field(default_factory=list)
    max_cooking_time: Optional[int] = None
    cuisine_distribution: Optional[Dict[str, int]] = None
    must_use_ingredients: List[str] = Field(default_factory=list)
    use_remote: bool = False
    seed: Optional[int] = None

    @field_validator('must_use_ingredients')
    @classmethod
    def drop_blank(cls, v):
        """Filter out empty ingredient names."""
        return [s.strip() for s in v if s and s.strip()]

    def to_domain(self) -> MenuRequest:
        return MenuRequest(
            household_size=self.household_size,
            start_date=self.start_date,
            end_date=self.end_date,
            inventory=_inventory(self.inventory),
            diet_mode=self.diet_mode,
            preferences=self.preferences,
            busy_dates=self.busy_dates,
            max_cooking_time=self.max_cooking_time,
            cuisine_distribution=self.cuisine_distribution,
            must_use_ingredients=self.must_use_ingredients,
        )


class RegenerateDayInput(BaseModel):
    plan: MenuPlanInput
    day: date
    household_size: int
    inventory: List[InventoryItemInput] = Field(default_factory=list)
    diet_mode: bool = False
    busy: bool = False
    max_cooking_time: Optional[int] = None
    cuisine: Optional[str] = None
    seed: Optional[int] = None

    @field_validator('cuisine')
    @classmethod
    def known_cuisine(cls, v):
        if v is None or v == "":
            return None
        return Cuisine.parse(v).value

    def to_request(self) -> MenuRequest:
        '''Request carrying the household settings; the date range is the plan's.'''
        return MenuRequest(
            household_size=self.household_size,
            start_date=self.plan.start_date,
            end_date=self.plan.end_date,
            inventory=_inventory(self.inventory),
            diet_mode=self.diet_mode,
            busy_dates=[self.day] if self.busy else [],
            max_cooking_time=self.max_cooking_time,
        )


class SwapDaysInput(BaseModel):
    plan: MenuPlanInput
    first: date
    second: date


class ShoppingListInput(BaseModel):
    plan: MenuPlanInput
    inventory: List[InventoryItemInput] = Field(default_factory=list)
    only_missing: bool = False

    def inventory_domain(self) -> Inventory:
        return _inventory(self.inventory)


class CookedInput(BaseModel):
    inventory: List[InventoryItemInput] = Field(default_factory=list)
    recipes: List[RecipeInput]

    def inventory_domain(self) -> Inventory:
        return _inventory(self.inventory)


class PurchaseInput(BaseModel):
    inventory: List[InventoryItemInput] = Field(default_factory=list)
    purchases: List[IngredientInput]
    today: Optional[date] = None

    def inventory_domain(self) -> Inventory:
        return _inventory(self.inventory)


class RemoteConfigInput(BaseModel):
    """Endpoint/key to test; missing values fall back to the configured ones."""
    api_endpoint: Optional[str] = None
    api_key: Optional[str] = None

    @field_validator('api_endpoint')
    @classmethod
    def http_url(cls, v):
        if v is None:
            return v
        v = v.strip()
        if v and not v.startswith(('http://', 'https://')):
            raise ValueError('API endpoint must be an http(s) URL')
        return v
