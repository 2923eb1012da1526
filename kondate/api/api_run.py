from fastapi import (
    FastAPI,
    Query,
    HTTPException,
    Response,
)

from datetime import date as _date
from typing import Optional
import logging

from kondate.api.remote_strategy import RemoteMenuStrategy, generate_menu
from kondate.api.remote_strategy import router as remote_router
from kondate.domain.Categories import Cuisine, DishCategory
from kondate.infra.pdf_utils import generate_pdf_for_shopping_list
from kondate.infra.Recipe_Catalog import default_catalog
from kondate.logic.inventory.ledger import apply_purchases, consume_cooked
from kondate.logic.menu.editing import regenerate_day, swap_days
from kondate.logic.menu.planner import MenuPlanner
from kondate.logic.shopping.list_builder import aggregate
from kondate.utilities.errors import KondateError, NoCandidateError, ValidationError
from kondate.utilities.random_source import PythonRandomSource
from kondate.utilities.validators import (
    CookedInput,
    MenuRequestInput,
    PurchaseInput,
    RegenerateDayInput,
    ShoppingListInput,
    SwapDaysInput,
)

# Logging
logger = logging.getLogger("kondate_app")

# Initialize FastAPI app
app = FastAPI(title="Kondate Menu & Shopping List API")

# Include routers
app.include_router(remote_router)


def _planner(seed: Optional[int] = None) -> MenuPlanner:
    return MenuPlanner(rng=PythonRandomSource(seed))


def _http_error(e: KondateError) -> HTTPException:
    if isinstance(e, NoCandidateError):
        return HTTPException(status_code=422, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


# -------------------- API: Catalog --------------------
@app.get('/api/catalog')
def api_catalog(category: Optional[str] = Query(default=None),
                cuisine: Optional[str] = Query(default=None)):
    templates = list(default_catalog())
    try:
        if category:
            templates = [t for t in templates if t.category is DishCategory(category)]
        if cuisine:
            wanted = Cuisine.parse(cuisine)
            templates = [t for t in templates if t.cuisine is wanted]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"items": [t.to_dict() for t in templates], "count": len(templates)}


# -------------------- API: Menu --------------------
@app.post('/api/menu/generate')
async def api_generate_menu(payload: MenuRequestInput):
    try:
        request = payload.to_domain()
        planner = _planner(payload.seed)
        remote = RemoteMenuStrategy() if payload.use_remote else None
        plan = await generate_menu(request, planner, remote)
    except (ValidationError, NoCandidateError) as e:
        raise _http_error(e)
    logger.info("Generated %d recipes for %s..%s", len(plan.recipes), request.start_date, request.end_date)
    return plan.to_dict()


@app.post('/api/menu/regenerate-day')
def api_regenerate_day(payload: RegenerateDayInput):
    try:
        plan = regenerate_day(payload.plan.to_domain(), payload.day, _planner(payload.seed),
                              payload.to_request(), cuisine=payload.cuisine)
    except (ValidationError, NoCandidateError) as e:
        raise _http_error(e)
    return plan.to_dict()


@app.post('/api/menu/swap-days')
def api_swap_days(payload: SwapDaysInput):
    try:
        plan = swap_days(payload.plan.to_domain(), payload.first, payload.second)
    except ValidationError as e:
        raise _http_error(e)
    return plan.to_dict()


# -------------------- API: Shopping List --------------------
@app.post('/api/shopping-list')
def api_shopping_list(payload: ShoppingListInput):
    items = aggregate(payload.plan.to_domain(), payload.inventory_domain(), only_missing=payload.only_missing)
    return {"items": [it.to_dict() for it in items], "count": len(items)}


@app.post('/api/shopping-list/pdf')
def api_shopping_list_pdf(payload: ShoppingListInput):
    plan = payload.plan.to_domain()
    items = aggregate(plan, payload.inventory_domain(), only_missing=payload.only_missing)
    try:
        pdf_bytes = generate_pdf_for_shopping_list(items, plan)
    except Exception:
        logger.exception("Failed to render shopping list PDF")
        raise HTTPException(status_code=500, detail="Could not render the shopping list PDF")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=shopping_list_{plan.start_date.isoformat()}.pdf"
        },
    )


# -------------------- API: Inventory --------------------
@app.post('/api/inventory/cooked')
def api_inventory_cooked(payload: CookedInput):
    recipes = [r.to_domain() for r in payload.recipes]
    inventory = consume_cooked(payload.inventory_domain(), recipes)
    return {"items": inventory.to_dict(), "count": len(inventory)}


@app.post('/api/inventory/purchase')
def api_inventory_purchase(payload: PurchaseInput):
    purchases = [p.to_domain() for p in payload.purchases]
    inventory = apply_purchases(payload.inventory_domain(), purchases, today=payload.today or _date.today())
    return {"items": inventory.to_dict(), "count": len(inventory)}
