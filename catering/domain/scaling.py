# catering/domain/scaling.py
"""
Order-to-ingredient scaling.

A dish recipe is defined against a base quantity. An order asks for some
quantity of the dish in the same unit; every recipe amount is multiplied by
requested / base. Callers may instead hand in explicit per-ingredient amounts
(overrides), which then form the complete ingredient list of the item.
"""
import logging
import math
from typing import Any, Dict, List, Optional, Sequence

from catering.domain.entities import (
    DishRecipe,
    IngredientOverride,
    OrderIngredientLine,
    PlannedItem,
    RecipeLine,
)
from catering.exceptions.order_exceptions import InvalidQuantityError, UnitMismatchError

logger = logging.getLogger(__name__)


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def compute_scale(base_quantity: Any, requested_quantity: Any) -> float:
    """
    Ratio of requested production quantity to the dish base quantity.

    Args:
        base_quantity: Quantity the recipe is defined for
        requested_quantity: Quantity the order asks for

    Returns:
        requested_quantity / base_quantity, unrounded

    Raises:
        InvalidQuantityError: If either value is missing, non-numeric or not positive
    """
    base = _to_number(base_quantity)
    requested = _to_number(requested_quantity)
    if base is None or base <= 0:
        raise InvalidQuantityError(f"Invalid base quantity: {base_quantity!r}")
    if requested is None or requested <= 0:
        raise InvalidQuantityError(f"Invalid requested quantity: {requested_quantity!r}")
    return requested / base


def ensure_unit(requested_unit: str, base_unit: str) -> None:
    """
    Check that an order asks for a dish in its base unit.

    Raises:
        UnitMismatchError: If the units differ (no conversion is attempted)
    """
    if requested_unit != base_unit:
        raise UnitMismatchError(base_unit, requested_unit)


def scale_recipe(
        recipe_lines: Sequence[RecipeLine],
        scale_factor: float,
        overrides: Optional[Sequence[IngredientOverride]] = None
) -> List[OrderIngredientLine]:
    """
    Derive the ingredient lines for one order item.

    Without overrides every recipe line is multiplied by scale_factor, in
    recipe order. With a non-empty override list the overrides replace the
    recipe entirely: ingredients they do not mention are left out. Overrides
    for ingredients outside the recipe and overrides with a negative or
    non-numeric amount are skipped. A missing override unit falls back to
    the recipe unit.

    Args:
        recipe_lines: Base recipe of the dish
        scale_factor: Result of compute_scale
        overrides: Optional caller-supplied amounts

    Returns:
        Ordered list of scaled ingredient lines
    """
    if not overrides:
        return [
            OrderIngredientLine(
                ingredient_id=line.ingredient_id,
                scaled_amount=line.amount_per_base * scale_factor,
                unit=line.unit
            )
            for line in recipe_lines
        ]

    by_ingredient = {str(line.ingredient_id): line for line in recipe_lines}
    selected: Dict[str, OrderIngredientLine] = {}

    for override in overrides:
        ingredient_id = str(override.ingredient_id)
        line = by_ingredient.get(ingredient_id)
        if line is None:
            logger.debug(f"Skipping override for ingredient {ingredient_id}: not in recipe")
            continue

        amount = _to_number(override.scaled_amount)
        if amount is None or amount < 0:
            logger.debug(
                f"Skipping override for ingredient {ingredient_id}: "
                f"invalid amount {override.scaled_amount!r}"
            )
            continue

        # later overrides for the same ingredient win, first position is kept
        selected[ingredient_id] = OrderIngredientLine(
            ingredient_id=line.ingredient_id,
            scaled_amount=amount,
            unit=override.unit or line.unit
        )

    return list(selected.values())


def plan_item(
        dish: DishRecipe,
        requested_quantity: Any,
        requested_unit: str,
        overrides: Optional[Sequence[IngredientOverride]] = None
) -> PlannedItem:
    """
    Validate unit and quantity for one dish and scale its recipe.

    Raises:
        UnitMismatchError: If requested_unit is not the dish base unit
        InvalidQuantityError: If a quantity is not a positive number
    """
    ensure_unit(requested_unit, dish.base_unit)
    scale = compute_scale(dish.base_quantity, requested_quantity)
    return PlannedItem(
        dish_id=dish.id,
        requested_quantity=float(requested_quantity),
        requested_unit=requested_unit,
        scale_factor=scale,
        lines=scale_recipe(dish.lines, scale, overrides)
    )
