# catering/services/category_service.py
import logging
from typing import List

from tortoise.exceptions import IntegrityError

from catering.models.category import Category
from catering.models.ingredient import Ingredient
from catering.schemas.category import CategoryCreateSchema, CategoryUpdateSchema
from catering.exceptions.catalog_exceptions import (
    CategoryNotFoundError,
    CategoryAlreadyExistsError,
    CategoryInUseError
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for managing ingredient categories."""

    @staticmethod
    async def get_all_categories() -> List[Category]:
        return await Category.all().order_by("name")

    @staticmethod
    async def get_category_by_id(category_id: str) -> Category:
        """
        Raises:
            CategoryNotFoundError: If category doesn't exist
        """
        category = await Category.get_or_none(id=category_id)
        if not category:
            raise CategoryNotFoundError(category_id)
        return category

    @staticmethod
    async def create_category(data: CategoryCreateSchema) -> Category:
        """
        Create a category with a unique name.

        Raises:
            CategoryAlreadyExistsError: If the name is taken
        """
        if await Category.exists(name=data.name):
            raise CategoryAlreadyExistsError(data.name)

        try:
            category = await Category.create(name=data.name)
        except IntegrityError:
            raise CategoryAlreadyExistsError(data.name)

        logger.info(f"Category created: {category.id} - {category.name}")
        return category

    @staticmethod
    async def update_category(category_id: str, data: CategoryUpdateSchema) -> Category:
        """
        Raises:
            CategoryNotFoundError: If category doesn't exist
            CategoryAlreadyExistsError: If the new name is taken
        """
        category = await CategoryService.get_category_by_id(category_id)

        if data.name is not None and data.name != category.name:
            if await Category.exists(name=data.name):
                raise CategoryAlreadyExistsError(data.name)
            category.name = data.name
            try:
                await category.save()
            except IntegrityError:
                raise CategoryAlreadyExistsError(data.name)

        return category

    @staticmethod
    async def delete_category(category_id: str) -> None:
        """
        Delete a category that no ingredient references.

        Raises:
            CategoryNotFoundError: If category doesn't exist
            CategoryInUseError: If ingredients still reference it
        """
        category = await CategoryService.get_category_by_id(category_id)

        if await Ingredient.exists(category_id=category.id):
            logger.warning(f"Refusing to delete category {category.id}: ingredients reference it")
            raise CategoryInUseError(category_id)

        await category.delete()
        logger.info(f"Category deleted: {category_id}")
