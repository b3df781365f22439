"""UpdateProduct Use Case"""

from datetime import datetime
from sqlalchemy.exc import IntegrityError
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.app.use_cases.errors import conflict, internal_error, not_found
from .create_product import DUPLICATE_SKU_MESSAGE, to_product_dto, validate_product_fields
from .dtos import ProductDTO, UpdateProductCommandDTO


class UpdateProduct:
    """
    Use Case: Replace a product's fields

    Business Rules:
    1. Same field rules as creation
    2. A product missing or owned by another tenant is NOT_FOUND
    3. Moving to a SKU used by another product of the tenant is a CONFLICT
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, command: UpdateProductCommandDTO) -> Result[ProductDTO]:
        parsed = validate_product_fields(command)
        if isinstance(parsed, Error):
            return Return.err(parsed)
        price, stock = parsed
        sku = command.sku.strip()

        try:
            product = await self.product_repo.get_by_id(command.product_id, command.tenant_id)
            if product is None:
                return Return.err(not_found("Product"))

            if await self.product_repo.exists_sku(command.tenant_id, sku, exclude_id=product.id):
                return Return.err(conflict(DUPLICATE_SKU_MESSAGE))

            product.name = command.name.strip()
            product.sku = sku
            product.category = command.category.strip()
            product.price = price
            product.stock = stock
            product.description = (command.description or "").strip()
            product.updated_at = datetime.utcnow()

            updated = await self.product_repo.update(product)
            await self.uow.commit()
            return Return.ok(to_product_dto(updated))

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(conflict(DUPLICATE_SKU_MESSAGE, reason=str(e)))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to update product", e))
