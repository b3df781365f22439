"""CreateProduct Use Case"""

from decimal import Decimal
from typing import Optional, Tuple, Union
from sqlalchemy.exc import IntegrityError
from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.app.use_cases.errors import conflict, internal_error, validation_error
from src.domain.pricing import fits_scale, parse_decimal, sanitize_quantity
from src.domain.product import PRICE_PLACES, Product
from .dtos import CreateProductCommandDTO, ProductDTO

DUPLICATE_SKU_MESSAGE = "SKU already exists"


def validate_product_fields(
    command: CreateProductCommandDTO,
) -> Union[Error, Tuple[Decimal, int]]:
    """
    Check product fields

    Returns:
        The first failure, or the parsed (price, stock) pair
    """
    if (
        not command.name.strip()
        or not command.sku.strip()
        or not command.category.strip()
        or command.price is None
        or command.stock is None
    ):
        return validation_error("Missing required fields: name, sku, category, price and stock are required")

    price = parse_decimal(command.price)
    if price is None or price < 0 or not fits_scale(price, PRICE_PLACES):
        return validation_error("Invalid price", field="price")

    stock = parse_decimal(command.stock)
    if stock is None or stock < 0:
        return validation_error("Invalid stock quantity", field="stock")

    return price, sanitize_quantity(stock)


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        sku=product.sku,
        category=product.category,
        price=product.price,
        stock=product.stock,
        description=product.description or "",
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


class CreateProduct:
    """
    Use Case: Create a product for a tenant

    Business Rules:
    1. name, sku, category, price and stock are required
    2. price and stock are numeric and non-negative, price has at most
       two decimals
    3. sku is unique per tenant, a duplicate is a CONFLICT

    Flow:
    1. Validate fields
    2. Reject duplicate SKU
    3. Create product and commit (unique constraint backs step 2)
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, command: CreateProductCommandDTO) -> Result[ProductDTO]:
        parsed = validate_product_fields(command)
        if isinstance(parsed, Error):
            return Return.err(parsed)
        price, stock = parsed
        sku = command.sku.strip()

        try:
            if await self.product_repo.exists_sku(command.tenant_id, sku):
                return Return.err(conflict(DUPLICATE_SKU_MESSAGE))

            product = Product(
                tenant_id=command.tenant_id,
                name=command.name.strip(),
                sku=sku,
                category=command.category.strip(),
                price=price,
                stock=stock,
                description=(command.description or "").strip(),
            )
            created = await self.product_repo.create(product)
            await self.uow.commit()
            return Return.ok(to_product_dto(created))

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(conflict(DUPLICATE_SKU_MESSAGE, reason=str(e)))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to create product", e))
