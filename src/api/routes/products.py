"""Product API Routes

CRUD for the calling tenant's product catalog.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.product_repository import SqlAlchemyProductRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import get_current_tenant
from src.api.error import ClientError, error_example
from src.api.schemas.product_request import ProductRequestSchema
from src.app.use_cases.auth import TenantIdentityDTO
from src.app.use_cases.products import (
    CreateProduct,
    CreateProductCommandDTO,
    DeleteProduct,
    ListProducts,
    ProductDTO,
    UpdateProduct,
    UpdateProductCommandDTO,
)
from src.depends import get_session

router = APIRouter(prefix="/products", tags=["Products"])

UNAUTHORIZED_RESPONSE = error_example("UNAUTHORIZED", "Unauthorized", "Missing or invalid token")
DUPLICATE_SKU_RESPONSE = error_example("CONFLICT", "SKU already exists", "SKU used by another product")


@router.get("", response_model=List[ProductDTO], responses={401: UNAUTHORIZED_RESPONSE})
async def list_products(
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """List the tenant's products, newest first"""
    result = await ListProducts(SqlAlchemyProductRepository(session)).execute(tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "",
    response_model=ProductDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: error_example("VALIDATION_ERROR", "Invalid price", "Invalid product data"),
        401: UNAUTHORIZED_RESPONSE,
        409: DUPLICATE_SKU_RESPONSE,
    },
)
async def create_product(
    request: ProductRequestSchema,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """
    Create a product.

    **Request body:**
    - `name`, `sku`, `category` (required)
    - `price` (required, number >= 0)
    - `stock` (required, number >= 0)
    - `description` (optional)

    **Returns:**
    - 201: Created product
    - 400: Missing field or non-numeric / negative price or stock
    - 409: SKU already used by this tenant
    """
    use_case = CreateProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(
        CreateProductCommandDTO(tenant_id=tenant.tenant_id, **request.model_dump())
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/{product_id}",
    response_model=ProductDTO,
    responses={
        400: error_example("VALIDATION_ERROR", "Invalid stock quantity", "Invalid product data"),
        401: UNAUTHORIZED_RESPONSE,
        404: error_example("NOT_FOUND", "Product not found", "No such product for this tenant"),
        409: DUPLICATE_SKU_RESPONSE,
    },
)
async def update_product(
    product_id: int,
    request: ProductRequestSchema,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    use_case = UpdateProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(
        UpdateProductCommandDTO(
            tenant_id=tenant.tenant_id,
            product_id=product_id,
            **request.model_dump(),
        )
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{product_id}", responses={401: UNAUTHORIZED_RESPONSE})
async def delete_product(
    product_id: int,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """Delete a product. Unknown ids succeed; existing invoice lines keep their values."""
    use_case = DeleteProduct(SqlAlchemyUnitOfWork(session), SqlAlchemyProductRepository(session))
    result = await use_case.execute(product_id, tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return {"success": True}
