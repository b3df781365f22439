"""Unit tests for product use cases"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.products import (
    CreateProduct,
    CreateProductCommandDTO,
    DeleteProduct,
    ListProducts,
    UpdateProduct,
    UpdateProductCommandDTO,
)
from src.domain.product import Product


def make_product(product_id=3, sku="ANV-001"):
    return Product(
        id=product_id,
        tenant_id=1,
        name="Anvil",
        sku=sku,
        category="Hardware",
        price=Decimal("50.00"),
        stock=12,
        description="",
        created_at=datetime.utcnow(),
        updated_at=datetime.utcnow(),
    )


@pytest.fixture
def mock_product_repo():
    repo = MagicMock()
    repo.exists_sku = AsyncMock(return_value=False)

    async def create(product):
        product.id = 3
        return product

    repo.create = AsyncMock(side_effect=create)
    repo.update = AsyncMock(side_effect=lambda product: product)
    repo.get_by_id = AsyncMock(return_value=make_product())
    repo.delete = AsyncMock(return_value=True)
    repo.list = AsyncMock(return_value=[make_product()])
    return repo


def product_command(**overrides):
    data = {
        "tenant_id": 1,
        "name": "Anvil",
        "sku": "ANV-001",
        "category": "Hardware",
        "price": "50",
        "stock": 12,
    }
    data.update(overrides)
    return CreateProductCommandDTO(**data)


@pytest.mark.asyncio
class TestCreateProduct:

    async def test_create_success(self, mock_uow, mock_product_repo):
        result = await CreateProduct(mock_uow, mock_product_repo).execute(product_command())

        assert result.is_ok()
        assert result.value.price == Decimal("50")
        assert result.value.stock == 12
        mock_product_repo.exists_sku.assert_awaited_once_with(1, "ANV-001")
        mock_uow.commit.assert_awaited_once()

    async def test_missing_fields(self, mock_uow, mock_product_repo):
        result = await CreateProduct(mock_uow, mock_product_repo).execute(product_command(category=""))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.message.startswith("Missing required fields")

    @pytest.mark.parametrize("price", ["abc", -1, "NaN", "1.005", "1e30", "1e999999999"])
    async def test_invalid_price(self, price, mock_uow, mock_product_repo):
        result = await CreateProduct(mock_uow, mock_product_repo).execute(product_command(price=price))

        assert result.is_err()
        assert result.error.message == "Invalid price"

    @pytest.mark.parametrize("stock", ["many", -5, "1e999999999"])
    async def test_invalid_stock(self, stock, mock_uow, mock_product_repo):
        result = await CreateProduct(mock_uow, mock_product_repo).execute(product_command(stock=stock))

        assert result.is_err()
        assert result.error.message == "Invalid stock quantity"

    async def test_duplicate_sku(self, mock_uow, mock_product_repo):
        mock_product_repo.exists_sku = AsyncMock(return_value=True)

        result = await CreateProduct(mock_uow, mock_product_repo).execute(product_command())

        assert result.is_err()
        assert result.error.code == "CONFLICT"
        assert result.error.message == "SKU already exists"
        mock_product_repo.create.assert_not_called()

    async def test_duplicate_sku_from_constraint(self, mock_uow, mock_product_repo):
        mock_product_repo.create = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("uq_products_tenant_sku"))
        )

        result = await CreateProduct(mock_uow, mock_product_repo).execute(product_command())

        assert result.is_err()
        assert result.error.code == "CONFLICT"
        mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
class TestUpdateProduct:

    async def test_update_success(self, mock_uow, mock_product_repo):
        command = UpdateProductCommandDTO(
            tenant_id=1, product_id=3, name="Anvil XL", sku="ANV-002", category="Hardware",
            price="75.5", stock="4",
        )

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_ok()
        assert result.value.sku == "ANV-002"
        assert result.value.price == Decimal("75.5")
        assert result.value.stock == 4
        mock_product_repo.exists_sku.assert_awaited_once_with(1, "ANV-002", exclude_id=3)

    async def test_sku_taken_by_other_product(self, mock_uow, mock_product_repo):
        mock_product_repo.exists_sku = AsyncMock(return_value=True)
        command = UpdateProductCommandDTO(
            tenant_id=1, product_id=3, name="Anvil", sku="TAKEN", category="Hardware", price=1, stock=1,
        )

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_err()
        assert result.error.code == "CONFLICT"
        mock_product_repo.update.assert_not_called()

    async def test_missing_product(self, mock_uow, mock_product_repo):
        mock_product_repo.get_by_id = AsyncMock(return_value=None)
        command = UpdateProductCommandDTO(
            tenant_id=1, product_id=99, name="Anvil", sku="ANV-001", category="Hardware", price=1, stock=1,
        )

        result = await UpdateProduct(mock_uow, mock_product_repo).execute(command)

        assert result.is_err()
        assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
class TestDeleteAndListProducts:

    async def test_delete_is_idempotent(self, mock_uow, mock_product_repo):
        mock_product_repo.delete = AsyncMock(return_value=False)

        result = await DeleteProduct(mock_uow, mock_product_repo).execute(99, 1)

        assert result.is_ok()
        mock_uow.commit.assert_awaited_once()

    async def test_list(self, mock_product_repo):
        result = await ListProducts(mock_product_repo).execute(1)

        assert result.is_ok()
        assert [p.sku for p in result.value] == ["ANV-001"]
        mock_product_repo.list.assert_awaited_once_with(1)
