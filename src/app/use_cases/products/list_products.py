"""ListProducts Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.product_repository import ProductRepository
from src.app.use_cases.errors import internal_error
from .create_product import to_product_dto
from .dtos import ProductDTO


class ListProducts:
    """Use Case: List a tenant's products, newest first"""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, tenant_id: int) -> Result[List[ProductDTO]]:
        try:
            products = await self.product_repo.list(tenant_id)
            return Return.ok([to_product_dto(product) for product in products])
        except Exception as e:
            return Return.err(internal_error("Failed to list products", e))
