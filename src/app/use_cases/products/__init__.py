"""Product use cases"""
from .list_products import ListProducts
from .create_product import CreateProduct
from .update_product import UpdateProduct
from .delete_product import DeleteProduct
from .dtos import CreateProductCommandDTO, UpdateProductCommandDTO, ProductDTO

__all__ = [
    "ListProducts",
    "CreateProduct",
    "UpdateProduct",
    "DeleteProduct",
    "CreateProductCommandDTO",
    "UpdateProductCommandDTO",
    "ProductDTO",
]
