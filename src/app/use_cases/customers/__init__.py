"""Customer use cases"""
from .list_customers import ListCustomers
from .create_customer import CreateCustomer
from .update_customer import UpdateCustomer
from .delete_customer import DeleteCustomer
from .dtos import CreateCustomerCommandDTO, UpdateCustomerCommandDTO, CustomerDTO

__all__ = [
    "ListCustomers",
    "CreateCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "CreateCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "CustomerDTO",
]
