from .unit_of_work import SqlAlchemyUnitOfWork
from .jose_token_service import JoseTokenService
from .bcrypt_password_hasher import BcryptPasswordHasher
from .pdf_service import ReportLabPdfService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "JoseTokenService",
    "BcryptPasswordHasher",
    "ReportLabPdfService",
]
