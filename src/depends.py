from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.database import create_engine
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jose_token_service import JoseTokenService
from src.adapter.services.pdf_service import ReportLabPdfService
from src.app.services.password_hasher import PasswordHasher
from src.app.services.pdf_service import PdfService
from src.app.services.token_service import TokenService

engine = create_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

token_service = JoseTokenService(
    secret=ApplicationConfig.JWT_SECRET,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
    expire_days=ApplicationConfig.TOKEN_EXPIRE_DAYS,
)
password_hasher = BcryptPasswordHasher()
pdf_service = ReportLabPdfService()


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_token_service() -> TokenService:
    return token_service


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_pdf_service() -> PdfService:
    return pdf_service
