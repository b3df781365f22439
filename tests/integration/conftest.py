import pytest_asyncio
from datetime import datetime
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
import src.domain  # noqa: F401
from src.adapter.database import create_engine
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.depends import get_password_hasher, get_session
from src.domain.customer import Customer
from src.domain.product import Product
from src.domain.user import User


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a fresh SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'invoicing_test.db'}"

    # Concurrent writers wait for the database lock instead of failing
    engine = create_engine(test_db_url, connect_args={"timeout": 30})

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def tenant_factory(db_session):
    """Create tenant accounts directly in the database"""
    created = []

    async def create(email=None, name="Tenant"):
        user = User(
            name=name,
            email=email or f"tenant{len(created) + 1}@example.com",
            password_hash="not-a-real-hash",
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        created.append(user)
        return user

    return create


@pytest_asyncio.fixture
async def seed(db_session):
    """Insert customers and products for a tenant"""

    class Seeder:
        async def customer(self, tenant_id, name="Acme", email="a@acme.com"):
            customer = Customer(
                tenant_id=tenant_id, name=name, email=email, phone="555-0100", address="",
            )
            db_session.add(customer)
            await db_session.commit()
            await db_session.refresh(customer)
            return customer

        async def product(self, tenant_id, sku="ANV-001", price="50.00", name="Anvil"):
            product = Product(
                tenant_id=tenant_id, name=name, sku=sku, category="Hardware",
                price=Decimal(price), stock=10, description="",
                created_at=datetime.utcnow(), updated_at=datetime.utcnow(),
            )
            db_session.add(product)
            await db_session.commit()
            await db_session.refresh(product)
            return product

    return Seeder()


@pytest_asyncio.fixture
async def app(db_session):
    from src.api.app import create_app
    from config import ApplicationConfig

    class TestConfig(ApplicationConfig):
        ENVIRONMENT = "test"
        CREATE_TABLES_ON_STARTUP = False
        ENABLE_LOGGING_MIDDLEWARE = True

    app = create_app(TestConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    fast_hasher = BcryptPasswordHasher(rounds=4)

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher
    return app


@pytest_asyncio.fixture
async def client(app):
    """Create test client with database session override"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_headers(client):
    """Register tenants through the API and return their bearer headers"""

    async def register(email, name="Tenant", password="secret1"):
        response = await client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}

    return register
