"""
Pytest Configuration and Shared Fixtures

Tests run against an in-memory SQLite database (aiosqlite) shared through a
StaticPool, and a fake image store standing in for Cloudinary.
"""

import io
import json
import os

import pytest
import pytest_asyncio
from fastapi import UploadFile
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.pop("CLOUDINARY_URL", None)

from applicant_service.api.dependencies import get_image_store  # noqa: E402
from applicant_service.db.database import Base, get_db  # noqa: E402
from applicant_service.main import app  # noqa: E402
from factories import FakeImageStore  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"
APPLICANTS_URL = "/api/v1/applicants"


@pytest_asyncio.fixture
async def test_engine():
    """Fresh in-memory database with all tables created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


@pytest_asyncio.fixture
async def db(session_factory):
    """Database session for service-level tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def image_store():
    return FakeImageStore()


@pytest_asyncio.fixture
async def client(session_factory, image_store):
    """HTTP client with the test database and fake image store wired in."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_store] = lambda: image_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def applicant_payload():
    """Valid create payload (the ``data`` multipart field)."""
    return {
        "solicitante": {
            "nombre": "María",
            "apellidoPaterno": "Hernández",
            "apellidoMaterno": "Ramírez",
            "fechaNacimiento": "1990-04-12",
            "telefono": "5512345678",
            "correo": "maria@example.com"
        },
        "domicilio": {
            "calle": "Av. Juárez",
            "numeroExterior": "120",
            "numeroInterior": "4B",
            "colonia": "Centro",
            "municipio": "Cuauhtémoc",
            "estado": "CDMX",
            "codigoPostal": "06000"
        },
        "formulario": {
            "ocupacion": "Comerciante",
            "ingresoMensual": "8500.00",
            "dependientes": 2,
            "tipoVivienda": "Rentada",
            "observaciones": "Sin observaciones"
        }
    }


@pytest.fixture
def photo_file():
    """Multipart tuple for one photo."""
    return ("foto.jpg", b"\xff\xd8\xff\xe0fake-jpeg-bytes", "image/jpeg")


@pytest.fixture
def make_upload():
    """Build starlette UploadFile objects for service-level tests."""
    def _make(content: bytes = b"fake-png-bytes", filename: str = "foto.png") -> UploadFile:
        return UploadFile(file=io.BytesIO(content), filename=filename)
    return _make


@pytest.fixture
def create_request(client, applicant_payload, photo_file):
    """POST a create request; keyword args override payload or photos."""
    async def _post(payload=None, photos=None):
        files = [("fotoSolicitante", photo_file)] if photos is None else photos
        body = applicant_payload if payload is None else payload
        data = {"data": body if isinstance(body, str) else json.dumps(body)}
        return await client.post(APPLICANTS_URL, data=data, files=files or None)
    return _post


@pytest.fixture
def seed(session_factory):
    """Insert rows directly, bypassing the workflow."""
    async def _seed(*entities):
        async with session_factory() as session:
            session.add_all(entities)
            await session.commit()
        return entities
    return _seed
