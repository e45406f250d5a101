"""
Fixtures compartidos.

Cada test usa su propia base SQLite en un directorio temporal. La app real se
sirve con TestClient y ``get_db`` se redirige a esa base.
"""
import os
import tempfile

# Antes de importar la app: el engine global no debe crear ./data
os.environ.setdefault("DATABASE_URL", f"sqlite:///{tempfile.mkdtemp()}/pos-import.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from decimal import Decimal  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from app.config.database import create_db_engine, init_db, get_db  # noqa: E402
from app.core.auth.security import hash_password, create_access_token  # noqa: E402
from app.main import app  # noqa: E402
from app.shared.database.models import Product, Sale, SaleItem, User  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'pos.db'}")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Sesión para llamar servicios directamente"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==================== DATOS ====================
# Las fábricas usan sesiones cortas y retornan objetos desconectados, así
# ningún test deja una transacción abierta entre requests.

@pytest.fixture
def make_product(session_factory):
    skus = count(1)

    def _make(name="Café molido", unit_price="5.00", stock=10, sku=None) -> Product:
        with session_factory(expire_on_commit=False) as session:
            product = Product(
                name=name,
                sku=sku or f"SKU-{next(skus):04d}",
                unit_price=Decimal(unit_price),
                stock=stock
            )
            session.add(product)
            session.commit()
            session.refresh(product)
            return product

    return _make


@pytest.fixture
def make_user(session_factory):
    def _make(role="cashier", email=None, password="secret123") -> User:
        with session_factory(expire_on_commit=False) as session:
            user = User(
                name=f"Usuario {role}",
                email=email or f"{role}@pos.test",
                password_hash=hash_password(password),
                role=role
            )
            session.add(user)
            session.commit()
            session.refresh(user)
            return user

    return _make


@pytest.fixture
def manager(make_user):
    return make_user(role="manager")


@pytest.fixture
def cashier(make_user):
    return make_user(role="cashier")


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}


@pytest.fixture
def manager_headers(manager):
    return auth_headers(manager)


@pytest.fixture
def cashier_headers(cashier):
    return auth_headers(cashier)


# ==================== CONSULTAS DE VERIFICACIÓN ====================

@pytest.fixture
def stock_of(session_factory):
    """Stock confirmado de un producto, leído en una sesión nueva"""
    def _stock(product_id: int) -> int:
        with session_factory() as session:
            return session.get(Product, product_id).stock

    return _stock


@pytest.fixture
def row_counts(session_factory):
    """(ventas, items) confirmados en la base"""
    def _counts():
        with session_factory() as session:
            return session.query(Sale).count(), session.query(SaleItem).count()

    return _counts
