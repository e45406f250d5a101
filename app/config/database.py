from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from .settings import settings

# Base class for models
Base = declarative_base()

def create_db_engine(database_url: str) -> Engine:
    """
    Crear engine configurado para la base de datos.

    En SQLite:
    - Se crea el directorio del archivo si no existe
    - Se activan las llaves foráneas (CASCADE / RESTRICT de sale_items)
    - Modo WAL: los lectores no bloquean al escritor
    - Las conexiones con la opción ``sqlite_immediate`` abren con
      BEGIN IMMEDIATE y toman el bloqueo de escritura desde el inicio; así dos
      ventas concurrentes nunca leen el mismo stock previo al descuento
    """
    url = make_url(database_url)
    in_memory = not url.database or url.database == ":memory:"

    if url.get_backend_name() != "sqlite":
        return create_engine(
            database_url,
            pool_pre_ping=True,
            pool_recycle=300,
            echo=settings.debug
        )

    if not in_memory:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        database_url,
        connect_args={
            "check_same_thread": False,
            "timeout": settings.sqlite_busy_timeout
        },
        echo=settings.debug
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Desactivar el BEGIN implícito de pysqlite; lo emitimos en "begin"
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        if not in_memory:
            cursor.execute("PRAGMA journal_mode = WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        if conn.get_execution_options().get("sqlite_immediate"):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")

    return engine

# Create engine
engine = create_db_engine(settings.database_url)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind: Engine = engine):
    """Crear tablas si no existen"""
    # Registrar modelos en el metadata antes de crear
    from app.shared.database import models  # noqa: F401
    Base.metadata.create_all(bind=bind)

# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
