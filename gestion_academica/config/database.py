import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool

from .settings import settings

logger = logging.getLogger(__name__)


def _build_engine(url: str):
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # La base en memoria debe compartir una única conexión
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return create_engine(url, echo=settings.debug, **options)

    return create_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        isolation_level="READ COMMITTED",
    )


# Configurar el motor de la base de datos
engine = _build_engine(settings.database_url_sync)


if settings.is_sqlite:

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        """SQLite no aplica RESTRICT / SET NULL sin este pragma"""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Crear una sesión local
SessionLocal = sessionmaker(
    bind=engine, autocommit=False, autoflush=True, expire_on_commit=False
)

Base = declarative_base()


def get_db() -> Iterator[Session]:
    """Obtener una sesión de base de datos con manejo de errores adecuado"""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Ejecutar varias escrituras como una sola unidad.

    Confirma al salir normalmente y revierte ante cualquier excepción.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def test_connection() -> bool:
    try:
        with SessionLocal() as session:
            session.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error("Conexión a la base de datos fallida: %s", e)
        return False


def init_db():
    """Crear las tablas que falten"""
    # Registrar todos los modelos en el metadata
    from gestion_academica import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Tablas de la base de datos inicializadas")


def close_db():
    engine.dispose()
    logger.info("Conexiones a la base de datos cerradas")
