import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gestion_academica.api.routes.router import api_router
from gestion_academica.config.database import close_db, init_db, test_connection
from gestion_academica.config.settings import settings
from gestion_academica.core.exceptions import AcademicoError
from gestion_academica.core.logging_config import configure_logging
from gestion_academica.core.seeder import run_seeder
from gestion_academica.schemas.base import ErrorResponse

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

_KIND_POR_STATUS = {
    400: "validation",
    401: "unauthorized",
    403: "unauthorized",
    404: "not_found",
    405: "validation",
    409: "conflict",
}


def error_response(status_code: int, message: str, kind: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message, "kind": kind}
    )


def _mensaje_validacion(exc: RequestValidationError) -> str:
    partes = []
    for error in exc.errors():
        campo = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        partes.append(f"{campo}: {error.get('msg')}" if campo else error.get("msg"))
    return "; ".join(partes) or "Solicitud inválida"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializar la aplicación"""
    configure_logging()
    logger.info("Iniciando Sistema de Gestión Académica v%s...", VERSION)
    init_db()
    if settings.seed_on_startup:
        if run_seeder():
            logger.info("Datos iniciales creados")
    yield
    close_db()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AcademicoError)
    async def academico_error_handler(request: Request, exc: AcademicoError):
        return error_response(exc.status_code, exc.message, exc.kind)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST, _mensaje_validacion(exc), "validation"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(
            exc.status_code,
            str(exc.detail),
            _KIND_POR_STATUS.get(exc.status_code, "server"),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning("Restricción de integridad violada: %s", exc.orig)
        return error_response(
            status.HTTP_409_CONFLICT,
            "La operación viola una restricción de integridad",
            "conflict",
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Error no controlado en %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno del servidor", "server"
        )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sistema de Gestión Académica API",
        description="""
    ## Sistema de Gestión Académica 🎓

    Administración de carreras, cursos, profesores, alumnos, ciclos lectivos,
    grupos y matrículas.

    ### **Credenciales de Prueba** (con `SEED_ON_STARTUP=true`):
    - admin01 / adminpass (admin)
    - user003 / profpass (profesor)
    - user001 / password123 (alumno)

    ### **Errores:**
    Todas las respuestas de error tienen la forma `{"error": "...", "kind": "..."}`
    """,
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(
        api_router,
        responses={
            code: {"model": ErrorResponse} for code in (400, 401, 404, 409, 500)
        },
    )

    @app.get("/", tags=["general"])
    def root():
        """Información general del sistema"""
        return {
            "message": "Sistema de Gestión Académica API",
            "version": VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health", tags=["general"])
    def health_check():
        """Verificación de salud del sistema"""
        database_ok = test_connection()
        return {
            "status": "healthy" if database_ok else "degraded",
            "service": "gestion-academica",
            "version": VERSION,
            "database": "connected" if database_ok else "unavailable",
        }

    return app


app = create_app()


def run():
    uvicorn.run(
        "gestion_academica.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
