from fastapi import APIRouter

from gestion_academica.api import auth
from gestion_academica.api.routes import (
    alumnos,
    carreras,
    carreras_cursos,
    ciclos,
    cursos,
    grupos,
    matriculas,
    profesores,
    usuarios,
)

api_router = APIRouter()

api_router.include_router(auth.router, tags=["autenticacion"])
api_router.include_router(alumnos.router, prefix="/alumnos", tags=["alumnos"])
api_router.include_router(carreras.router, prefix="/carreras", tags=["carreras"])
api_router.include_router(
    carreras_cursos.router, prefix="/carreras-cursos", tags=["carreras-cursos"]
)
api_router.include_router(cursos.router, prefix="/cursos", tags=["cursos"])
api_router.include_router(profesores.router, prefix="/profesores", tags=["profesores"])
api_router.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"])
api_router.include_router(ciclos.router, prefix="/ciclos", tags=["ciclos"])
api_router.include_router(grupos.router, prefix="/grupos", tags=["grupos"])
api_router.include_router(matriculas.router, prefix="/matriculas", tags=["matriculas"])
