from typing import List

from pydantic import Field

from .base import CamelModel, Codigo
from .carrera import Carrera
from .curso import Curso


class CarreraCursoBase(CamelModel):
    codigo_carrera: Codigo
    codigo_curso: Codigo
    orden: int = Field(default=0, ge=0)


class CarreraCursoCreate(CarreraCursoBase):
    pass


class CarreraCursoUpdate(CarreraCursoBase):
    pass


class CarreraCurso(CarreraCursoBase):
    id: int
    carrera_id: int
    curso_id: int


class ReordenarCurso(CamelModel):
    codigo_carrera: Codigo
    codigo_curso: Codigo
    posicion: int = Field(ge=0)


class CursoConOrden(CamelModel):
    asociacion_id: int
    orden: int
    curso: Curso


class CarreraConCursos(CamelModel):
    carrera: Carrera
    cursos: List[CursoConOrden] = []
