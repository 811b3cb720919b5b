from typing import List

from pydantic import Field

from .alumno import Alumno
from .base import CamelModel, CedulaOpcional, Codigo, Horario


class GrupoBase(CamelModel):
    anio: int
    numero_ciclo: Codigo
    codigo_curso: Codigo
    numero_grupo: int = Field(ge=1)
    horario: Horario = None
    cedula_profesor: CedulaOpcional = None


class GrupoCreate(GrupoBase):
    pass


class GrupoUpdate(GrupoBase):
    pass


class Grupo(GrupoBase):
    id: int


class GrupoConAlumnos(CamelModel):
    grupo: Grupo
    alumnos: List[Alumno] = []
