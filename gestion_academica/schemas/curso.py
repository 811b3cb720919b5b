from pydantic import Field

from .base import CamelModel, Codigo, Nombre, Titulo


class CursoBase(CamelModel):
    codigo: Codigo
    nombre: Nombre
    creditos: int = Field(ge=0)
    horas_semanales: int = Field(ge=0)


class CursoCreate(CursoBase):
    pass


class CursoUpdate(CursoBase):
    pass


class Curso(CursoBase):
    id: int
