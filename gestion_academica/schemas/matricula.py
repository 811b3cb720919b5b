from typing import Optional

from pydantic import Field

from .base import CamelModel
from .ciclo import Ciclo
from .curso import Curso
from .grupo import Grupo


class MatriculaBase(CamelModel):
    alumno_id: int
    grupo_id: int
    nota: Optional[int] = Field(default=None, ge=0, le=100)


class MatriculaCreate(MatriculaBase):
    pass


class MatriculaUpdate(MatriculaBase):
    pass


class Matricula(MatriculaBase):
    id: int


class MatriculaConDetalle(CamelModel):
    """Matrícula con su grupo, curso y ciclo; lo que no se resuelve queda en null"""

    matricula: Matricula
    grupo: Optional[Grupo] = None
    curso: Optional[Curso] = None
    ciclo: Optional[Ciclo] = None
