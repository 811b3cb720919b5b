from .alumno import Alumno
from .carrera import Carrera
from .carrera_curso import CarreraCurso
from .ciclo import Ciclo
from .curso import Curso
from .grupo import Grupo
from .matricula import Matricula
from .profesor import Profesor
from .usuario import Usuario

__all__ = [
    "Alumno",
    "Carrera",
    "CarreraCurso",
    "Ciclo",
    "Curso",
    "Grupo",
    "Matricula",
    "Profesor",
    "Usuario",
]
