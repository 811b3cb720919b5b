from .alumno import alumno
from .carrera import carrera
from .carrera_curso import carrera_curso
from .ciclo import ciclo
from .curso import curso
from .grupo import grupo
from .matricula import matricula
from .profesor import profesor
from .usuario import usuario

__all__ = [
    "alumno",
    "carrera",
    "carrera_curso",
    "ciclo",
    "curso",
    "grupo",
    "matricula",
    "profesor",
    "usuario",
]
