from pydantic import field_validator

from .base import (
    CamelModel,
    Cedula,
    CodigoOpcional,
    Nombre,
    Telefono,
    texto,
    validar_fecha_iso,
)


class AlumnoBase(CamelModel):
    cedula: Cedula
    nombre: Nombre
    telefono: Telefono = None
    email: Nombre
    fecha_nacimiento: texto(20)
    codigo_carrera: CodigoOpcional = None

    @field_validator("fecha_nacimiento")
    @classmethod
    def check_fecha_nacimiento(cls, value: str) -> str:
        return validar_fecha_iso(value)


class AlumnoCreate(AlumnoBase):
    pass


class AlumnoUpdate(AlumnoBase):
    pass


class Alumno(AlumnoBase):
    id: int


class ResumenAcademico(CamelModel):
    enrolled_count: int
    completed_count: int
    credits_earned: int
    gpa: float
