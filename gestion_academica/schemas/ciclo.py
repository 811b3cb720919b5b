from typing import Optional

from pydantic import field_validator

from .base import CamelModel, Codigo, FechaOpcional, validar_fecha_iso


class CicloBase(CamelModel):
    anio: int
    numero: Codigo
    fecha_inicio: FechaOpcional = None
    fecha_fin: FechaOpcional = None
    activo: bool = False

    @field_validator("fecha_inicio", "fecha_fin")
    @classmethod
    def check_fechas(cls, value: Optional[str]) -> Optional[str]:
        return validar_fecha_iso(value)


class CicloCreate(CicloBase):
    pass


class CicloUpdate(CicloBase):
    pass


class Ciclo(CicloBase):
    id: int
