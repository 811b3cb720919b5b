
from .base import CamelModel, Cedula, Nombre, Telefono


class ProfesorBase(CamelModel):
    cedula: Cedula
    nombre: Nombre
    telefono: Telefono = None
    email: Nombre


class ProfesorCreate(ProfesorBase):
    pass


class ProfesorUpdate(ProfesorBase):
    pass


class Profesor(ProfesorBase):
    id: int
