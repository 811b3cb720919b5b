from .base import CamelModel, Codigo, Nombre, Titulo


class CarreraBase(CamelModel):
    codigo: Codigo
    nombre: Nombre
    titulo: Titulo


class CarreraCreate(CarreraBase):
    pass


class CarreraUpdate(CarreraBase):
    pass


class Carrera(CarreraBase):
    id: int
