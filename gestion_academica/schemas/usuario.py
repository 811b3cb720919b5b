from enum import Enum

from .base import CamelModel, Cedula, Texto, texto_opcional


class Rol(str, Enum):
    ADMIN = "admin"
    PROFESOR = "profesor"
    ALUMNO = "alumno"
    REGISTRADOR = "registrador"


class UsuarioBase(CamelModel):
    cedula: Cedula
    rol: Rol


class UsuarioCreate(UsuarioBase):
    clave: Texto


class UsuarioUpdate(UsuarioBase):
    # Si no se envía o viene en blanco, se conserva la clave actual
    clave: texto_opcional() = None


class Usuario(UsuarioBase):
    id: int


class LoginRequest(CamelModel):
    cedula: Texto
    clave: Texto


class LoginResponse(CamelModel):
    user: Usuario
    token: str
