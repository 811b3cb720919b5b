from typing import List, NamedTuple, Optional, Tuple

from .api import ApiError
from .state import Error


class MenuItem(NamedTuple):
    title: str
    route: str
    roles: Tuple[str, ...]


MENU = (
    MenuItem("Cursos", "courses", ("admin", "profesor", "registrador", "alumno")),
    MenuItem("Programas", "programs", ("admin", "registrador", "alumno")),
    MenuItem("Profesores", "instructors", ("admin", "registrador", "alumno")),
    MenuItem("Estudiantes", "students", ("admin", "profesor", "registrador")),
    MenuItem("Períodos", "terms", ("admin", "registrador", "alumno")),
    MenuItem("Administración", "admin", ("admin",)),
    MenuItem("Mi Historial", "students/{cedula}/history", ("alumno",)),
    MenuItem("Mis Cursos", "instructor/courses", ("profesor",)),
)


def menu_for(rol: Optional[str], cedula: str = "") -> List[MenuItem]:
    """Opciones de navegación visibles para el rol; un rol desconocido no ve nada"""
    return [
        item._replace(route=item.route.format(cedula=cedula))
        for item in MENU
        if rol in item.roles
    ]


_MENSAJES = {
    "unauthorized": "Credenciales inválidas o sesión expirada",
    "connection": "No se pudo conectar con el servidor. Verifique su conexión",
    "server": "Ocurrió un error en el servidor. Intente de nuevo",
}


def friendly_message(error) -> str:
    """Texto para el usuario según el tipo de error"""
    if isinstance(error, (ApiError, Error)):
        return _MENSAJES.get(error.kind, error.message)
    return _MENSAJES["server"]
