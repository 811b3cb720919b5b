from enum import Enum
from typing import Any, List, Optional, TypeVar

T = TypeVar("T")


class FilterField(str, Enum):
    NAME = "nombre"
    CODE = "codigo"
    PROGRAM = "codigo_carrera"


# Alumnos, profesores y usuarios se identifican por cédula en vez de código
_CAMPOS = {
    FilterField.NAME: ("nombre",),
    FilterField.CODE: ("codigo", "cedula"),
    FilterField.PROGRAM: ("codigo_carrera",),
}


def _valor(item: Any, filter_field: FilterField) -> Optional[str]:
    for nombre in _CAMPOS[filter_field]:
        if isinstance(item, dict):
            valor = item.get(nombre)
        else:
            valor = getattr(item, nombre, None)
        if valor is not None:
            return str(valor)
    return None


def filter_records(
    items: List[T], query: str, filter_field: FilterField = FilterField.NAME
) -> List[T]:
    """
    Filtrar por subcadena sin distinguir mayúsculas, conservando el orden.

    Una búsqueda vacía devuelve la lista completa.
    """
    texto = (query or "").strip().casefold()
    if not texto:
        return list(items)
    return [
        item
        for item in items
        if texto in (_valor(item, filter_field) or "").casefold()
    ]
