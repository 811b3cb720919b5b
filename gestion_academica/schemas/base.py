from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel


def texto(max_length: Optional[int] = None):
    """Texto requerido: se recorta, no puede quedar vacío ni superar la columna"""
    return Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=max_length),
    ]


def _en_blanco_a_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def texto_opcional(max_length: Optional[int] = None):
    """Texto opcional: una cadena en blanco se trata como ausente (null)"""
    return Annotated[
        Optional[
            Annotated[str, StringConstraints(strip_whitespace=True, max_length=max_length)]
        ],
        BeforeValidator(_en_blanco_a_none),
    ]


# Largos alineados con las columnas String(n) de los modelos
Texto = texto()
Codigo = texto(10)
Cedula = texto(20)
Nombre = texto(100)
Titulo = texto(150)

CodigoOpcional = texto_opcional(10)
CedulaOpcional = texto_opcional(20)
Telefono = texto_opcional(15)
Horario = texto_opcional(100)
FechaOpcional = texto_opcional(10)


class CamelModel(BaseModel):
    """Modelo con nombres camelCase en el JSON y snake_case en Python"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


def validar_fecha_iso(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return value
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError("La fecha debe tener formato AAAA-MM-DD")
    return value


class ErrorResponse(BaseModel):
    error: str
    kind: str
