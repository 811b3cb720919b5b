"""Estado de pantalla: Loading, Success(data) o Error(message, kind)"""
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, TypeVar, Union

from .api import ApiError
from .filters import FilterField, filter_records

T = TypeVar("T")


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T


@dataclass(frozen=True)
class Error:
    message: str
    kind: str = "server"


Resource = Union[Loading, Success, Error]


def load(operacion: Callable[[], T]) -> Resource:
    """Ejecutar una llamada al backend y envolver el resultado"""
    try:
        return Success(operacion())
    except ApiError as e:
        return Error(e.message, e.kind)


@dataclass
class ListState(Generic[T]):
    """
    Última lista completa recibida y su vista filtrada.

    Después de cada alta, baja o modificación la pantalla llama ``reload``
    con la misma función de consulta; nunca se aplican cambios parciales.
    """

    items: List[T] = field(default_factory=list)
    query: str = ""
    filter_field: FilterField = FilterField.NAME
    state: Resource = field(default_factory=Loading)

    def reload(self, fetch: Callable[[], List[T]]) -> Resource:
        self.state = Loading()
        self.state = load(fetch)
        if isinstance(self.state, Success):
            self.items = list(self.state.data)
        return self.state

    def mutate(self, operacion: Callable[[], Any], fetch: Callable[[], List[T]]) -> Resource:
        """Aplicar una escritura y recargar la lista si tuvo éxito"""
        resultado = load(operacion)
        if isinstance(resultado, Error):
            return resultado
        return self.reload(fetch)

    def set_filter(self, query: str, filter_field: FilterField = None) -> None:
        self.query = query
        if filter_field is not None:
            self.filter_field = filter_field

    @property
    def filtered(self) -> List[T]:
        return filter_records(self.items, self.query, self.filter_field)
