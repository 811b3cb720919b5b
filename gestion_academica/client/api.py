"""
Cliente HTTP del sistema académico.

Cada ruta del backend tiene un método que devuelve los esquemas pydantic ya
validados. Cualquier falla (respuesta de error, servidor caído o timeout) se
convierte en ``ApiError`` con un ``kind`` que la interfaz puede usar sin
interpretar el texto del mensaje.
"""
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter

from gestion_academica.schemas.alumno import Alumno, ResumenAcademico
from gestion_academica.schemas.carrera import Carrera
from gestion_academica.schemas.carrera_curso import CarreraConCursos, CarreraCurso
from gestion_academica.schemas.ciclo import Ciclo
from gestion_academica.schemas.curso import Curso
from gestion_academica.schemas.grupo import Grupo, GrupoConAlumnos
from gestion_academica.schemas.matricula import Matricula, MatriculaConDetalle
from gestion_academica.schemas.profesor import Profesor
from gestion_academica.schemas.usuario import LoginResponse, Usuario

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)

_KIND_POR_STATUS = {
    400: "validation",
    401: "unauthorized",
    403: "unauthorized",
    404: "not_found",
    409: "conflict",
}


class ApiError(Exception):
    def __init__(self, kind: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

    def __repr__(self):
        return f"ApiError(kind={self.kind!r}, status_code={self.status_code})"


def _error_desde_respuesta(response) -> ApiError:
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and "error" in body:
        message = str(body["error"])
        kind = body.get("kind")
    else:
        message = response.text or f"HTTP {response.status_code}"
        kind = None

    if not kind:
        kind = _KIND_POR_STATUS.get(response.status_code, "server")
    return ApiError(kind, message, response.status_code)


class Endpoint(Generic[SchemaType]):
    """Operaciones CRUD estándar sobre una colección del backend"""

    def __init__(self, client: "ApiClient", path: str, schema: Type[SchemaType]):
        self.client = client
        self.path = path
        self.schema = schema

    def list(self) -> List[SchemaType]:
        return self.client.parse(List[self.schema], self.client.get(self.path))

    def get(self, id: int) -> SchemaType:
        return self.schema.model_validate(self.client.get(f"{self.path}/{id}"))

    def create(self, data: BaseModel) -> SchemaType:
        return self.schema.model_validate(self.client.post(self.path, data))

    def update(self, id: int, data: BaseModel) -> SchemaType:
        return self.schema.model_validate(self.client.put(f"{self.path}/{id}", data))

    def delete(self, id: int) -> None:
        self.client.delete(f"{self.path}/{id}")


class ApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        session=None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token: Optional[str] = None

        self.alumnos = Endpoint(self, "/alumnos", Alumno)
        self.carreras = Endpoint(self, "/carreras", Carrera)
        self.cursos = Endpoint(self, "/cursos", Curso)
        self.profesores = Endpoint(self, "/profesores", Profesor)
        self.usuarios = Endpoint(self, "/usuarios", Usuario)
        self.ciclos = Endpoint(self, "/ciclos", Ciclo)
        self.grupos = Endpoint(self, "/grupos", Grupo)
        self.matriculas = Endpoint(self, "/matriculas", Matricula)
        self.carreras_cursos = Endpoint(self, "/carreras-cursos", CarreraCurso)

    # Transporte

    def request(self, method: str, path: str, data: Any = None) -> Any:
        headers = {"accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json", by_alias=True)

        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                json=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise ApiError("connection", f"Tiempo de espera agotado: {e}") from e
        except requests.ConnectionError as e:
            raise ApiError("connection", f"No se pudo conectar: {e}") from e

        if response.status_code >= 400:
            error = _error_desde_respuesta(response)
            logger.debug("%s %s -> %s", method, path, repr(error))
            raise error
        return response.json()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, data: Any = None) -> Any:
        return self.request("POST", path, data)

    def put(self, path: str, data: Any = None) -> Any:
        return self.request("PUT", path, data)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    @staticmethod
    def parse(tipo, data: Any):
        return TypeAdapter(tipo).validate_python(data)

    # Autenticación

    def login(self, cedula: str, clave: str) -> LoginResponse:
        respuesta = LoginResponse.model_validate(
            self.post("/login", {"cedula": cedula, "clave": clave})
        )
        self.token = respuesta.token
        return respuesta

    def me(self) -> Usuario:
        return Usuario.model_validate(self.get("/me"))

    def logout(self) -> None:
        self.token = None

    # Búsquedas por llave natural

    def alumno_por_cedula(self, cedula: str) -> Alumno:
        return Alumno.model_validate(self.get(f"/alumnos/cedula/{cedula}"))

    def profesor_por_cedula(self, cedula: str) -> Profesor:
        return Profesor.model_validate(self.get(f"/profesores/cedula/{cedula}"))

    def usuario_por_cedula(self, cedula: str) -> Usuario:
        return Usuario.model_validate(self.get(f"/usuarios/cedula/{cedula}"))

    def carrera_por_codigo(self, codigo: str) -> Carrera:
        return Carrera.model_validate(self.get(f"/carreras/codigo/{codigo}"))

    def curso_por_codigo(self, codigo: str) -> Curso:
        return Curso.model_validate(self.get(f"/cursos/codigo/{codigo}"))

    # Alumnos y matrículas

    def resumen_academico(self, alumno_id: int) -> ResumenAcademico:
        return ResumenAcademico.model_validate(self.get(f"/alumnos/{alumno_id}/resumen"))

    def historial(self, alumno_id: int) -> List[MatriculaConDetalle]:
        return self.parse(
            List[MatriculaConDetalle], self.get(f"/matriculas/alumno/{alumno_id}")
        )

    def alumnos_de_grupo(self, grupo_id: int) -> List[Alumno]:
        return self.parse(List[Alumno], self.get(f"/matriculas/grupo/{grupo_id}"))

    # Ciclos

    def ciclo_activo(self) -> Ciclo:
        return Ciclo.model_validate(self.get("/ciclos/activo"))

    def ciclos_por_anio(self, anio: int) -> List[Ciclo]:
        return self.parse(List[Ciclo], self.get(f"/ciclos/anio/{anio}"))

    def ciclo_por_anio_numero(self, anio: int, numero: str) -> Ciclo:
        return Ciclo.model_validate(self.get(f"/ciclos/anio/{anio}/numero/{numero}"))

    def activar_ciclo(self, ciclo_id: int) -> Ciclo:
        return Ciclo.model_validate(self.post(f"/ciclos/{ciclo_id}/activo"))

    # Grupos

    def grupos_por_curso(self, codigo_curso: str) -> List[Grupo]:
        return self.parse(List[Grupo], self.get(f"/grupos/curso/{codigo_curso}"))

    def grupos_por_curso_id(self, curso_id: int) -> List[Grupo]:
        return self.parse(List[Grupo], self.get(f"/cursos/{curso_id}/grupos"))

    def grupos_por_profesor(self, cedula: str) -> List[Grupo]:
        return self.parse(List[Grupo], self.get(f"/grupos/profesor/{cedula}"))

    def grupos_por_ciclo(self, anio: int, numero: str) -> List[Grupo]:
        return self.parse(List[Grupo], self.get(f"/grupos/ciclo/{anio}/{numero}"))

    def grupo_por_clave(
        self, anio: int, numero_ciclo: str, codigo_curso: str, numero_grupo: int
    ) -> Grupo:
        return Grupo.model_validate(
            self.get(f"/grupos/clave/{anio}/{numero_ciclo}/{codigo_curso}/{numero_grupo}")
        )

    def grupo_con_alumnos(self, grupo_id: int) -> GrupoConAlumnos:
        return GrupoConAlumnos.model_validate(self.get(f"/grupos/{grupo_id}/alumnos"))

    # Planes de estudio

    def cursos_de_carrera(self, carrera_id: int) -> CarreraConCursos:
        return CarreraConCursos.model_validate(self.get(f"/carreras/{carrera_id}/cursos"))

    def carreras_de_curso(self, curso_id: int) -> List[Carrera]:
        return self.parse(List[Carrera], self.get(f"/cursos/{curso_id}/carreras"))

    def plan_de_carrera(self, codigo_carrera: str) -> List[CarreraCurso]:
        return self.parse(
            List[CarreraCurso], self.get(f"/carreras-cursos/carrera/{codigo_carrera}")
        )

    def reordenar_curso(
        self, codigo_carrera: str, codigo_curso: str, posicion: int
    ) -> List[CarreraCurso]:
        data = {
            "codigoCarrera": codigo_carrera,
            "codigoCurso": codigo_curso,
            "posicion": posicion,
        }
        return self.parse(List[CarreraCurso], self.post("/carreras-cursos/reordenar", data))
