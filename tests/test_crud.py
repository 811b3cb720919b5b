import pytest

from gestion_academica import crud
from gestion_academica.core.exceptions import ConflictError, NotFoundError, ValidationError
from gestion_academica.schemas.alumno import AlumnoCreate, AlumnoUpdate
from gestion_academica.schemas.carrera import CarreraCreate, CarreraUpdate
from gestion_academica.schemas.ciclo import CicloCreate
from gestion_academica.schemas.curso import CursoCreate
from gestion_academica.schemas.grupo import GrupoCreate
from gestion_academica.schemas.profesor import ProfesorCreate
from gestion_academica.schemas.usuario import UsuarioCreate
from tests.factories import (
    nueva_carrera,
    nueva_matricula,
    nuevo_alumno,
    nuevo_ciclo,
    nuevo_curso,
    nuevo_grupo,
    nuevo_profesor,
)


def test_create_then_get_devuelve_los_mismos_campos(db):
    datos = AlumnoCreate(
        cedula="A010",
        nombre="Bob The Builder",
        telefono=None,
        email="bob@example.com",
        fecha_nacimiento="2001-09-20",
        codigo_carrera=None,
    )
    creado = crud.alumno.create(db, obj_in=datos)

    leido = crud.alumno.get(db, creado.id)
    assert leido is not None
    assert leido.cedula == "A010"
    assert leido.nombre == "Bob The Builder"
    assert leido.telefono is None
    assert leido.fecha_nacimiento == "2001-09-20"
    assert leido.codigo_carrera is None


@pytest.mark.parametrize(
    "crud_obj, datos",
    [
        (
            crud.alumno,
            AlumnoCreate(
                cedula="A001",
                nombre="Otro",
                email="otro@example.com",
                fecha_nacimiento="2000-01-01",
            ),
        ),
        (crud.carrera, CarreraCreate(codigo="C001", nombre="Otra", titulo="Otro")),
        (
            crud.curso,
            CursoCreate(codigo="CS101", nombre="Otro", creditos=1, horas_semanales=1),
        ),
        (
            crud.profesor,
            ProfesorCreate(cedula="P001", nombre="Otro", email="otro@example.com"),
        ),
        (crud.ciclo, CicloCreate(anio=2024, numero="1")),
        (
            crud.grupo,
            GrupoCreate(anio=2024, numero_ciclo="1", codigo_curso="CS101", numero_grupo=1),
        ),
    ],
)
def test_llave_natural_duplicada_es_conflicto(db, crud_obj, datos):
    nueva_carrera(db)
    nuevo_curso(db)
    nuevo_profesor(db)
    nuevo_alumno(db)
    nuevo_ciclo(db)
    nuevo_grupo(db)

    with pytest.raises(ConflictError):
        crud_obj.create(db, obj_in=datos)


def test_usuario_duplicado_es_conflicto(db):
    crud.usuario.create(db, obj_in=UsuarioCreate(cedula="u1", clave="x", rol="alumno"))
    with pytest.raises(ConflictError):
        crud.usuario.create(
            db, obj_in=UsuarioCreate(cedula="u1", clave="y", rol="profesor")
        )


def test_update_no_puede_tomar_la_llave_de_otro(db):
    nueva_carrera(db, codigo="C001")
    segunda = nueva_carrera(db, codigo="C002", nombre="Administración")

    with pytest.raises(ConflictError):
        crud.carrera.update(
            db,
            id=segunda.id,
            obj_in=CarreraUpdate(codigo="C001", nombre="X", titulo="Y"),
        )


def test_update_conserva_su_propia_llave(db):
    carrera = nueva_carrera(db)
    actualizada = crud.carrera.update(
        db,
        id=carrera.id,
        obj_in=CarreraUpdate(codigo="C001", nombre="Software", titulo="Ingeniero"),
    )
    assert actualizada.nombre == "Software"
    assert actualizada.titulo == "Ingeniero"


@pytest.mark.parametrize(
    "crud_obj", [crud.alumno, crud.carrera, crud.curso, crud.profesor, crud.ciclo]
)
def test_id_inexistente_es_not_found(db, crud_obj):
    with pytest.raises(NotFoundError):
        crud_obj.get_or_404(db, 999)
    with pytest.raises(NotFoundError):
        crud_obj.remove(db, id=999)


def test_update_de_id_inexistente_es_not_found(db):
    datos = AlumnoUpdate(
        cedula="A001",
        nombre="Nadie",
        email="nadie@example.com",
        fecha_nacimiento="2000-01-01",
    )
    with pytest.raises(NotFoundError):
        crud.alumno.update(db, id=999, obj_in=datos)


def test_grupo_con_referencias_inexistentes_es_invalido(db):
    with pytest.raises(ValidationError) as exc:
        nuevo_grupo(db, codigo_curso="XX999", cedula_profesor="P404")
    assert "XX999" in exc.value.message
    assert "P404" in exc.value.message


def test_curso_con_grupos_no_se_puede_eliminar(db):
    curso = nuevo_curso(db)
    nuevo_ciclo(db)
    nuevo_grupo(db)

    with pytest.raises(ConflictError):
        crud.curso.remove(db, id=curso.id)


def test_eliminar_profesor_deja_grupos_sin_profesor(db):
    nuevo_curso(db)
    nuevo_ciclo(db)
    profesor = nuevo_profesor(db)
    grupo = nuevo_grupo(db, cedula_profesor="P001")

    crud.profesor.remove(db, id=profesor.id)

    assert crud.grupo.get(db, grupo.id).cedula_profesor is None


def test_grupos_por_curso_id_inexistente_es_not_found(db):
    with pytest.raises(NotFoundError):
        crud.grupo.get_by_curso_id(db, curso_id=999)


def test_alumnos_de_grupo_en_orden_de_matricula(db):
    nuevo_curso(db)
    nuevo_ciclo(db)
    grupo = nuevo_grupo(db)
    segundo = nuevo_alumno(db, cedula="A002")
    primero = nuevo_alumno(db, cedula="A001")
    nueva_matricula(db, segundo.id, grupo.id)
    nueva_matricula(db, primero.id, grupo.id)

    alumnos = crud.grupo.get_alumnos(db, grupo_id=grupo.id)

    assert [a.cedula for a in alumnos] == ["A002", "A001"]
