import pytest

from gestion_academica import crud
from gestion_academica.core.exceptions import ConflictError, NotFoundError
from gestion_academica.schemas.carrera_curso import CarreraCursoUpdate
from tests.factories import nueva_carrera, nuevo_curso


def _plan(db, codigo="C001"):
    return [
        (a.codigo_curso, a.orden)
        for a in crud.carrera_curso.get_by_carrera_codigo(db, codigo=codigo)
    ]


@pytest.fixture
def plan(db):
    """Carrera C001 con los cursos A, B y C en ese orden"""
    nueva_carrera(db)
    for posicion, codigo in enumerate(["A", "B", "C"]):
        nuevo_curso(db, codigo=codigo)
        crud.carrera_curso.agregar_curso(
            db, codigo_carrera="C001", codigo_curso=codigo, posicion=posicion
        )
    return db


def test_agregar_en_orden(plan):
    assert _plan(plan) == [("A", 0), ("B", 1), ("C", 2)]


def test_mover_al_inicio(plan):
    crud.carrera_curso.agregar_curso(
        plan, codigo_carrera="C001", codigo_curso="C", posicion=0
    )
    assert _plan(plan) == [("C", 0), ("A", 1), ("B", 2)]


def test_mover_al_final(plan):
    crud.carrera_curso.agregar_curso(
        plan, codigo_carrera="C001", codigo_curso="A", posicion=2
    )
    assert _plan(plan) == [("B", 0), ("C", 1), ("A", 2)]


def test_posicion_mayor_al_plan_queda_al_final(plan):
    nuevo_curso(plan, codigo="D")
    crud.carrera_curso.agregar_curso(
        plan, codigo_carrera="C001", codigo_curso="D", posicion=10
    )
    assert _plan(plan) == [("A", 0), ("B", 1), ("C", 2), ("D", 3)]


def test_insertar_en_medio_desplaza_a_los_siguientes(plan):
    nuevo_curso(plan, codigo="D")
    crud.carrera_curso.agregar_curso(
        plan, codigo_carrera="C001", codigo_curso="D", posicion=1
    )
    assert _plan(plan) == [("A", 0), ("D", 1), ("B", 2), ("C", 3)]


def test_quitar_cierra_el_hueco(plan):
    b = crud.carrera_curso.get_by_carrera_codigo(plan, codigo="C001")[1]
    crud.carrera_curso.remove(plan, id=b.id)
    assert _plan(plan) == [("A", 0), ("C", 1)]


def test_mover_a_otra_carrera_renumera_ambas(plan):
    nueva_carrera(plan, codigo="C002", nombre="Administración")
    a = crud.carrera_curso.get_by_carrera_codigo(plan, codigo="C001")[0]

    crud.carrera_curso.update(
        plan,
        id=a.id,
        obj_in=CarreraCursoUpdate(codigo_carrera="C002", codigo_curso="A", orden=0),
    )

    assert _plan(plan) == [("B", 0), ("C", 1)]
    assert _plan(plan, "C002") == [("A", 0)]


def test_update_duplicado_es_conflicto(plan):
    a = crud.carrera_curso.get_by_carrera_codigo(plan, codigo="C001")[0]
    with pytest.raises(ConflictError):
        crud.carrera_curso.update(
            plan,
            id=a.id,
            obj_in=CarreraCursoUpdate(codigo_carrera="C001", codigo_curso="B", orden=0),
        )


def test_carrera_o_curso_inexistente(plan):
    with pytest.raises(NotFoundError):
        crud.carrera_curso.agregar_curso(
            plan, codigo_carrera="C999", codigo_curso="A", posicion=0
        )
    with pytest.raises(NotFoundError):
        crud.carrera_curso.agregar_curso(
            plan, codigo_carrera="C001", codigo_curso="Z", posicion=0
        )


def test_eliminar_carrera_elimina_su_plan(plan):
    carrera = crud.carrera.get_by_codigo(plan, codigo="C001")
    crud.carrera.remove(plan, id=carrera.id)
    assert crud.carrera_curso.get_multi(plan) == []


def test_reordenar_por_api(client, plan):
    response = client.post(
        "/carreras-cursos/reordenar",
        json={"codigoCarrera": "C001", "codigoCurso": "C", "posicion": 0},
    )

    assert response.status_code == 200
    assert [(a["codigoCurso"], a["orden"]) for a in response.json()] == [
        ("C", 0),
        ("A", 1),
        ("B", 2),
    ]


def test_cursos_de_carrera_por_api(client, plan):
    carrera = crud.carrera.get_by_codigo(plan, codigo="C001")
    response = client.get(f"/carreras/{carrera.id}/cursos")

    assert response.status_code == 200
    body = response.json()
    assert body["carrera"]["codigo"] == "C001"
    assert [c["curso"]["codigo"] for c in body["cursos"]] == ["A", "B", "C"]
    assert [c["orden"] for c in body["cursos"]] == [0, 1, 2]


def test_carreras_de_curso_por_api(client, plan):
    curso = crud.curso.get_by_codigo(plan, codigo="B")
    response = client.get(f"/cursos/{curso.id}/carreras")

    assert [c["codigo"] for c in response.json()] == ["C001"]
    assert client.get("/cursos/999/carreras").status_code == 404
