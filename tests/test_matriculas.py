import pytest

from gestion_academica import crud
from gestion_academica.core.exceptions import ConflictError, NotFoundError, ValidationError
from gestion_academica.schemas.matricula import MatriculaCreate
from tests.factories import (
    nueva_matricula,
    nuevo_alumno,
    nuevo_ciclo,
    nuevo_curso,
    nuevo_grupo,
)


@pytest.fixture
def historial(db):
    """Alumno con notas 90 (4 créditos), 70 (3 créditos) y una sin nota (2 créditos)"""
    nuevo_ciclo(db)
    alumno = nuevo_alumno(db)
    notas = [("CS101", 4, 90), ("CS202", 3, 70), ("CS303", 2, None)]
    for codigo, creditos, nota in notas:
        nuevo_curso(db, codigo=codigo, creditos=creditos)
        grupo = nuevo_grupo(db, codigo_curso=codigo)
        nueva_matricula(db, alumno.id, grupo.id, nota=nota)
    return alumno


def test_resumen_academico_promedio_ponderado(db, historial):
    resumen = crud.matricula.resumen_academico(db, alumno_id=historial.id)

    assert resumen == {
        "enrolled_count": 3,
        "completed_count": 2,
        "credits_earned": 7,
        "gpa": 81.43,
    }


def test_resumen_sin_notas_es_cero(db):
    alumno = nuevo_alumno(db)
    resumen = crud.matricula.resumen_academico(db, alumno_id=alumno.id)
    assert resumen["gpa"] == 0
    assert resumen["enrolled_count"] == 0


def test_resumen_de_alumno_inexistente(db):
    with pytest.raises(NotFoundError):
        crud.matricula.resumen_academico(db, alumno_id=999)


def test_resumen_por_api_usa_camel_case(client, db, historial):
    response = client.get(f"/alumnos/{historial.id}/resumen")

    assert response.status_code == 200
    assert response.json() == {
        "enrolledCount": 3,
        "completedCount": 2,
        "creditsEarned": 7,
        "gpa": 81.43,
    }


def test_matricula_duplicada_es_conflicto(db):
    nuevo_ciclo(db)
    nuevo_curso(db)
    grupo = nuevo_grupo(db)
    alumno = nuevo_alumno(db)
    nueva_matricula(db, alumno.id, grupo.id)

    with pytest.raises(ConflictError):
        nueva_matricula(db, alumno.id, grupo.id)


def test_matricula_con_referencias_inexistentes(db):
    alumno = nuevo_alumno(db)
    with pytest.raises(ValidationError):
        crud.matricula.create(
            db, obj_in=MatriculaCreate(alumno_id=alumno.id, grupo_id=999)
        )


def test_matricula_con_nota_no_se_elimina(db, historial):
    calificada = crud.matricula.get_by_alumno(db, alumno_id=historial.id)[0]
    with pytest.raises(ConflictError):
        crud.matricula.remove(db, id=calificada.id)


def test_matricula_sin_nota_se_elimina(db, historial):
    pendiente = crud.matricula.get_by_alumno(db, alumno_id=historial.id)[-1]
    crud.matricula.remove(db, id=pendiente.id)
    assert crud.matricula.get(db, pendiente.id) is None


def test_detalle_resuelve_grupo_curso_y_ciclo(db, historial):
    detalles = crud.matricula.get_with_details_by_alumno(db, alumno_id=historial.id)

    assert [d.curso.codigo for d in detalles] == ["CS101", "CS202", "CS303"]
    assert all(d.ciclo.anio == 2024 for d in detalles)
    assert detalles[0].matricula.nota == 90
    assert detalles[2].matricula.nota is None


def test_detalle_por_api(client, db, historial):
    response = client.get(f"/matriculas/alumno/{historial.id}")

    assert response.status_code == 200
    primero = response.json()[0]
    assert primero["matricula"]["alumnoId"] == historial.id
    assert primero["curso"]["horasSemanales"] == 4
    assert primero["ciclo"]["numero"] == "1"


def test_registrar_nota_por_api(client, db):
    nuevo_ciclo(db)
    nuevo_curso(db)
    grupo = nuevo_grupo(db)
    alumno = nuevo_alumno(db)
    matricula = nueva_matricula(db, alumno.id, grupo.id)

    response = client.put(
        f"/matriculas/{matricula.id}",
        json={"alumnoId": alumno.id, "grupoId": grupo.id, "nota": 88},
    )
    assert response.status_code == 200
    assert response.json()["nota"] == 88

    response = client.put(
        f"/matriculas/{matricula.id}",
        json={"alumnoId": alumno.id, "grupoId": grupo.id, "nota": 101},
    )
    assert response.status_code == 400


def test_alumnos_de_grupo_por_api(client, db):
    nuevo_ciclo(db)
    nuevo_curso(db)
    grupo = nuevo_grupo(db)
    alumno = nuevo_alumno(db)
    nueva_matricula(db, alumno.id, grupo.id)

    assert [a["cedula"] for a in client.get(f"/matriculas/grupo/{grupo.id}").json()] == [
        "A001"
    ]
    con_alumnos = client.get(f"/grupos/{grupo.id}/alumnos").json()
    assert con_alumnos["grupo"]["codigoCurso"] == "CS101"
    assert [a["cedula"] for a in con_alumnos["alumnos"]] == ["A001"]
