import pytest

from gestion_academica import crud
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.ciclo import CicloUpdate
from tests.factories import nuevo_ciclo


def _activos(db):
    return [c.id for c in crud.ciclo.get_multi(db) if c.activo]


def test_set_active_es_exclusivo(db):
    primero = nuevo_ciclo(db, numero="1", activo=True)
    segundo = nuevo_ciclo(db, numero="2")
    nuevo_ciclo(db, numero="3")

    crud.ciclo.set_active(db, id=segundo.id)

    assert _activos(db) == [segundo.id]
    assert crud.ciclo.get(db, primero.id).activo is False


def test_set_active_es_idempotente(db):
    ciclo = nuevo_ciclo(db, numero="1")
    nuevo_ciclo(db, numero="2")

    crud.ciclo.set_active(db, id=ciclo.id)
    crud.ciclo.set_active(db, id=ciclo.id)

    assert _activos(db) == [ciclo.id]
    assert crud.ciclo.get_active(db).id == ciclo.id


def test_set_active_inexistente_no_toca_el_activo(db):
    activo = nuevo_ciclo(db, numero="1", activo=True)

    with pytest.raises(NotFoundError):
        crud.ciclo.set_active(db, id=999)

    assert _activos(db) == [activo.id]


def test_crear_ciclo_activo_desactiva_los_demas(db):
    nuevo_ciclo(db, numero="1", activo=True)
    segundo = nuevo_ciclo(db, numero="2", activo=True)

    assert _activos(db) == [segundo.id]


def test_update_a_activo_desactiva_los_demas(db):
    nuevo_ciclo(db, numero="1", activo=True)
    segundo = nuevo_ciclo(db, numero="2")

    crud.ciclo.update(
        db,
        id=segundo.id,
        obj_in=CicloUpdate(anio=2024, numero="2", activo=True),
    )

    assert _activos(db) == [segundo.id]


def test_sin_ciclo_activo_es_not_found(db):
    nuevo_ciclo(db)
    with pytest.raises(NotFoundError):
        crud.ciclo.get_active(db)


def test_ruta_activar_usa_post(client):
    creado = client.post(
        "/ciclos", json={"anio": 2024, "numero": "1", "fechaInicio": "2024-03-01"}
    ).json()
    otro = client.post("/ciclos", json={"anio": 2024, "numero": "2"}).json()

    assert client.get(f"/ciclos/{creado['id']}/activo").status_code == 405

    response = client.post(f"/ciclos/{otro['id']}/activo")
    assert response.status_code == 200
    assert response.json()["activo"] is True
    assert client.get("/ciclos/activo").json()["id"] == otro["id"]

    response = client.put(f"/ciclos/{creado['id']}/activo")
    assert response.status_code == 200
    assert client.get("/ciclos/activo").json()["id"] == creado["id"]


def test_ciclos_por_anio_y_numero(client):
    client.post("/ciclos", json={"anio": 2024, "numero": "1"})
    client.post("/ciclos", json={"anio": 2025, "numero": "1"})

    assert [c["anio"] for c in client.get("/ciclos/anio/2024").json()] == [2024]
    assert client.get("/ciclos/anio/2025/numero/1").json()["anio"] == 2025
    assert client.get("/ciclos/anio/2030/numero/1").status_code == 404


def test_fecha_invalida_es_400(client):
    response = client.post(
        "/ciclos", json={"anio": 2024, "numero": "1", "fechaInicio": "01/03/2024"}
    )
    assert response.status_code == 400
    assert response.json()["kind"] == "validation"
