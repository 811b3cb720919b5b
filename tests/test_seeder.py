import pytest

from gestion_academica import crud
from gestion_academica.core.seeder import run_seeder


def test_seeder_solo_corre_con_la_base_vacia(db):
    assert run_seeder() is True
    assert run_seeder() is False
    assert len(crud.carrera.get_multi(db)) == 3


def test_seeder_deja_un_solo_ciclo_activo(db):
    run_seeder()
    assert [c.activo for c in crud.ciclo.get_multi(db)] == [True, False]


def test_seeder_crea_admin_con_clave_hasheada(db):
    run_seeder()
    admin = crud.usuario.authenticate(db, cedula="admin01", clave="adminpass")
    assert admin is not None
    assert admin.rol == "admin"


def test_seeder_que_falla_no_deja_datos_a_medias(db, monkeypatch):
    def falla(clave):
        raise RuntimeError("hash no disponible")

    # Los usuarios se crean después de carreras, cursos, profesores y ciclos
    monkeypatch.setattr("gestion_academica.core.seeder.get_password_hash", falla)
    with pytest.raises(RuntimeError):
        run_seeder()

    assert crud.carrera.get_multi(db) == []
    assert crud.ciclo.get_multi(db) == []

    monkeypatch.undo()
    assert run_seeder() is True
    assert len(crud.usuario.get_multi(db)) == 4
