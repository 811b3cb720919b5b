from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.schemas.carrera_curso import (
    CarreraCurso,
    CarreraCursoCreate,
    CarreraCursoUpdate,
    ReordenarCurso,
)

router = APIRouter()


@router.get("", response_model=List[CarreraCurso])
def get_carreras_cursos(db: Session = Depends(get_db)):
    """Todas las asociaciones, agrupadas por carrera y en orden"""
    return crud.carrera_curso.get_multi(db)


@router.get("/carrera/{codigo_carrera}", response_model=List[CarreraCurso])
def get_carrera_cursos_by_codigo(codigo_carrera: str, db: Session = Depends(get_db)):
    return crud.carrera_curso.get_by_carrera_codigo(db, codigo=codigo_carrera)


@router.post("", response_model=CarreraCurso, status_code=status.HTTP_201_CREATED)
def add_curso_to_carrera(
    asociacion_data: CarreraCursoCreate, db: Session = Depends(get_db)
):
    """Agregar un curso al plan en la posición ``orden`` (o moverlo si ya está)"""
    return crud.carrera_curso.create(db, obj_in=asociacion_data)


@router.post("/reordenar", response_model=List[CarreraCurso])
def reordenar_curso(datos: ReordenarCurso, db: Session = Depends(get_db)):
    """Mover un curso a otra posición y devolver el plan completo"""
    crud.carrera_curso.agregar_curso(
        db,
        codigo_carrera=datos.codigo_carrera,
        codigo_curso=datos.codigo_curso,
        posicion=datos.posicion,
    )
    return crud.carrera_curso.get_by_carrera_codigo(db, codigo=datos.codigo_carrera)


@router.put("/{asociacion_id}", response_model=CarreraCurso)
def update_carrera_curso(
    asociacion_id: int,
    asociacion_data: CarreraCursoUpdate,
    db: Session = Depends(get_db),
):
    return crud.carrera_curso.update(db, id=asociacion_id, obj_in=asociacion_data)


@router.delete("/{asociacion_id}")
def remove_curso_from_carrera(asociacion_id: int, db: Session = Depends(get_db)):
    """Quitar un curso del plan de la carrera"""
    crud.carrera_curso.remove(db, id=asociacion_id)
    return {"message": f"Asociación {asociacion_id} eliminada"}
