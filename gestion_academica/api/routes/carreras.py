from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.carrera import Carrera, CarreraCreate, CarreraUpdate
from gestion_academica.schemas.carrera_curso import CarreraConCursos

router = APIRouter()


@router.get("", response_model=List[Carrera])
def get_carreras(db: Session = Depends(get_db)):
    """Lista completa de carreras"""
    return crud.carrera.get_multi(db)


@router.get("/codigo/{codigo}", response_model=Carrera)
def get_carrera_by_codigo(codigo: str, db: Session = Depends(get_db)):
    carrera = crud.carrera.get_by_codigo(db, codigo=codigo)
    if not carrera:
        raise NotFoundError(f"Carrera con código {codigo} no encontrada")
    return carrera


@router.get("/{carrera_id}", response_model=Carrera)
def get_carrera(carrera_id: int, db: Session = Depends(get_db)):
    return crud.carrera.get_or_404(db, carrera_id)


@router.get("/{carrera_id}/cursos", response_model=CarreraConCursos)
def get_carrera_cursos(carrera_id: int, db: Session = Depends(get_db)):
    """Cursos del plan de la carrera, ordenados"""
    return crud.carrera_curso.get_cursos_by_carrera(db, carrera_id=carrera_id)


@router.post("", response_model=Carrera, status_code=status.HTTP_201_CREATED)
def create_carrera(carrera_data: CarreraCreate, db: Session = Depends(get_db)):
    return crud.carrera.create(db, obj_in=carrera_data)


@router.put("/{carrera_id}", response_model=Carrera)
def update_carrera(
    carrera_id: int, carrera_data: CarreraUpdate, db: Session = Depends(get_db)
):
    return crud.carrera.update(db, id=carrera_id, obj_in=carrera_data)


@router.delete("/{carrera_id}")
def delete_carrera(carrera_id: int, db: Session = Depends(get_db)):
    """Eliminar carrera junto con su plan de estudios"""
    crud.carrera.remove(db, id=carrera_id)
    return {"message": f"Carrera {carrera_id} eliminada"}
