from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.schemas.alumno import Alumno
from gestion_academica.schemas.matricula import (
    Matricula,
    MatriculaConDetalle,
    MatriculaCreate,
    MatriculaUpdate,
)

router = APIRouter()


@router.get("", response_model=List[Matricula])
def get_matriculas(db: Session = Depends(get_db)):
    return crud.matricula.get_multi(db)


@router.get("/alumno/{alumno_id}", response_model=List[MatriculaConDetalle])
def get_matriculas_by_alumno(alumno_id: int, db: Session = Depends(get_db)):
    """Historial del alumno con grupo, curso y ciclo de cada matrícula"""
    return crud.matricula.get_with_details_by_alumno(db, alumno_id=alumno_id)


@router.get("/grupo/{grupo_id}", response_model=List[Alumno])
def get_alumnos_by_grupo(grupo_id: int, db: Session = Depends(get_db)):
    """Alumnos matriculados en el grupo"""
    return crud.grupo.get_alumnos(db, grupo_id=grupo_id)


@router.get("/{matricula_id}", response_model=Matricula)
def get_matricula(matricula_id: int, db: Session = Depends(get_db)):
    return crud.matricula.get_or_404(db, matricula_id)


@router.post("", response_model=Matricula, status_code=status.HTTP_201_CREATED)
def create_matricula(matricula_data: MatriculaCreate, db: Session = Depends(get_db)):
    """Matricular un alumno en un grupo"""
    return crud.matricula.create(db, obj_in=matricula_data)


@router.put("/{matricula_id}", response_model=Matricula)
def update_matricula(
    matricula_id: int, matricula_data: MatriculaUpdate, db: Session = Depends(get_db)
):
    """Actualizar matrícula, por ejemplo para registrar la nota"""
    return crud.matricula.update(db, id=matricula_id, obj_in=matricula_data)


@router.delete("/{matricula_id}")
def delete_matricula(matricula_id: int, db: Session = Depends(get_db)):
    """Retirar matrícula; no se permite si ya tiene nota"""
    crud.matricula.remove(db, id=matricula_id)
    return {"message": f"Matrícula {matricula_id} eliminada"}
