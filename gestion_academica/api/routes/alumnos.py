from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.alumno import (
    Alumno,
    AlumnoCreate,
    AlumnoUpdate,
    ResumenAcademico,
)

router = APIRouter()


@router.get("", response_model=List[Alumno])
def get_alumnos(db: Session = Depends(get_db)):
    """Lista completa de alumnos"""
    return crud.alumno.get_multi(db)


@router.get("/cedula/{cedula}", response_model=Alumno)
def get_alumno_by_cedula(cedula: str, db: Session = Depends(get_db)):
    alumno = crud.alumno.get_by_cedula(db, cedula=cedula)
    if not alumno:
        raise NotFoundError(f"Alumno con cédula {cedula} no encontrado")
    return alumno


@router.get("/{alumno_id}", response_model=Alumno)
def get_alumno(alumno_id: int, db: Session = Depends(get_db)):
    return crud.alumno.get_or_404(db, alumno_id)


@router.get("/{alumno_id}/resumen", response_model=ResumenAcademico)
def get_resumen_academico(alumno_id: int, db: Session = Depends(get_db)):
    """Matrículas, cursos completados, créditos ganados y promedio ponderado"""
    return crud.matricula.resumen_academico(db, alumno_id=alumno_id)


@router.post("", response_model=Alumno, status_code=status.HTTP_201_CREATED)
def create_alumno(alumno_data: AlumnoCreate, db: Session = Depends(get_db)):
    """Crear alumno; la cédula debe ser única"""
    return crud.alumno.create(db, obj_in=alumno_data)


@router.put("/{alumno_id}", response_model=Alumno)
def update_alumno(
    alumno_id: int, alumno_data: AlumnoUpdate, db: Session = Depends(get_db)
):
    return crud.alumno.update(db, id=alumno_id, obj_in=alumno_data)


@router.delete("/{alumno_id}")
def delete_alumno(alumno_id: int, db: Session = Depends(get_db)):
    """Eliminar alumno (falla si tiene matrículas)"""
    crud.alumno.remove(db, id=alumno_id)
    return {"message": f"Alumno {alumno_id} eliminado"}
