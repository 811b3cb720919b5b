from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.profesor import Profesor, ProfesorCreate, ProfesorUpdate

router = APIRouter()


@router.get("", response_model=List[Profesor])
def get_profesores(db: Session = Depends(get_db)):
    return crud.profesor.get_multi(db)


@router.get("/cedula/{cedula}", response_model=Profesor)
def get_profesor_by_cedula(cedula: str, db: Session = Depends(get_db)):
    profesor = crud.profesor.get_by_cedula(db, cedula=cedula)
    if not profesor:
        raise NotFoundError(f"Profesor con cédula {cedula} no encontrado")
    return profesor


@router.get("/{profesor_id}", response_model=Profesor)
def get_profesor(profesor_id: int, db: Session = Depends(get_db)):
    return crud.profesor.get_or_404(db, profesor_id)


@router.post("", response_model=Profesor, status_code=status.HTTP_201_CREATED)
def create_profesor(profesor_data: ProfesorCreate, db: Session = Depends(get_db)):
    return crud.profesor.create(db, obj_in=profesor_data)


@router.put("/{profesor_id}", response_model=Profesor)
def update_profesor(
    profesor_id: int, profesor_data: ProfesorUpdate, db: Session = Depends(get_db)
):
    return crud.profesor.update(db, id=profesor_id, obj_in=profesor_data)


@router.delete("/{profesor_id}")
def delete_profesor(profesor_id: int, db: Session = Depends(get_db)):
    """Eliminar profesor; sus grupos quedan sin profesor asignado"""
    crud.profesor.remove(db, id=profesor_id)
    return {"message": f"Profesor {profesor_id} eliminado"}
