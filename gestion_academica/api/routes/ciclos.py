from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.ciclo import Ciclo, CicloCreate, CicloUpdate

router = APIRouter()


@router.get("", response_model=List[Ciclo])
def get_ciclos(db: Session = Depends(get_db)):
    return crud.ciclo.get_multi(db)


@router.get("/activo", response_model=Ciclo)
def get_ciclo_activo(db: Session = Depends(get_db)):
    """Ciclo lectivo activo"""
    return crud.ciclo.get_active(db)


@router.get("/anio/{anio}", response_model=List[Ciclo])
def get_ciclos_by_anio(anio: int, db: Session = Depends(get_db)):
    return crud.ciclo.get_by_anio(db, anio=anio)


@router.get("/anio/{anio}/numero/{numero}", response_model=Ciclo)
def get_ciclo_by_anio_numero(anio: int, numero: str, db: Session = Depends(get_db)):
    ciclo = crud.ciclo.get_by_anio_numero(db, anio=anio, numero=numero)
    if not ciclo:
        raise NotFoundError(f"Ciclo {anio}-{numero} no encontrado")
    return ciclo


@router.get("/{ciclo_id}", response_model=Ciclo)
def get_ciclo(ciclo_id: int, db: Session = Depends(get_db)):
    return crud.ciclo.get_or_404(db, ciclo_id)


@router.api_route("/{ciclo_id}/activo", methods=["POST", "PUT"], response_model=Ciclo)
def set_ciclo_activo(ciclo_id: int, db: Session = Depends(get_db)):
    """Marcar el ciclo como activo y desactivar los demás"""
    return crud.ciclo.set_active(db, id=ciclo_id)


@router.post("", response_model=Ciclo, status_code=status.HTTP_201_CREATED)
def create_ciclo(ciclo_data: CicloCreate, db: Session = Depends(get_db)):
    return crud.ciclo.create(db, obj_in=ciclo_data)


@router.put("/{ciclo_id}", response_model=Ciclo)
def update_ciclo(ciclo_id: int, ciclo_data: CicloUpdate, db: Session = Depends(get_db)):
    return crud.ciclo.update(db, id=ciclo_id, obj_in=ciclo_data)


@router.delete("/{ciclo_id}")
def delete_ciclo(ciclo_id: int, db: Session = Depends(get_db)):
    """Eliminar ciclo (falla si tiene grupos)"""
    crud.ciclo.remove(db, id=ciclo_id)
    return {"message": f"Ciclo {ciclo_id} eliminado"}
