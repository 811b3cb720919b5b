from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.usuario import Usuario, UsuarioCreate, UsuarioUpdate

router = APIRouter()


@router.get("", response_model=List[Usuario])
def get_usuarios(db: Session = Depends(get_db)):
    return crud.usuario.get_multi(db)


@router.get("/cedula/{cedula}", response_model=Usuario)
def get_usuario_by_cedula(cedula: str, db: Session = Depends(get_db)):
    usuario = crud.usuario.get_by_cedula(db, cedula=cedula)
    if not usuario:
        raise NotFoundError(f"Usuario con cédula {cedula} no encontrado")
    return usuario


@router.get("/{usuario_id}", response_model=Usuario)
def get_usuario(usuario_id: int, db: Session = Depends(get_db)):
    return crud.usuario.get_or_404(db, usuario_id)


@router.post("", response_model=Usuario, status_code=status.HTTP_201_CREATED)
def create_usuario(usuario_data: UsuarioCreate, db: Session = Depends(get_db)):
    """Crear usuario; la clave se guarda como hash"""
    return crud.usuario.create(db, obj_in=usuario_data)


@router.put("/{usuario_id}", response_model=Usuario)
def update_usuario(
    usuario_id: int, usuario_data: UsuarioUpdate, db: Session = Depends(get_db)
):
    return crud.usuario.update(db, id=usuario_id, obj_in=usuario_data)


@router.delete("/{usuario_id}")
def delete_usuario(usuario_id: int, db: Session = Depends(get_db)):
    crud.usuario.remove(db, id=usuario_id)
    return {"message": f"Usuario {usuario_id} eliminado"}
