from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.grupo import (
    Grupo,
    GrupoConAlumnos,
    GrupoCreate,
    GrupoUpdate,
)

router = APIRouter()


@router.get("", response_model=List[Grupo])
def get_grupos(db: Session = Depends(get_db)):
    return crud.grupo.get_multi(db)


@router.get("/curso/{codigo_curso}", response_model=List[Grupo])
def get_grupos_by_curso(codigo_curso: str, db: Session = Depends(get_db)):
    return crud.grupo.get_by_curso(db, codigo_curso=codigo_curso)


@router.get("/profesor/{cedula}", response_model=List[Grupo])
def get_grupos_by_profesor(cedula: str, db: Session = Depends(get_db)):
    """Grupos asignados a un profesor"""
    return crud.grupo.get_by_profesor(db, cedula=cedula)


@router.get("/ciclo/{anio}/{numero}", response_model=List[Grupo])
def get_grupos_by_ciclo(anio: int, numero: str, db: Session = Depends(get_db)):
    return crud.grupo.get_by_ciclo(db, anio=anio, numero=numero)


@router.get(
    "/clave/{anio}/{numero_ciclo}/{codigo_curso}/{numero_grupo}", response_model=Grupo
)
def get_grupo_by_clave(
    anio: int,
    numero_ciclo: str,
    codigo_curso: str,
    numero_grupo: int,
    db: Session = Depends(get_db),
):
    """Grupo por ciclo, curso y número de grupo"""
    grupo = crud.grupo.get_by_clave(
        db,
        anio=anio,
        numero_ciclo=numero_ciclo,
        codigo_curso=codigo_curso,
        numero_grupo=numero_grupo,
    )
    if not grupo:
        raise NotFoundError(
            f"Grupo {numero_grupo} de {codigo_curso} en el ciclo {anio}-{numero_ciclo} "
            "no encontrado"
        )
    return grupo


@router.get("/{grupo_id}", response_model=Grupo)
def get_grupo(grupo_id: int, db: Session = Depends(get_db)):
    return crud.grupo.get_or_404(db, grupo_id)


@router.get("/{grupo_id}/alumnos", response_model=GrupoConAlumnos)
def get_grupo_alumnos(grupo_id: int, db: Session = Depends(get_db)):
    """Grupo con la lista de alumnos matriculados"""
    grupo = crud.grupo.get_or_404(db, grupo_id)
    return {"grupo": grupo, "alumnos": crud.grupo.get_alumnos(db, grupo_id=grupo_id)}


@router.post("", response_model=Grupo, status_code=status.HTTP_201_CREATED)
def create_grupo(grupo_data: GrupoCreate, db: Session = Depends(get_db)):
    """Crear grupo; ciclo, curso y profesor deben existir"""
    return crud.grupo.create(db, obj_in=grupo_data)


@router.put("/{grupo_id}", response_model=Grupo)
def update_grupo(grupo_id: int, grupo_data: GrupoUpdate, db: Session = Depends(get_db)):
    return crud.grupo.update(db, id=grupo_id, obj_in=grupo_data)


@router.delete("/{grupo_id}")
def delete_grupo(grupo_id: int, db: Session = Depends(get_db)):
    crud.grupo.remove(db, id=grupo_id)
    return {"message": f"Grupo {grupo_id} eliminado"}
