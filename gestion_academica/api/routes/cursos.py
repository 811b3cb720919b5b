from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.schemas.carrera import Carrera
from gestion_academica.schemas.curso import Curso, CursoCreate, CursoUpdate
from gestion_academica.schemas.grupo import Grupo

router = APIRouter()


@router.get("", response_model=List[Curso])
def get_cursos(db: Session = Depends(get_db)):
    """Lista completa de cursos"""
    return crud.curso.get_multi(db)


@router.get("/codigo/{codigo}", response_model=Curso)
def get_curso_by_codigo(codigo: str, db: Session = Depends(get_db)):
    curso = crud.curso.get_by_codigo(db, codigo=codigo)
    if not curso:
        raise NotFoundError(f"Curso con código {codigo} no encontrado")
    return curso


@router.get("/{curso_id}", response_model=Curso)
def get_curso(curso_id: int, db: Session = Depends(get_db)):
    return crud.curso.get_or_404(db, curso_id)


@router.get("/{curso_id}/grupos", response_model=List[Grupo])
def get_curso_grupos(curso_id: int, db: Session = Depends(get_db)):
    """Grupos abiertos del curso en todos los ciclos"""
    return crud.grupo.get_by_curso_id(db, curso_id=curso_id)


@router.get("/{curso_id}/carreras", response_model=List[Carrera])
def get_curso_carreras(curso_id: int, db: Session = Depends(get_db)):
    """Carreras cuyo plan incluye el curso"""
    return crud.carrera_curso.get_carreras_by_curso(db, curso_id=curso_id)


@router.post("", response_model=Curso, status_code=status.HTTP_201_CREATED)
def create_curso(curso_data: CursoCreate, db: Session = Depends(get_db)):
    return crud.curso.create(db, obj_in=curso_data)


@router.put("/{curso_id}", response_model=Curso)
def update_curso(curso_id: int, curso_data: CursoUpdate, db: Session = Depends(get_db)):
    return crud.curso.update(db, id=curso_id, obj_in=curso_data)


@router.delete("/{curso_id}")
def delete_curso(curso_id: int, db: Session = Depends(get_db)):
    """Eliminar curso (falla si algún grupo lo referencia)"""
    crud.curso.remove(db, id=curso_id)
    return {"message": f"Curso {curso_id} eliminado"}
