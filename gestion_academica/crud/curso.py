from typing import Optional

from sqlalchemy.orm import Session

from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.curso import Curso
from gestion_academica.schemas.curso import CursoCreate, CursoUpdate


class CRUDCurso(CRUDBase[Curso, CursoCreate, CursoUpdate]):
    nombre = "Curso"

    def get_by_codigo(self, db: Session, *, codigo: str) -> Optional[Curso]:
        return db.query(Curso).filter(Curso.codigo == codigo).first()

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Curso]:
        return self.get_by_codigo(db, codigo=obj_in.codigo)

    def natural_key_label(self, obj_in) -> str:
        return f"el código '{obj_in.codigo}'"


curso = CRUDCurso(Curso)
