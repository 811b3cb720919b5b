from typing import Optional

from sqlalchemy.orm import Session

from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.profesor import Profesor
from gestion_academica.schemas.profesor import ProfesorCreate, ProfesorUpdate


class CRUDProfesor(CRUDBase[Profesor, ProfesorCreate, ProfesorUpdate]):
    nombre = "Profesor"

    def get_by_cedula(self, db: Session, *, cedula: str) -> Optional[Profesor]:
        return db.query(Profesor).filter(Profesor.cedula == cedula).first()

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Profesor]:
        return self.get_by_cedula(db, cedula=obj_in.cedula)

    def natural_key_label(self, obj_in) -> str:
        return f"la cédula '{obj_in.cedula}'"

    def remove(self, db: Session, *, id: int) -> Profesor:
        """Los grupos del profesor quedan sin profesor asignado (SET NULL)"""
        db_obj = super().remove(db, id=id)
        db.expire_all()
        return db_obj


profesor = CRUDProfesor(Profesor)
