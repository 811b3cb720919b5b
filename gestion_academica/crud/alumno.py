from typing import Optional

from sqlalchemy.orm import Session

from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.alumno import Alumno
from gestion_academica.schemas.alumno import AlumnoCreate, AlumnoUpdate


class CRUDAlumno(CRUDBase[Alumno, AlumnoCreate, AlumnoUpdate]):
    nombre = "Alumno"

    def get_by_cedula(self, db: Session, *, cedula: str) -> Optional[Alumno]:
        return db.query(Alumno).filter(Alumno.cedula == cedula).first()

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Alumno]:
        return self.get_by_cedula(db, cedula=obj_in.cedula)

    def natural_key_label(self, obj_in) -> str:
        return f"la cédula '{obj_in.cedula}'"


alumno = CRUDAlumno(Alumno)
