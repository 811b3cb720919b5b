from typing import Optional

from sqlalchemy.orm import Session

from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.carrera import Carrera
from gestion_academica.schemas.carrera import CarreraCreate, CarreraUpdate


class CRUDCarrera(CRUDBase[Carrera, CarreraCreate, CarreraUpdate]):
    nombre = "Carrera"

    def get_by_codigo(self, db: Session, *, codigo: str) -> Optional[Carrera]:
        return db.query(Carrera).filter(Carrera.codigo == codigo).first()

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Carrera]:
        return self.get_by_codigo(db, codigo=obj_in.codigo)

    def natural_key_label(self, obj_in) -> str:
        return f"el código '{obj_in.codigo}'"


carrera = CRUDCarrera(Carrera)
