import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from gestion_academica.config.database import transaction
from gestion_academica.core.exceptions import NotFoundError
from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.ciclo import Ciclo
from gestion_academica.schemas.ciclo import CicloCreate, CicloUpdate

logger = logging.getLogger(__name__)


class CRUDCiclo(CRUDBase[Ciclo, CicloCreate, CicloUpdate]):
    """
    Ciclos lectivos. Como máximo un ciclo tiene ``activo=True``: cualquier
    escritura que active un ciclo desactiva los demás en la misma transacción.
    """

    nombre = "Ciclo"

    def get_by_anio_numero(
        self, db: Session, *, anio: int, numero: str
    ) -> Optional[Ciclo]:
        return (
            db.query(Ciclo).filter(Ciclo.anio == anio, Ciclo.numero == numero).first()
        )

    def get_by_anio(self, db: Session, *, anio: int) -> List[Ciclo]:
        return db.query(Ciclo).filter(Ciclo.anio == anio).order_by(Ciclo.id).all()

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Ciclo]:
        return self.get_by_anio_numero(db, anio=obj_in.anio, numero=obj_in.numero)

    def natural_key_label(self, obj_in) -> str:
        return f"año {obj_in.anio} y número {obj_in.numero}"

    def get_active(self, db: Session) -> Ciclo:
        ciclo = db.query(Ciclo).filter(Ciclo.activo.is_(True)).first()
        if ciclo is None:
            raise NotFoundError("No hay un ciclo activo")
        return ciclo

    def _desactivar_otros(self, db: Session, id: Optional[int] = None) -> None:
        query = db.query(Ciclo).filter(Ciclo.activo.is_(True))
        if id is not None:
            query = query.filter(Ciclo.id != id)
        query.update({Ciclo.activo: False}, synchronize_session="fetch")

    def create(self, db: Session, *, obj_in: CicloCreate) -> Ciclo:
        self.check_conflict(db, obj_in)
        db_obj = Ciclo(**self.to_columns(obj_in))
        with transaction(db):
            if db_obj.activo:
                self._desactivar_otros(db)
            db.add(db_obj)
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, *, id: int, obj_in: CicloUpdate) -> Ciclo:
        db_obj = self.get_or_404(db, id)
        self.check_conflict(db, obj_in, exclude_id=db_obj.id)
        with transaction(db):
            if obj_in.activo:
                self._desactivar_otros(db, id)
            for field, value in self.to_columns(obj_in).items():
                setattr(db_obj, field, value)
        db.refresh(db_obj)
        return db_obj

    def set_active(self, db: Session, *, id: int) -> Ciclo:
        """Activar un ciclo y desactivar todos los demás (idempotente)"""
        with transaction(db):
            ciclo = self.get_or_404(db, id)
            self._desactivar_otros(db, id)
            ciclo.activo = True
        db.refresh(ciclo)
        logger.info("Ciclo %s-%s marcado como activo", ciclo.anio, ciclo.numero)
        return ciclo


ciclo = CRUDCiclo(Ciclo)
