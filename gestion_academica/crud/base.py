from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gestion_academica.config.database import Base
from gestion_academica.core.exceptions import ConflictError, NotFoundError

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Operaciones CRUD por defecto.

    ``nombre`` se usa en los mensajes de error. Las subclases con llave
    natural sobrescriben ``get_by_natural_key`` y ``natural_key_label``
    para que ``create`` y ``update`` rechacen duplicados con ConflictError.
    """

    nombre = "Registro"

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def get_or_404(self, db: Session, id: Any) -> ModelType:
        db_obj = self.get(db, id)
        if db_obj is None:
            raise NotFoundError(f"{self.nombre} con id {id} no encontrado")
        return db_obj

    def get_multi(self, db: Session) -> List[ModelType]:
        """Colección completa en orden de creación"""
        return db.query(self.model).order_by(self.model.id).all()

    def get_by_natural_key(self, db: Session, obj_in: BaseModel) -> Optional[ModelType]:
        return None

    def natural_key_label(self, obj_in: BaseModel) -> str:
        return ""

    def check_conflict(
        self, db: Session, obj_in: BaseModel, exclude_id: Optional[int] = None
    ) -> None:
        existing = self.get_by_natural_key(db, obj_in)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(
                f"Ya existe {self.nombre.lower()} con {self.natural_key_label(obj_in)}"
            )

    def to_columns(self, obj_in: BaseModel) -> Dict[str, Any]:
        return obj_in.model_dump()

    def commit(self, db: Session, mensaje: Optional[str] = None) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(
                mensaje or f"{self.nombre} viola una restricción de integridad"
            ) from e

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        self.check_conflict(db, obj_in)
        db_obj = self.model(**self.to_columns(obj_in))
        db.add(db_obj)
        self.commit(db)
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, *, id: int, obj_in: UpdateSchemaType) -> ModelType:
        """Reemplazo completo del registro; no hay actualización parcial"""
        db_obj = self.get_or_404(db, id)
        self.check_conflict(db, obj_in, exclude_id=db_obj.id)
        for field, value in self.to_columns(obj_in).items():
            setattr(db_obj, field, value)
        self.commit(db)
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, id: int) -> ModelType:
        db_obj = self.get_or_404(db, id)
        db.delete(db_obj)
        self.commit(
            db,
            f"No se puede eliminar {self.nombre.lower()} {id}: está referenciado",
        )
        return db_obj
