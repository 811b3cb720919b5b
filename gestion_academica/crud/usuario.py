import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from gestion_academica.core.security import get_password_hash, verify_password
from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.usuario import Usuario
from gestion_academica.schemas.usuario import UsuarioCreate, UsuarioUpdate

logger = logging.getLogger(__name__)


class CRUDUsuario(CRUDBase[Usuario, UsuarioCreate, UsuarioUpdate]):
    nombre = "Usuario"

    def get_by_cedula(self, db: Session, *, cedula: str) -> Optional[Usuario]:
        return db.query(Usuario).filter(Usuario.cedula == cedula).first()

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Usuario]:
        return self.get_by_cedula(db, cedula=obj_in.cedula)

    def natural_key_label(self, obj_in) -> str:
        return f"la cédula '{obj_in.cedula}'"

    def to_columns(self, obj_in) -> Dict[str, Any]:
        data = {"cedula": obj_in.cedula, "rol": obj_in.rol.value}
        if obj_in.clave:
            data["clave_hash"] = get_password_hash(obj_in.clave)
        return data

    def authenticate(self, db: Session, *, cedula: str, clave: str) -> Optional[Usuario]:
        """Autenticar usuario por cédula y clave"""
        user = self.get_by_cedula(db, cedula=cedula)
        if not user:
            return None
        if not verify_password(clave, user.clave_hash):
            logger.info("Clave incorrecta para el usuario %s", cedula)
            return None
        return user


usuario = CRUDUsuario(Usuario)
