from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.config.database import get_db
from gestion_academica.core.exceptions import AuthenticationError
from gestion_academica.core.security import verify_token
from gestion_academica.models.usuario import Usuario

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> Usuario:
    """
    Obtener usuario actual desde el token JWT
    """
    if credentials is None:
        raise AuthenticationError("Falta el token de autenticación")

    cedula = verify_token(credentials.credentials)
    if cedula is None:
        raise AuthenticationError("No se pudo validar las credenciales")

    user = crud.usuario.get_by_cedula(db, cedula=cedula)
    if user is None:
        raise AuthenticationError("No se pudo validar las credenciales")

    return user
