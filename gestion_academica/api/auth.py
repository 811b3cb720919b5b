import logging
from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gestion_academica import crud
from gestion_academica.api.deps import get_current_user
from gestion_academica.config.database import get_db
from gestion_academica.config.settings import settings
from gestion_academica.core.exceptions import AuthenticationError
from gestion_academica.core.security import create_access_token
from gestion_academica.models.usuario import Usuario
from gestion_academica.schemas.usuario import (
    LoginRequest,
    LoginResponse,
    Usuario as UsuarioSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """
    Login por cédula y clave; devuelve el usuario y un token JWT
    """
    user = crud.usuario.authenticate(
        db, cedula=login_data.cedula, clave=login_data.clave
    )
    if not user:
        raise AuthenticationError("Cédula o clave incorrectas")

    access_token = create_access_token(
        subject=user.cedula,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    logger.info("Inicio de sesión de %s (%s)", user.cedula, user.rol)
    return {"user": user, "token": access_token}


@router.get("/me", response_model=UsuarioSchema)
def get_current_user_info(current_user: Usuario = Depends(get_current_user)):
    """Usuario dueño del token"""
    return current_user
