from sqlalchemy import Column, String
from .base import BaseModel


class Usuario(BaseModel):
    __tablename__ = "usuarios"

    cedula = Column(String(20), unique=True, nullable=False, index=True)
    clave_hash = Column(String(255), nullable=False)
    rol = Column(String(50), nullable=False)
