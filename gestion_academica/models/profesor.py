from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class Profesor(BaseModel):
    __tablename__ = "profesores"

    cedula = Column(String(20), unique=True, nullable=False, index=True)
    nombre = Column(String(100), nullable=False)
    telefono = Column(String(15), nullable=True)
    email = Column(String(100), nullable=False)

    # Relationships
    grupos = relationship("Grupo", back_populates="profesor", passive_deletes="all")
