from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class Carrera(BaseModel):
    __tablename__ = "carreras"

    codigo = Column(String(10), unique=True, nullable=False, index=True)
    nombre = Column(String(100), nullable=False)
    titulo = Column(String(150), nullable=False)

    # Relationships
    carrera_cursos = relationship(
        "CarreraCurso",
        back_populates="carrera",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
