from sqlalchemy import Column, String, Integer
from sqlalchemy.orm import relationship
from .base import BaseModel


class Curso(BaseModel):
    __tablename__ = "cursos"

    codigo = Column(String(10), unique=True, nullable=False, index=True)
    nombre = Column(String(100), nullable=False)
    creditos = Column(Integer, nullable=False)
    horas_semanales = Column(Integer, nullable=False)

    # Relationships
    carrera_cursos = relationship(
        "CarreraCurso",
        back_populates="curso",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    grupos = relationship("Grupo", back_populates="curso", passive_deletes="all")
