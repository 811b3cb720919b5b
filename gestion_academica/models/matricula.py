from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class Matricula(BaseModel):
    __tablename__ = "matriculas"
    __table_args__ = (
        UniqueConstraint("alumno_id", "grupo_id", name="uq_matricula_alumno_grupo"),
    )

    alumno_id = Column(Integer, ForeignKey("alumnos.id"), nullable=False)
    grupo_id = Column(Integer, ForeignKey("grupos.id"), nullable=False)
    # Nota final 0-100, nula mientras no se califique
    nota = Column(Integer, nullable=True)

    # Relationships
    alumno = relationship("Alumno", back_populates="matriculas")
    grupo = relationship("Grupo", back_populates="matriculas")
