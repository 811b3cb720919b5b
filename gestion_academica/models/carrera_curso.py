from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class CarreraCurso(BaseModel):
    __tablename__ = "carrera_cursos"
    __table_args__ = (
        UniqueConstraint("carrera_id", "curso_id", name="uq_carrera_curso"),
    )

    carrera_id = Column(
        Integer, ForeignKey("carreras.id", ondelete="CASCADE"), nullable=False
    )
    curso_id = Column(
        Integer, ForeignKey("cursos.id", ondelete="CASCADE"), nullable=False
    )
    # Posición del curso dentro del plan de la carrera
    orden = Column(Integer, nullable=False, default=0)

    # Relationships
    carrera = relationship("Carrera", back_populates="carrera_cursos")
    curso = relationship("Curso", back_populates="carrera_cursos")

    @property
    def codigo_carrera(self) -> str:
        return self.carrera.codigo

    @property
    def codigo_curso(self) -> str:
        return self.curso.codigo
