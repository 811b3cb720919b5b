from sqlalchemy import (
    Column,
    ForeignKey,
    ForeignKeyConstraint,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from .base import BaseModel


class Grupo(BaseModel):
    __tablename__ = "grupos"
    __table_args__ = (
        UniqueConstraint(
            "anio",
            "numero_ciclo",
            "codigo_curso",
            "numero_grupo",
            name="uq_grupo_natural_key",
        ),
        ForeignKeyConstraint(
            ["anio", "numero_ciclo"],
            ["ciclos.anio", "ciclos.numero"],
            name="fk_grupos_ciclo",
            ondelete="RESTRICT",
            onupdate="CASCADE",
        ),
    )

    anio = Column(Integer, nullable=False)
    numero_ciclo = Column(String(10), nullable=False)
    codigo_curso = Column(
        String(10),
        ForeignKey(
            "cursos.codigo",
            name="fk_grupos_curso",
            ondelete="RESTRICT",
            onupdate="CASCADE",
        ),
        nullable=False,
    )
    numero_grupo = Column(Integer, nullable=False)
    horario = Column(String(100), nullable=True)
    cedula_profesor = Column(
        String(20),
        ForeignKey(
            "profesores.cedula",
            name="fk_grupos_profesor",
            ondelete="SET NULL",
            onupdate="CASCADE",
        ),
        nullable=True,
    )

    # Relationships
    ciclo = relationship("Ciclo", back_populates="grupos")
    curso = relationship("Curso", back_populates="grupos")
    profesor = relationship("Profesor", back_populates="grupos")
    matriculas = relationship(
        "Matricula", back_populates="grupo", passive_deletes="all"
    )
