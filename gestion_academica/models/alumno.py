from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class Alumno(BaseModel):
    __tablename__ = "alumnos"

    cedula = Column(String(20), unique=True, nullable=False, index=True)
    nombre = Column(String(100), nullable=False)
    telefono = Column(String(15), nullable=True)
    email = Column(String(100), nullable=False)
    fecha_nacimiento = Column(String(20), nullable=False)
    # Referencia débil a Carrera.codigo, sin llave foránea
    codigo_carrera = Column(String(10), nullable=True)

    # Relationships
    matriculas = relationship(
        "Matricula", back_populates="alumno", passive_deletes="all"
    )
