from sqlalchemy import Boolean, Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class Ciclo(BaseModel):
    __tablename__ = "ciclos"
    __table_args__ = (
        UniqueConstraint("anio", "numero", name="uq_ciclo_anio_numero"),
    )

    anio = Column(Integer, nullable=False)
    numero = Column(String(10), nullable=False)
    fecha_inicio = Column(String(10), nullable=True)
    fecha_fin = Column(String(10), nullable=True)
    activo = Column(Boolean, nullable=False, default=False)

    # Relationships
    grupos = relationship("Grupo", back_populates="ciclo", passive_deletes="all")
