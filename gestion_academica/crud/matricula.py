from typing import List, Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from gestion_academica.core.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.alumno import Alumno
from gestion_academica.models.ciclo import Ciclo
from gestion_academica.models.curso import Curso
from gestion_academica.models.grupo import Grupo
from gestion_academica.models.matricula import Matricula
from gestion_academica.schemas.ciclo import Ciclo as CicloSchema
from gestion_academica.schemas.curso import Curso as CursoSchema
from gestion_academica.schemas.grupo import Grupo as GrupoSchema
from gestion_academica.schemas.matricula import (
    Matricula as MatriculaSchema,
    MatriculaConDetalle,
    MatriculaCreate,
    MatriculaUpdate,
)


def _opcional(schema, obj):
    return schema.model_validate(obj) if obj is not None else None


class CRUDMatricula(CRUDBase[Matricula, MatriculaCreate, MatriculaUpdate]):
    nombre = "Matrícula"

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Matricula]:
        return (
            db.query(Matricula)
            .filter(
                Matricula.alumno_id == obj_in.alumno_id,
                Matricula.grupo_id == obj_in.grupo_id,
            )
            .first()
        )

    def natural_key_label(self, obj_in) -> str:
        return f"el alumno {obj_in.alumno_id} en el grupo {obj_in.grupo_id}"

    def check_references(self, db: Session, obj_in) -> None:
        alumno_existe = db.query(Alumno.id).filter(Alumno.id == obj_in.alumno_id).first()
        grupo_existe = db.query(Grupo.id).filter(Grupo.id == obj_in.grupo_id).first()
        if not (alumno_existe and grupo_existe):
            raise ValidationError(
                f"El alumno con id {obj_in.alumno_id} o el grupo con id "
                f"{obj_in.grupo_id} no existe"
            )

    def create(self, db: Session, *, obj_in: MatriculaCreate) -> Matricula:
        self.check_references(db, obj_in)
        return super().create(db, obj_in=obj_in)

    def update(self, db: Session, *, id: int, obj_in: MatriculaUpdate) -> Matricula:
        self.get_or_404(db, id)
        self.check_references(db, obj_in)
        return super().update(db, id=id, obj_in=obj_in)

    def remove(self, db: Session, *, id: int) -> Matricula:
        """Una matrícula con nota registrada no se puede eliminar"""
        db_obj = self.get_or_404(db, id)
        if db_obj.nota is not None:
            raise ConflictError(
                f"La matrícula {id} ya tiene nota registrada y no se puede eliminar"
            )
        return super().remove(db, id=id)

    def get_by_alumno(self, db: Session, *, alumno_id: int) -> List[Matricula]:
        return (
            db.query(Matricula)
            .filter(Matricula.alumno_id == alumno_id)
            .order_by(Matricula.id)
            .all()
        )

    def _detalle_query(self, db: Session, alumno_id: int):
        return (
            db.query(Matricula, Grupo, Curso, Ciclo)
            .outerjoin(Grupo, Matricula.grupo_id == Grupo.id)
            .outerjoin(Curso, Grupo.codigo_curso == Curso.codigo)
            .outerjoin(
                Ciclo,
                and_(Grupo.anio == Ciclo.anio, Grupo.numero_ciclo == Ciclo.numero),
            )
            .filter(Matricula.alumno_id == alumno_id)
            .order_by(Matricula.id)
        )

    def _check_alumno(self, db: Session, alumno_id: int) -> None:
        if not db.query(Alumno.id).filter(Alumno.id == alumno_id).first():
            raise NotFoundError(f"Alumno con id {alumno_id} no encontrado")

    def get_with_details_by_alumno(
        self, db: Session, *, alumno_id: int
    ) -> List[MatriculaConDetalle]:
        """
        Historial del alumno: cada matrícula con su grupo, curso y ciclo.

        Todo se resuelve en una sola consulta con outer joins; si alguna
        parte no existe queda en ``None`` pero la matrícula siempre aparece.
        """
        self._check_alumno(db, alumno_id)
        return [
            MatriculaConDetalle(
                matricula=MatriculaSchema.model_validate(m),
                grupo=_opcional(GrupoSchema, g),
                curso=_opcional(CursoSchema, c),
                ciclo=_opcional(CicloSchema, ci),
            )
            for m, g, c, ci in self._detalle_query(db, alumno_id).all()
        ]

    def resumen_academico(self, db: Session, *, alumno_id: int) -> dict:
        """
        Promedio ponderado por créditos de las matrículas con nota.

        Sólo las matrículas calificadas cuentan como completadas.
        """
        self._check_alumno(db, alumno_id)
        filas = [
            (m.nota, c.creditos if c else 0)
            for m, _, c, _ in self._detalle_query(db, alumno_id).all()
        ]

        calificadas = [(nota, creditos) for nota, creditos in filas if nota is not None]
        creditos_totales = sum(creditos for _, creditos in calificadas)
        suma_ponderada = sum(nota * creditos for nota, creditos in calificadas)
        gpa = 0.0
        if creditos_totales > 0:
            gpa = round(suma_ponderada / creditos_totales, 2)

        return {
            "enrolled_count": len(filas),
            "completed_count": len(calificadas),
            "credits_earned": creditos_totales,
            "gpa": gpa,
        }


matricula = CRUDMatricula(Matricula)
