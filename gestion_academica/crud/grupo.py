from typing import List, Optional

from sqlalchemy.orm import Session

from gestion_academica.core.exceptions import NotFoundError, ValidationError
from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.alumno import Alumno
from gestion_academica.models.ciclo import Ciclo
from gestion_academica.models.curso import Curso
from gestion_academica.models.grupo import Grupo
from gestion_academica.models.matricula import Matricula
from gestion_academica.models.profesor import Profesor
from gestion_academica.schemas.grupo import GrupoCreate, GrupoUpdate


class CRUDGrupo(CRUDBase[Grupo, GrupoCreate, GrupoUpdate]):
    nombre = "Grupo"

    def get_by_clave(
        self,
        db: Session,
        *,
        anio: int,
        numero_ciclo: str,
        codigo_curso: str,
        numero_grupo: int,
    ) -> Optional[Grupo]:
        """Grupo por su llave natural: ciclo, curso y número de grupo"""
        return (
            db.query(Grupo)
            .filter(
                Grupo.anio == anio,
                Grupo.numero_ciclo == numero_ciclo,
                Grupo.codigo_curso == codigo_curso,
                Grupo.numero_grupo == numero_grupo,
            )
            .first()
        )

    def get_by_natural_key(self, db: Session, obj_in) -> Optional[Grupo]:
        return self.get_by_clave(
            db,
            anio=obj_in.anio,
            numero_ciclo=obj_in.numero_ciclo,
            codigo_curso=obj_in.codigo_curso,
            numero_grupo=obj_in.numero_grupo,
        )

    def natural_key_label(self, obj_in) -> str:
        return (
            f"número {obj_in.numero_grupo} para el curso '{obj_in.codigo_curso}' "
            f"en el ciclo {obj_in.anio}-{obj_in.numero_ciclo}"
        )

    def check_references(self, db: Session, obj_in) -> None:
        """Verificar que existan el ciclo, el curso y el profesor indicados"""
        faltantes = []
        ciclo = (
            db.query(Ciclo)
            .filter(Ciclo.anio == obj_in.anio, Ciclo.numero == obj_in.numero_ciclo)
            .first()
        )
        if not ciclo:
            faltantes.append(f"ciclo {obj_in.anio}-{obj_in.numero_ciclo}")
        if not db.query(Curso).filter(Curso.codigo == obj_in.codigo_curso).first():
            faltantes.append(f"curso '{obj_in.codigo_curso}'")
        if obj_in.cedula_profesor and not (
            db.query(Profesor).filter(Profesor.cedula == obj_in.cedula_profesor).first()
        ):
            faltantes.append(f"profesor '{obj_in.cedula_profesor}'")

        if faltantes:
            raise ValidationError(f"No existe: {', '.join(faltantes)}")

    def create(self, db: Session, *, obj_in: GrupoCreate) -> Grupo:
        self.check_references(db, obj_in)
        return super().create(db, obj_in=obj_in)

    def update(self, db: Session, *, id: int, obj_in: GrupoUpdate) -> Grupo:
        self.get_or_404(db, id)
        self.check_references(db, obj_in)
        return super().update(db, id=id, obj_in=obj_in)

    def get_by_curso(self, db: Session, *, codigo_curso: str) -> List[Grupo]:
        return (
            db.query(Grupo)
            .filter(Grupo.codigo_curso == codigo_curso)
            .order_by(Grupo.id)
            .all()
        )

    def get_by_curso_id(self, db: Session, *, curso_id: int) -> List[Grupo]:
        curso = db.query(Curso).filter(Curso.id == curso_id).first()
        if curso is None:
            raise NotFoundError(f"Curso con id {curso_id} no encontrado")
        return self.get_by_curso(db, codigo_curso=curso.codigo)

    def get_by_profesor(self, db: Session, *, cedula: str) -> List[Grupo]:
        return (
            db.query(Grupo)
            .filter(Grupo.cedula_profesor == cedula)
            .order_by(Grupo.id)
            .all()
        )

    def get_by_ciclo(self, db: Session, *, anio: int, numero: str) -> List[Grupo]:
        return (
            db.query(Grupo)
            .filter(Grupo.anio == anio, Grupo.numero_ciclo == numero)
            .order_by(Grupo.id)
            .all()
        )

    def get_alumnos(self, db: Session, *, grupo_id: int) -> List[Alumno]:
        """Alumnos matriculados en el grupo, en orden de matrícula"""
        self.get_or_404(db, grupo_id)
        return (
            db.query(Alumno)
            .join(Matricula, Matricula.alumno_id == Alumno.id)
            .filter(Matricula.grupo_id == grupo_id)
            .order_by(Matricula.id)
            .all()
        )


grupo = CRUDGrupo(Grupo)
