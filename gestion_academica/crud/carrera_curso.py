import logging
from typing import List

from sqlalchemy.orm import Session

from gestion_academica.config.database import transaction
from gestion_academica.core.exceptions import ConflictError, NotFoundError
from gestion_academica.crud.base import CRUDBase
from gestion_academica.models.carrera import Carrera
from gestion_academica.models.carrera_curso import CarreraCurso
from gestion_academica.models.curso import Curso
from gestion_academica.schemas.carrera import Carrera as CarreraSchema
from gestion_academica.schemas.carrera_curso import (
    CarreraConCursos,
    CarreraCursoCreate,
    CarreraCursoUpdate,
    CursoConOrden,
)
from gestion_academica.schemas.curso import Curso as CursoSchema

logger = logging.getLogger(__name__)


class CRUDCarreraCurso(CRUDBase[CarreraCurso, CarreraCursoCreate, CarreraCursoUpdate]):
    """
    Plan de estudios: asociaciones carrera-curso con un ``orden``.

    Dentro de una carrera los valores de ``orden`` son únicos y contiguos
    desde 0. Cada operación que mueve, agrega o quita un curso renumera la
    carrera completa dentro de una sola transacción.
    """

    nombre = "Asociación carrera-curso"

    def get_multi(self, db: Session) -> List[CarreraCurso]:
        return (
            db.query(CarreraCurso)
            .order_by(CarreraCurso.carrera_id, CarreraCurso.orden, CarreraCurso.id)
            .all()
        )

    def _ordenadas(self, db: Session, carrera_id: int) -> List[CarreraCurso]:
        return (
            db.query(CarreraCurso)
            .filter(CarreraCurso.carrera_id == carrera_id)
            .order_by(CarreraCurso.orden, CarreraCurso.id)
            .all()
        )

    @staticmethod
    def _renumerar(asociaciones: List[CarreraCurso]) -> None:
        for posicion, asociacion in enumerate(asociaciones):
            asociacion.orden = posicion

    @staticmethod
    def _colocar(
        asociaciones: List[CarreraCurso], asociacion: CarreraCurso, posicion: int
    ) -> None:
        if asociacion in asociaciones:
            asociaciones.remove(asociacion)
        asociaciones.insert(min(posicion, len(asociaciones)), asociacion)
        CRUDCarreraCurso._renumerar(asociaciones)

    def _carrera(self, db: Session, codigo: str) -> Carrera:
        carrera = db.query(Carrera).filter(Carrera.codigo == codigo).first()
        if carrera is None:
            raise NotFoundError(f"Carrera con código '{codigo}' no encontrada")
        return carrera

    def _curso(self, db: Session, codigo: str) -> Curso:
        curso = db.query(Curso).filter(Curso.codigo == codigo).first()
        if curso is None:
            raise NotFoundError(f"Curso con código '{codigo}' no encontrado")
        return curso

    def get_by_carrera_codigo(self, db: Session, *, codigo: str) -> List[CarreraCurso]:
        carrera = self._carrera(db, codigo)
        return self._ordenadas(db, carrera.id)

    def agregar_curso(
        self, db: Session, *, codigo_carrera: str, codigo_curso: str, posicion: int
    ) -> CarreraCurso:
        """
        Colocar un curso en la posición indicada del plan de la carrera.

        Si el curso ya estaba en el plan se mueve; si no, se agrega. Los
        demás cursos se desplazan para dejar el orden contiguo. La posición
        se limita al final del plan.
        """
        carrera = self._carrera(db, codigo_carrera)
        curso = self._curso(db, codigo_curso)

        with transaction(db):
            asociaciones = self._ordenadas(db, carrera.id)
            actual = next((a for a in asociaciones if a.curso_id == curso.id), None)
            if actual is None:
                actual = CarreraCurso(carrera=carrera, curso=curso, orden=posicion)
                db.add(actual)
            self._colocar(asociaciones, actual, posicion)

        db.refresh(actual)
        logger.info(
            "Curso %s en posición %s de la carrera %s",
            codigo_curso,
            actual.orden,
            codigo_carrera,
        )
        return actual

    def create(self, db: Session, *, obj_in: CarreraCursoCreate) -> CarreraCurso:
        return self.agregar_curso(
            db,
            codigo_carrera=obj_in.codigo_carrera,
            codigo_curso=obj_in.codigo_curso,
            posicion=obj_in.orden,
        )

    def update(
        self, db: Session, *, id: int, obj_in: CarreraCursoUpdate
    ) -> CarreraCurso:
        asociacion = self.get_or_404(db, id)
        carrera = self._carrera(db, obj_in.codigo_carrera)
        curso = self._curso(db, obj_in.codigo_curso)

        duplicada = (
            db.query(CarreraCurso)
            .filter(
                CarreraCurso.carrera_id == carrera.id,
                CarreraCurso.curso_id == curso.id,
                CarreraCurso.id != id,
            )
            .first()
        )
        if duplicada:
            raise ConflictError(
                f"El curso '{curso.codigo}' ya pertenece a la carrera '{carrera.codigo}'"
            )

        with transaction(db):
            carrera_anterior_id = asociacion.carrera_id
            asociacion.carrera = carrera
            asociacion.curso = curso
            db.flush()
            if carrera_anterior_id != carrera.id:
                self._renumerar(self._ordenadas(db, carrera_anterior_id))
            self._colocar(self._ordenadas(db, carrera.id), asociacion, obj_in.orden)

        db.refresh(asociacion)
        return asociacion

    def remove(self, db: Session, *, id: int) -> CarreraCurso:
        """Quitar un curso del plan y cerrar el hueco en el orden"""
        with transaction(db):
            asociacion = self.get_or_404(db, id)
            carrera_id = asociacion.carrera_id
            db.delete(asociacion)
            db.flush()
            self._renumerar(self._ordenadas(db, carrera_id))
        return asociacion

    def get_cursos_by_carrera(self, db: Session, *, carrera_id: int) -> CarreraConCursos:
        carrera = db.query(Carrera).filter(Carrera.id == carrera_id).first()
        if carrera is None:
            raise NotFoundError(f"Carrera con id {carrera_id} no encontrada")

        return CarreraConCursos(
            carrera=CarreraSchema.model_validate(carrera),
            cursos=[
                CursoConOrden(
                    asociacion_id=a.id,
                    orden=a.orden,
                    curso=CursoSchema.model_validate(a.curso),
                )
                for a in self._ordenadas(db, carrera.id)
            ],
        )

    def get_carreras_by_curso(self, db: Session, *, curso_id: int) -> List[Carrera]:
        if not db.query(Curso.id).filter(Curso.id == curso_id).first():
            raise NotFoundError(f"Curso con id {curso_id} no encontrado")
        return (
            db.query(Carrera)
            .join(CarreraCurso, CarreraCurso.carrera_id == Carrera.id)
            .filter(CarreraCurso.curso_id == curso_id)
            .order_by(Carrera.id)
            .all()
        )


carrera_curso = CRUDCarreraCurso(CarreraCurso)
