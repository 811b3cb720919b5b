import logging

from sqlalchemy.orm import Session

from gestion_academica.config.database import SessionLocal, init_db
from gestion_academica.core.security import get_password_hash
from gestion_academica.models.alumno import Alumno
from gestion_academica.models.carrera import Carrera
from gestion_academica.models.carrera_curso import CarreraCurso
from gestion_academica.models.ciclo import Ciclo
from gestion_academica.models.curso import Curso
from gestion_academica.models.grupo import Grupo
from gestion_academica.models.matricula import Matricula
from gestion_academica.models.profesor import Profesor
from gestion_academica.models.usuario import Usuario

logger = logging.getLogger(__name__)


def seed_database():
    """
    Poblar la base de datos con datos iniciales.

    Todo se confirma en un solo commit al final; si algo falla no queda
    ninguna sección a medias.
    """

    with SessionLocal() as db:
        try:
            logger.info("Iniciando seeding de la base de datos...")

            # 1. Carreras
            carreras_data = [
                ("C001", "Ingeniería de Software", "Bachiller en Ingeniería de Software"),
                (
                    "C002",
                    "Administración de Empresas",
                    "Licenciado en Administración de Empresas",
                ),
                ("C003", "Diseño Gráfico", "Técnico en Diseño Gráfico"),
            ]
            carreras = {}
            for codigo, nombre, titulo in carreras_data:
                carrera = Carrera(codigo=codigo, nombre=nombre, titulo=titulo)
                db.add(carrera)
                carreras[codigo] = carrera
            db.flush()

            # 2. Cursos
            cursos_data = [
                ("CS101", "Programación Orientada a Objetos", 4, 6),
                ("CS202", "Estructuras de Datos", 4, 6),
                ("BA101", "Contabilidad General", 3, 5),
                ("DG101", "Diseño Digital I", 3, 4),
                ("CS303", "Arquitectura de Software", 4, 5),
            ]
            cursos = {}
            for codigo, nombre, creditos, horas in cursos_data:
                curso = Curso(
                    codigo=codigo,
                    nombre=nombre,
                    creditos=creditos,
                    horas_semanales=horas,
                )
                db.add(curso)
                cursos[codigo] = curso
            db.flush()

            # 3. Profesores
            db.add_all(
                [
                    Profesor(
                        cedula="P001",
                        nombre="Dr. Alan Turing",
                        telefono="11112222",
                        email="alan.turing@example.com",
                    ),
                    Profesor(
                        cedula="P002",
                        nombre="Dra. Ada Lovelace",
                        telefono="33334444",
                        email="ada.lovelace@example.com",
                    ),
                ]
            )

            # 4. Ciclos, sólo el primero queda activo
            db.add_all(
                [
                    Ciclo(
                        anio=2024,
                        numero="1",
                        fecha_inicio="2024-03-01",
                        fecha_fin="2024-07-15",
                        activo=True,
                    ),
                    Ciclo(
                        anio=2024,
                        numero="2",
                        fecha_inicio="2024-08-01",
                        fecha_fin="2024-12-15",
                        activo=False,
                    ),
                ]
            )

            # 5. Usuarios
            usuarios_data = [
                ("user001", "password123", "alumno"),
                ("user002", "password456", "alumno"),
                ("user003", "profpass", "profesor"),
                ("admin01", "adminpass", "admin"),
            ]
            for cedula, clave, rol in usuarios_data:
                db.add(
                    Usuario(cedula=cedula, clave_hash=get_password_hash(clave), rol=rol)
                )

            # 6. Alumnos
            alumnos = {
                "A001": Alumno(
                    cedula="A001",
                    nombre="Alice Wonderland",
                    telefono="88887777",
                    email="alice@example.com",
                    fecha_nacimiento="2002-05-10",
                    codigo_carrera="C001",
                ),
                "A002": Alumno(
                    cedula="A002",
                    nombre="Bob The Builder",
                    telefono="66665555",
                    email="bob@example.com",
                    fecha_nacimiento="2001-09-20",
                    codigo_carrera="C002",
                ),
            }
            db.add_all(alumnos.values())
            db.flush()

            # 7. Planes de estudio, el orden sigue la lista
            planes = {
                "C001": ["CS101", "CS202", "CS303"],
                "C002": ["BA101", "CS101"],
                "C003": ["DG101"],
            }
            for codigo_carrera, codigos_curso in planes.items():
                for orden, codigo_curso in enumerate(codigos_curso):
                    db.add(
                        CarreraCurso(
                            carrera=carreras[codigo_carrera],
                            curso=cursos[codigo_curso],
                            orden=orden,
                        )
                    )
            db.flush()

            # 8. Grupos del ciclo 2024-1
            grupos = {
                "CS101": Grupo(
                    anio=2024,
                    numero_ciclo="1",
                    codigo_curso="CS101",
                    numero_grupo=1,
                    horario="L/W 08:00-10:00",
                    cedula_profesor="P001",
                ),
                "BA101": Grupo(
                    anio=2024,
                    numero_ciclo="1",
                    codigo_curso="BA101",
                    numero_grupo=2,
                    horario="M/J 10:00-12:00",
                    cedula_profesor="P002",
                ),
            }
            db.add_all(grupos.values())
            db.flush()

            # 9. Matrículas con nota
            matriculas_data = [("A001", "CS101", 95), ("A002", "BA101", 88)]
            for cedula, codigo_curso, nota in matriculas_data:
                db.add(
                    Matricula(
                        alumno_id=alumnos[cedula].id,
                        grupo_id=grupos[codigo_curso].id,
                        nota=nota,
                    )
                )
            db.commit()

            logger.info(
                "Seeding completado: %s carreras, %s cursos, %s usuarios",
                len(carreras),
                len(cursos),
                len(usuarios_data),
            )

        except Exception:
            logger.exception("Error durante seeding")
            db.rollback()
            raise


def check_if_seeded(db: Session) -> bool:
    """Verificar si la base de datos ya tiene datos"""
    return db.query(Carrera.id).first() is not None


def run_seeder() -> bool:
    """Ejecutar seeder solo si no hay datos"""
    with SessionLocal() as db:
        if check_if_seeded(db):
            logger.info("Base de datos ya tiene datos, saltando seeding...")
            return False

    seed_database()
    return True


if __name__ == "__main__":
    from gestion_academica.core.logging_config import configure_logging

    configure_logging()
    init_db()
    run_seeder()
