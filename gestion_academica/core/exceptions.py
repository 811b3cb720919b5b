"""
Errores de dominio del sistema académico.

Cada error lleva el código HTTP y una etiqueta ``kind`` que se devuelve en el
cuerpo ``{"error": ..., "kind": ...}`` para que el cliente no tenga que
interpretar el texto del mensaje.
"""


class AcademicoError(Exception):
    status_code = 500
    kind = "server"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AcademicoError):
    """Campo requerido vacío o valor inválido"""

    status_code = 400
    kind = "validation"


class AuthenticationError(AcademicoError):
    """Credenciales inválidas"""

    status_code = 401
    kind = "unauthorized"


class NotFoundError(AcademicoError):
    """El id o la llave natural no tiene registro"""

    status_code = 404
    kind = "not_found"


class ConflictError(AcademicoError):
    """Colisión de llave natural o registro referenciado"""

    status_code = 409
    kind = "conflict"
