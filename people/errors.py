# people/errors.py


class RegistryError(Exception):
    """
    Base error for registry operations.
    `kind` lets callers tell failures apart without isinstance checks.
    """
    kind = "registry"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    kind = "validation"

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class NotFoundError(RegistryError):
    kind = "not_found"

    def __init__(self, person_id, message: str = "Pessoa não encontrada."):
        super().__init__(message)
        self.person_id = person_id
