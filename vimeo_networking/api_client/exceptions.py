from http import HTTPStatus

from .error import VimeoError

__all__ = ["ApiException"]


class ApiException(ValueError):
    def __init__(self, error: VimeoError, status: HTTPStatus | int):
        self.error = error
        self.status = status
        super().__init__(error.message)

    def __str__(self):
        return f"{self.status}: {super().__str__()}"
