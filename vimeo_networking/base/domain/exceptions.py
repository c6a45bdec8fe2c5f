# (c) Nelen & Schuurmans

from pydantic import ValidationError

__all__ = ["InvalidValue"]


class InvalidValue(ValueError):
    """A value object was updated with values that do not validate."""

    def __init__(self, error: ValidationError):
        self.error = error
        super().__init__(error)

    def __str__(self) -> str:
        details = self.error.errors()[0]
        loc = ",".join([str(x) for x in details["loc"]])
        if not loc:
            return f"invalid value: {details['msg']}"
        return f"invalid value for '{loc}': {details['msg']}"
