# (c) Nelen & Schuurmans

from .base.domain.exceptions import *  # NOQA
from .base.domain.value_object import ValueObject  # NOQA

# fmt: off
__version__ = '0.1.0.dev0'
# fmt: on
