from .cache_control import *  # NOQA
from .calls import *  # NOQA
from .codec import *  # NOQA
from .error import *  # NOQA
from .error_extractor import *  # NOQA
from .exceptions import *  # NOQA
from .query import *  # NOQA
from .response import *  # NOQA
