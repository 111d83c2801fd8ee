from __future__ import annotations

from . import config
from . import constants
from . import errors
from . import objects
from . import usecases
from . import utils
from . import models
from . import api
from . import init_api
