from __future__ import annotations

from . import accuracy
from . import beatmap
from . import stats
from . import statistics
