from __future__ import annotations

from . import combo
from . import leaderboard
from . import performance
from . import stats
from . import synthesis
