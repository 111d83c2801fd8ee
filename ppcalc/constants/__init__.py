from __future__ import annotations

from . import hit_result
from . import mode
from . import mods
