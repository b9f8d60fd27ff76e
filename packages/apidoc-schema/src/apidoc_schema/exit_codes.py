from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_LOAD = 10
ERR_RESOLUTION = 11
ERR_SHAPE = 12
ERR_COMPOSITION = 13
ERR_DRIFT = 14
ERR_INTERNAL = 99
