from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_CONFIG = 3
ERR_DIRECTORY = 4
ERR_ARTIFACT = 5
ERR_INTERNAL = 99
