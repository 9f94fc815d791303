from __future__ import annotations

import re


# ``_`` only opens or closes at a word boundary, so ``snake_case`` stays intact.
UNDERSCORE_OPEN_RE = re.compile(r"(?<!\w)_(?=[^\s_])")
UNDERSCORE_CLOSE_RE = re.compile(r"(?<=[^\s_])_(?!\w)")
