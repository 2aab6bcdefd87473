from __future__ import annotations
import os
from pathlib import Path
from typing import List

# Directory holding the newline-delimited word lists.
WORDS_DIR = Path(os.environ.get('SPELLING_BEE_WORDS_DIR', 'static/words'))

CORS_ORIGINS: List[str] = [
    o.strip() for o in os.environ.get('SPELLING_BEE_CORS_ORIGINS', '*').split(',') if o.strip()
]

# Upper bound on puzzles returned by GET /puzzles
PUZZLE_LIMIT = int(os.environ.get('SPELLING_BEE_PUZZLE_LIMIT', '50'))
