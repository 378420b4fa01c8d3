"""
Suggestion Service - alternative names for a taken domain.
"""

import logging
import random
from typing import List, Optional

logger = logging.getLogger(__name__)


class SuggestionGenerator:
    """
    Generates alternative domain names from a keyword.

    Output order:
    1. Keyword variants (when a keyword is given):
       <keyword><ext>, <keyword>-app<ext>, my-<keyword><ext>
    2. Five random <prefix>-<suffix><ext> pairs
    Truncated to MAX_SUGGESTIONS. Random pairs may repeat, and nothing
    is validated here.
    """

    PREFIXES = ('my', 'app', 'get', 'go', 'the', 'best', 'top', 'pro')
    SUFFIXES = ('app', 'hub', 'zone', 'space', 'lab', 'pro', 'tech', 'io')

    RANDOM_COUNT = 5
    MAX_SUGGESTIONS = 8

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Initialize generator.

        Args:
            rng: Random source to draw from (takes precedence over seed)
            seed: Seed for a private random source
        """
        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = random.Random(seed)
        else:
            self._rng = random.SystemRandom()

    def suggest(self, keyword: Optional[str], extension: Optional[str]) -> List[str]:
        """
        Generate suggestions.

        Args:
            keyword: Base name to build variants from (may be empty)
            extension: Extension appended to every suggestion

        Returns:
            Up to MAX_SUGGESTIONS domain names
        """
        extension = extension or ""
        suggestions = []

        if keyword:
            suggestions.append(f"{keyword}{extension}")
            suggestions.append(f"{keyword}-app{extension}")
            suggestions.append(f"my-{keyword}{extension}")

        for _ in range(self.RANDOM_COUNT):
            prefix = self._rng.choice(self.PREFIXES)
            suffix = self._rng.choice(self.SUFFIXES)
            suggestions.append(f"{prefix}-{suffix}{extension}")

        logger.debug(f"Generated {len(suggestions)} suggestions for keyword '{keyword}'")
        return suggestions[:self.MAX_SUGGESTIONS]
