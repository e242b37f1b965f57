import logging
import re

from linegrep.errors import InvalidPattern
from linegrep.models import MatchMode


class PatternMatcher:
    def __init__(self, config):
        self.config = config
        self.logger = logging.getLogger(__name__)
        self._predicate = self._build_predicate(config)

    def _build_predicate(self, config):
        """
        Builds the match predicate once per invocation.
        Literal mode tests substring containment, pattern mode compiles
        the escaped pattern text.
        """
        if config.mode == MatchMode.LITERAL:
            if config.case_insensitive:
                needle = config.pattern.casefold()
                return lambda text: needle in text.casefold()
            needle = config.pattern
            return lambda text: needle in text

        flags = re.IGNORECASE if config.case_insensitive else 0
        try:
            compiled = re.compile(re.escape(config.pattern), flags)
        except re.error as e:
            raise InvalidPattern(config.pattern, e) from e
        self.logger.debug(f"Compiled pattern: {compiled.pattern!r} (flags={flags})")
        return lambda text: compiled.search(text) is not None

    def matches(self, text):
        return self._predicate(text)

    def classify(self, line):
        matched = self._predicate(line.text)
        if self.config.invert:
            return not matched
        return matched

    def find_hits(self, buffer):
        """Returns the ascending indices of every hit in the buffer."""
        return tuple(line.index for line in buffer if self.classify(line))


def classify(line, config):
    return PatternMatcher(config).classify(line)
