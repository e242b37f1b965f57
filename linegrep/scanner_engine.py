import logging
import sys

from config import ENCODING, MALFORMED_LINES
from linegrep.context_assembler import assemble
from linegrep.models import SearchResult
from linegrep.output_formatter import format_count, format_entry
from linegrep.pattern_matcher import PatternMatcher
from linegrep.source_reader import read_lines


class SearchEngine:
    def __init__(self, options, encoding=ENCODING, malformed_lines=MALFORMED_LINES):
        self.logger = logging.getLogger(__name__)
        self.options = options
        self.encoding = encoding
        self.malformed_lines = malformed_lines
        # Fails here with InvalidPattern before any source is touched
        self.matcher = PatternMatcher(options.match)

    def run(self, source, sink=None):
        """
        Reads the whole source, computes the complete result and only then
        writes the rendered lines to the sink (stdout by default).
        """
        if sink is None:
            sink = sys.stdout

        buffer = read_lines(source, encoding=self.encoding, errors=self.malformed_lines)
        result = self.search(buffer)
        rendered = self.render(result)

        for text in rendered:
            sink.write(f"{text}\n")
        sink.flush()
        return result

    def search(self, buffer):
        hits = self.matcher.find_hits(buffer)
        self.logger.debug(f"Found {len(hits)} hits in {len(buffer)} lines")

        if self.options.count:
            if not self.options.window.is_empty:
                self.logger.debug("Context window ignored in count mode")
            return SearchResult(hits=hits, count=True)

        entries = assemble(buffer, hits, self.options.window)
        self.logger.debug(f"Assembled {len(entries)} output lines ({len(entries) - len(hits)} context)")
        return SearchResult(hits=hits, entries=entries)

    def render(self, result):
        if result.count:
            return [format_count(result.hit_count)]
        return [format_entry(entry, number=self.options.number) for entry in result.entries]
