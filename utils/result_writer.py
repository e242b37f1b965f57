import csv
import json
import os
import logging
from config import OUTPUT_FORMAT

ENTRY_FIELDS = ["line_number", "text", "is_hit"]
COUNT_FIELDS = ["count"]


def to_records(result):
    """Flattens a SearchResult into export rows."""
    if result.count:
        return [{"count": result.hit_count}]
    return [
        {"line_number": entry.index + 1, "text": entry.text, "is_hit": entry.is_hit}
        for entry in result.entries
    ]


class ResultWriter:
    def __init__(self, output_format=OUTPUT_FORMAT):
        self.output_format = output_format.lower()
        self.logger = logging.getLogger(__name__)

    def save(self, result, filename):
        """
        Saves a search result to the specified filename, replacing any
        previous content. Delegates to specific format handlers based on
        self.output_format. Returns True on success.
        """
        directory = os.path.dirname(filename)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
        except OSError as e:
            self.logger.error(f"Failed to create output directory {directory}: {e}")
            return False

        records = to_records(result)
        if self.output_format == 'json':
            return self._save_json(records, filename)
        fieldnames = COUNT_FIELDS if result.count else ENTRY_FIELDS
        return self._save_csv(records, fieldnames, filename)

    def _save_csv(self, records, fieldnames, filename):
        try:
            with open(filename, 'w', newline='', encoding='utf-8') as f:
                writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction='ignore')
                writer.writeheader()
                for r in records:
                    writer.writerow(r)
        except OSError as e:
            self.logger.error(f"Failed to save CSV results to {filename}: {e}")
            return False
        self.logger.info(f"Saved {len(records)} records to {filename}")
        return True

    def _save_json(self, records, filename):
        try:
            with open(filename, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=4, ensure_ascii=False)
        except OSError as e:
            self.logger.error(f"Failed to save JSON results to {filename}: {e}")
            return False
        self.logger.info(f"Saved {len(records)} records to {filename}")
        return True
