import os
from dotenv import load_dotenv

load_dotenv()

# Source decoding
ENCODING = os.getenv("LINEGREP_ENCODING", "utf-8")
MALFORMED_LINES = os.getenv("LINEGREP_MALFORMED_LINES", "strict").lower()  # strict | replace

# Logging
LOG_LEVEL = os.getenv("LINEGREP_LOG_LEVEL", "WARNING").upper()
LOG_DIR = os.getenv("LINEGREP_LOG_DIR", "")

# Result export (-o)
OUTPUT_FORMAT = os.getenv("LINEGREP_OUTPUT_FORMAT", "csv").lower()

# Exit statuses
EXIT_MATCHED = 0
EXIT_NO_MATCH = 1
EXIT_FAILURE = 2
