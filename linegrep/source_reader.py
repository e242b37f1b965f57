import logging
import sys

from linegrep.errors import InvalidConfiguration, MalformedLine, SourceUnavailable
from linegrep.models import LineBuffer

STDIN_SOURCE = "-"
MALFORMED_POLICIES = ("strict", "replace")

logger = logging.getLogger(__name__)


def _strip_newline(raw):
    if isinstance(raw, bytes):
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        return raw
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def read_stream(stream, encoding="utf-8", errors="strict", name="<stream>"):
    """
    Consumes an iterable of bytes or str lines into a LineBuffer.
    Bytes lines are decoded one by one so a bad line can be reported
    by number. errors is "strict" (raise MalformedLine) or "replace".
    """
    if errors not in MALFORMED_POLICIES:
        raise InvalidConfiguration("malformed line policy", errors, f"expected one of {', '.join(MALFORMED_POLICIES)}")

    texts = []
    for line_number, raw in enumerate(stream, start=1):
        raw = _strip_newline(raw)
        if isinstance(raw, str):
            texts.append(raw)
            continue
        try:
            texts.append(raw.decode(encoding, errors=errors))
        except UnicodeDecodeError as e:
            raise MalformedLine(line_number, e) from e
        except LookupError as e:
            raise SourceUnavailable(name, f"unknown encoding {encoding!r}") from e
    return LineBuffer(texts)


def read_lines(source, encoding="utf-8", errors="strict"):
    """
    Reads a whole source into memory. source is a file path or "-" for stdin.
    The file is closed as soon as the buffer is populated or reading fails.
    """
    if source == STDIN_SOURCE:
        logger.debug("Reading from standard input")
        stream = getattr(sys.stdin, "buffer", sys.stdin)
        try:
            return read_stream(stream, encoding, errors, name="standard input")
        except OSError as e:
            raise SourceUnavailable("standard input", e.strerror or e) from e

    logger.debug(f"Reading {source} (encoding={encoding}, errors={errors})")
    try:
        with open(source, "rb") as f:
            buffer = read_stream(f, encoding, errors, name=source)
    except OSError as e:
        raise SourceUnavailable(source, e.strerror or e) from e
    logger.debug(f"Read {len(buffer)} lines from {source}")
    return buffer
