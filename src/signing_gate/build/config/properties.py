"""
Reader for flat Java-style .properties files such as key.properties.

Follows the line syntax of java.util.Properties.load: comments, line
continuations, '=', ':' or whitespace separators, and backslash escapes.
"""
import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Tuple, Union

from .exceptions import PropertiesReadException, PropertiesSyntaxException

logger = logging.getLogger(__name__)

# Properties.load(InputStream) reads ISO-8859-1
DEFAULT_ENCODING = 'latin-1'

_WHITESPACE = ' \t\f'
_SEPARATORS = '=:'
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, logical_line) pairs, joining continuations."""
    pending = None
    start = 0
    for number, raw in enumerate(_LINE_BREAK.split(text), start=1):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in '#!':
                continue
            start = number
            pending = ''

        trailing = len(line) - len(line.rstrip('\\'))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue

        yield start, pending + line
        pending = None

    if pending is not None:
        yield start, pending


def _unescape(value: str, line_number: int) -> str:
    out = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != '\\' or i + 1 >= len(value):
            out.append(ch)
            i += 1
            continue
        nxt = value[i + 1]
        if nxt == 'u':
            digits = value[i + 2:i + 6]
            if len(digits) != 4 or any(c not in '0123456789abcdefABCDEF' for c in digits):
                raise PropertiesSyntaxException(
                    f"Malformed \\uxxxx encoding: '\\u{digits}'", line_number=line_number)
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return ''.join(out)


def _split_entry(line: str) -> Tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value."""
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == '\\':
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]

    # Skip whitespace, at most one '=' or ':', then whitespace again
    j = i
    while j < len(line) and line[j] in _WHITESPACE:
        j += 1
    if j < len(line) and line[j] in _SEPARATORS:
        j += 1
        while j < len(line) and line[j] in _WHITESPACE:
            j += 1
    return key, line[j:]


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse .properties text into a dictionary.

    Later duplicates win. A key with an empty value is kept with value ''.

    Args:
        text: Content of a .properties file

    Returns:
        Mapping of property names to values, in file order

    Raises:
        PropertiesSyntaxException: If a \\u escape is malformed
    """
    properties: Dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, line_number)
        properties[key] = _unescape(raw_value, line_number)
    return properties


def load_properties(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> Dict[str, str]:
    """
    Load a .properties file from disk.

    Args:
        path: File to read
        encoding: Text encoding (ISO-8859-1 unless told otherwise)

    Returns:
        Mapping of property names to values

    Raises:
        PropertiesReadException: If the file cannot be opened or decoded
        PropertiesSyntaxException: If the content cannot be parsed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding=encoding, newline='') as f:
            text = f.read()
    except (OSError, LookupError, UnicodeDecodeError) as e:
        raise PropertiesReadException(f"Cannot read {path}: {e}",
                                      properties_file=str(path)) from e

    try:
        properties = parse_properties(text)
    except PropertiesSyntaxException as e:
        raise PropertiesSyntaxException(str(e), line_number=e.line_number,
                                        properties_file=str(path)) from e

    logger.debug(f"Loaded {len(properties)} properties from {path}")
    return properties
