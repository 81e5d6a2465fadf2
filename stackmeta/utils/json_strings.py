# stackmeta/utils/json_strings.py
"""
Optional JSON string-literal wrapping for serialized metadata.

Payloads that are safe as a bare token are written as-is; anything containing
control characters, non-ASCII text, spaces or quotes is written as a quoted
JSON string so it can sit inside space-separated item strings or JSON documents.
"""
import json
from typing import NamedTuple, TextIO, Union

from stackmeta.errors import JsonStringError

class PayloadKind:
    RAW = "raw"
    JSON = "json"

class DecodedPayload(NamedTuple):
    kind: str
    text: str

def _needs_json_quoting(text: str) -> bool:
    for char in text:
        code = ord(char)
        if code <= 0x1f or code >= 0x7f or char == " " or char == '"':
            return True
    return False

def serialize_json_string(text: str) -> str:
    # Unlike older writers, '/' is not escaped; both forms decode identically.
    return json.dumps(text, ensure_ascii=True)

def serialize_json_string_if_needed(text: str) -> str:
    if _needs_json_quoting(text):
        return serialize_json_string(text)
    return text

def deserialize_json_string(literal: str) -> str:
    """Decodes one quoted JSON string literal. Trailing text after the closing quote is ignored."""
    if not literal.startswith('"'):
        raise JsonStringError(f"Expected '\"' at start of JSON string, got {literal[:1]!r}")
    try:
        value, _ = json.JSONDecoder().raw_decode(literal)
    except json.JSONDecodeError as e:
        raise JsonStringError(f"Malformed JSON string: {e}") from e
    return value

def read_json_string_if_needed(stream: TextIO) -> str:
    """
    Reads one token from `stream`.
    A token opening with '"' runs to its closing quote and is unescaped.
    Any other token runs up to the next space; the space is left unread,
    which requires a seekable stream (io.StringIO is).
    """
    chars = []
    is_json = False
    was_backslash = False
    first = True

    while True:
        pos = stream.tell()
        char = stream.read(1)
        if not char:
            break

        if first and char == '"':
            is_json = True
            chars.append(char)
        elif is_json:
            chars.append(char)
            if was_backslash:
                was_backslash = False
            elif char == "\\":
                was_backslash = True
            elif char == '"':
                break # Closing quote
        else:
            if char == " ":
                stream.seek(pos)
                break
            chars.append(char)
        first = False

    token = "".join(chars)
    if is_json:
        return deserialize_json_string(token)
    return token

def decode_payload(data: Union[str, TextIO]) -> DecodedPayload:
    """
    Inverse of serialize_json_string_if_needed.
    A str is taken whole; a stream yields a single token (see read_json_string_if_needed).
    """
    if isinstance(data, str):
        if data.startswith('"'):
            return DecodedPayload(PayloadKind.JSON, deserialize_json_string(data))
        return DecodedPayload(PayloadKind.RAW, data)

    start = data.tell()
    opening = data.read(1)
    data.seek(start)
    text = read_json_string_if_needed(data)
    kind = PayloadKind.JSON if opening == '"' else PayloadKind.RAW
    return DecodedPayload(kind, text)
