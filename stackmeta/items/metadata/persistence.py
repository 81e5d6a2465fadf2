# stackmeta/items/metadata/persistence.py
"""
Wire format for item stack metadata.

    START (name KV_DELIM value PAIR_DELIM)* [_hash KV_DELIM <uint64> PAIR_DELIM]

The whole payload is then wrapped as a JSON string literal when it contains
characters that are unsafe in a bare token (it always does, START included).
A payload that does not open with START is the legacy format: one value
stored under the empty name.
"""
from typing import TYPE_CHECKING, List, TextIO, Tuple, Union, cast

from stackmeta.config import (
    DEBUG_LOG_SPARSE_FOLDING, META_ALWAYS_DENSE_KEYS, META_HASH_KEY, META_HASH_SEED,
    META_KV_DELIM, META_PAIR_DELIM, META_START
)
from stackmeta.utils.hashing import murmur_hash_64a
from stackmeta.utils.json_strings import decode_payload, serialize_json_string_if_needed
from stackmeta.utils.logger import Logger
from stackmeta.utils.string_finder import StringFinder

if TYPE_CHECKING:
    from stackmeta.items.metadata.core import ItemStackMetadata

def encode_pair(name: str, value: str) -> str:
    return f"{name}{META_KV_DELIM}{value}{META_PAIR_DELIM}"

def compute_sparse_hash(pairs: List[Tuple[str, str]]) -> int:
    """Hash of the pair-encoded concatenation of `pairs`, as stored in the `_hash` field."""
    folded = "".join(encode_pair(name, value) for name, value in pairs)
    return murmur_hash_64a(folded.encode("utf-8"), META_HASH_SEED)

def is_hash_folded(name: str, sparse: bool) -> bool:
    return sparse and name not in META_ALWAYS_DENSE_KEYS

def parse_pairs(text: str) -> List[Tuple[str, str]]:
    """
    Splits a START-prefixed payload into (name, value) pairs.
    A truncated trailing pair is kept with whatever text remains.
    """
    finder = StringFinder(text)
    finder.to(len(META_START))
    pairs = []
    while not finder.at_end():
        name = finder.next(META_KV_DELIM)
        value = finder.next(META_PAIR_DELIM)
        pairs.append((name, value))
    return pairs


class MetadataPersistenceMixin:
    """Mixin handling wire serialization/deserialization."""

    def serialize(self, sparse: bool = False) -> str:
        """
        Encodes all attributes. With `sparse`, attributes outside the
        always-dense set are replaced by a single `_hash` attribute.
        """
        meta = cast('ItemStackMetadata', self)

        dense_parts = [META_START]
        folded: List[Tuple[str, str]] = []
        for name, value in meta.attributes.items():
            if not name and not value:
                continue
            if is_hash_folded(name, sparse):
                folded.append((name, value))
            else:
                dense_parts.append(encode_pair(name, value))

        if folded:
            hash_value = compute_sparse_hash(folded)
            dense_parts.append(encode_pair(META_HASH_KEY, str(hash_value)))
            Logger.debug("ItemStackMetadata", f"Folded {len(folded)} attribute(s) into {META_HASH_KEY}={hash_value}.")
            if DEBUG_LOG_SPARSE_FOLDING:
                Logger.debug("ItemStackMetadata", f"Folded names: {', '.join(name for name, _ in folded)}")

        return serialize_json_string_if_needed("".join(dense_parts))

    def write(self, stream: TextIO, sparse: bool = False) -> None:
        stream.write(self.serialize(sparse))

    def deserialize(self, data: Union[str, TextIO]) -> None:
        """
        Replaces all attributes with those decoded from `data` (a str or a text stream).
        Tool capabilities are recomputed afterwards whatever the input held.
        """
        meta = cast('ItemStackMetadata', self)
        payload = decode_payload(data)
        text = payload.text

        meta.attributes.clear()

        if text:
            if text.startswith(META_START):
                for name, value in parse_pairs(text):
                    meta.attributes.set(name, value)
            else:
                # Written before the delimited format existed
                Logger.debug("ItemStackMetadata", f"Loaded legacy metadata ({payload.kind}, {len(text)} chars).")
                meta.attributes.set("", text)

        meta.update_tool_capabilities()
