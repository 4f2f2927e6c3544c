"""
Record identifiers

Records carry two identifiers: a native 24-hex id generated by the store and
a legacy opaque id kept for older clients. Callers may send either one, so
every boundary classifies the raw value once with parse_identifier().
"""
import re
import secrets
import time
import uuid
from dataclasses import dataclass
from typing import Union

from jia.core.exceptions import ValidationError

NATIVE_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


@dataclass(frozen=True)
class NativeId:
    """Store-assigned 24 character hex id"""
    value: str

    @property
    def binary(self) -> bytes:
        return bytes.fromhex(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LegacyId:
    """Opaque string id issued before native ids existed"""
    value: str

    def __str__(self) -> str:
        return self.value


Identifier = Union[NativeId, LegacyId]


def parse_identifier(raw) -> Identifier:
    """Classify a raw identifier: 24-hex strings are native, anything else is legacy"""
    if raw is None or not str(raw).strip():
        raise ValidationError(
            "Identifier is required",
            details=[{"field": "id", "message": "must be a non-empty string"}],
        )
    value = str(raw).strip()
    if NATIVE_ID_PATTERN.match(value):
        return NativeId(value.lower())
    return LegacyId(value)


def new_native_id() -> str:
    """Timestamp-prefixed 24-hex id, sortable by creation second"""
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def new_legacy_id() -> str:
    return str(uuid.uuid4())
