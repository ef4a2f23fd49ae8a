"""CTIM Core - Compact Transaction Identifier Marker codec."""
from .ids import (
    CTIMFields,
    TextForm,
    IntegerForm,
    as_input_form,
    encode,
    encode_checked,
    decode,
    decode_checked,
)

__all__ = [
    "CTIMFields",
    "TextForm",
    "IntegerForm",
    "as_input_form",
    "encode",
    "encode_checked",
    "decode",
    "decode_checked",
]
