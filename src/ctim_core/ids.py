"""CTIM - Compact Transaction Identifier Marker encode/decode."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple, Union

from .protocol import (
    CTIM_HEX_LEN,
    CTIM_MAX,
    HEX_PATTERN,
    TAG_BITS,
    TAG_MASK,
    UPPER_WORD_TAG,
    LEDGER_INDEX_MAX,
    LEDGER_INDEX_SHIFT,
    TRANSACTION_INDEX_MAX,
    TRANSACTION_INDEX_SHIFT,
    NETWORK_ID_MAX,
    NETWORK_ID_SHIFT,
    E_OUT_OF_RANGE,
    E_MALFORMED_LENGTH,
    E_MALFORMED_CHARS,
    E_NUMERIC_OVERFLOW,
    E_INVALID_TAG,
    E_UNSUPPORTED_INPUT,
)

_HEX_RE = re.compile(HEX_PATTERN)


class CTIMFields(NamedTuple):
    ledger_index: int
    transaction_index: int
    network_id: int


@dataclass(frozen=True)
class TextForm:
    """CTIM as 16 uppercase hex characters."""

    text: str


@dataclass(frozen=True)
class IntegerForm:
    """CTIM as a raw unsigned 64-bit integer."""

    value: int


InputForm = Union[TextForm, IntegerForm]


def _is_int(v) -> bool:
    # bool is an int subclass but never a valid field or CTIM
    return isinstance(v, int) and not isinstance(v, bool)


def encode_checked(
    ledger_index: int, transaction_index: int, network_id: int
) -> tuple[str | None, str | None]:
    """Pack the three fields into a CTIM string.

    Returns ``(ctim, None)`` on success, ``(None, error_code)`` otherwise.
    Fields are checked ledger, transaction, network; the first failure wins.
    """
    for value, limit in (
        (ledger_index, LEDGER_INDEX_MAX),
        (transaction_index, TRANSACTION_INDEX_MAX),
        (network_id, NETWORK_ID_MAX),
    ):
        if not _is_int(value):
            return None, E_UNSUPPORTED_INPUT
        if value < 0 or value > limit:
            return None, E_OUT_OF_RANGE

    ctim_value = (
        ((UPPER_WORD_TAG + ledger_index) << LEDGER_INDEX_SHIFT)
        | (transaction_index << TRANSACTION_INDEX_SHIFT)
        | (network_id << NETWORK_ID_SHIFT)
    )
    return f"{ctim_value:0{CTIM_HEX_LEN}X}", None


def encode(ledger_index: int, transaction_index: int, network_id: int) -> str | None:
    """Encode to a canonical CTIM string, or None if any field is out of range."""
    ctim, _ = encode_checked(ledger_index, transaction_index, network_id)
    return ctim


def as_input_form(ctim) -> InputForm | None:
    """Classify a raw decoder argument as text or integer form."""
    if isinstance(ctim, (TextForm, IntegerForm)):
        return ctim
    if isinstance(ctim, str):
        return TextForm(ctim)
    if _is_int(ctim):
        return IntegerForm(ctim)
    return None


def _normalize(form: InputForm) -> tuple[int | None, str | None]:
    """Reduce either input form to a 64-bit value."""
    if isinstance(form, TextForm):
        text = form.text
        if not isinstance(text, str):
            return None, E_UNSUPPORTED_INPUT
        if len(text) != CTIM_HEX_LEN:
            return None, E_MALFORMED_LENGTH
        # int(..., 16) would also take lowercase, "_" and whitespace
        if not _HEX_RE.fullmatch(text):
            return None, E_MALFORMED_CHARS
        return int(text, 16), None

    value = form.value
    if not _is_int(value):
        return None, E_UNSUPPORTED_INPUT
    if value < 0 or value > CTIM_MAX:
        return None, E_NUMERIC_OVERFLOW
    return value, None


def decode_checked(ctim) -> tuple[CTIMFields | None, str | None]:
    """Unpack a CTIM given as text or integer.

    Returns ``(fields, None)`` on success, ``(None, error_code)`` otherwise.
    """
    form = as_input_form(ctim)
    if form is None:
        return None, E_UNSUPPORTED_INPUT

    value, err = _normalize(form)
    if err is not None:
        return None, err

    if (value & TAG_MASK) != TAG_BITS:
        return None, E_INVALID_TAG

    return (
        CTIMFields(
            ledger_index=(value >> LEDGER_INDEX_SHIFT) & LEDGER_INDEX_MAX,
            transaction_index=(value >> TRANSACTION_INDEX_SHIFT) & TRANSACTION_INDEX_MAX,
            network_id=(value >> NETWORK_ID_SHIFT) & NETWORK_ID_MAX,
        ),
        None,
    )


def decode(ctim) -> CTIMFields | None:
    """Decode a CTIM string or integer, or None if it is not a valid CTIM."""
    fields, _ = decode_checked(ctim)
    return fields
