"""CTIM layout constants.

Single source of truth for the 64-bit bit layout and the error codes.
Keep this file stable. Encoder and decoder must remain synchronized.
"""

# Layout: [Tag(4) | LedgerIndex(28) | TransactionIndex(16) | NetworkId(16)] = 64 bits
CTIM_BITS = 64
CTIM_HEX_LEN = CTIM_BITS // 4  # 16 nibbles
CTIM_MAX = (1 << CTIM_BITS) - 1  # 0xFFFFFFFFFFFFFFFF

TAG = 0xC
TAG_SHIFT = 60
TAG_MASK = 0xF << TAG_SHIFT  # 0xF000000000000000
TAG_BITS = TAG << TAG_SHIFT  # 0xC000000000000000

LEDGER_INDEX_WIDTH = 28
LEDGER_INDEX_SHIFT = 32
LEDGER_INDEX_MAX = (1 << LEDGER_INDEX_WIDTH) - 1  # 0x0FFFFFFF

TRANSACTION_INDEX_WIDTH = 16
TRANSACTION_INDEX_SHIFT = 16
TRANSACTION_INDEX_MAX = (1 << TRANSACTION_INDEX_WIDTH) - 1  # 0xFFFF

NETWORK_ID_WIDTH = 16
NETWORK_ID_SHIFT = 0
NETWORK_ID_MAX = (1 << NETWORK_ID_WIDTH) - 1  # 0xFFFF

# Upper 32 bits before the shift: tag nibble over the ledger index field.
UPPER_WORD_TAG = TAG << LEDGER_INDEX_WIDTH  # 0xC0000000

# Canonical text: uppercase only, no prefix
HEX_PATTERN = r"[0-9A-F]{%d}" % CTIM_HEX_LEN

# Error codes
E_OUT_OF_RANGE = "E_OUT_OF_RANGE"
E_MALFORMED_LENGTH = "E_MALFORMED_LENGTH"
E_MALFORMED_CHARS = "E_MALFORMED_CHARS"
E_NUMERIC_OVERFLOW = "E_NUMERIC_OVERFLOW"
E_INVALID_TAG = "E_INVALID_TAG"
E_UNSUPPORTED_INPUT = "E_UNSUPPORTED_INPUT"
