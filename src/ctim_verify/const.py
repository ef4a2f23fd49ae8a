ERRORS = {
  "E_OUT_OF_RANGE": "Field exceeds its bit-width capacity",
  "E_MALFORMED_LENGTH": "CTIM text is not exactly 16 characters",
  "E_MALFORMED_CHARS": "CTIM text contains characters outside [0-9A-F]",
  "E_NUMERIC_OVERFLOW": "CTIM integer is outside the unsigned 64-bit range",
  "E_INVALID_TAG": "CTIM top nibble is not C",
  "E_UNSUPPORTED_INPUT": "Input is neither CTIM text nor an integer",
}
