"""Show how a CTIM splits into tag, ledger index, transaction index and network id."""
from __future__ import annotations

import sys

from ctim_core import decode, encode
from ctim_core.protocol import CTIM_HEX_LEN, TAG


def usage() -> None:
    print("Usage: python layout.py <ctim> | <ledger_index> <txn_index> <network_id>")
    print("Example: python layout.py C0CA2AA7326FC045")
    sys.exit(1)


def main() -> None:
    if len(sys.argv) not in (2, 4):
        usage()

    if len(sys.argv) == 4:
        try:
            numbers = [int(a, 0) for a in sys.argv[1:]]
        except ValueError:
            usage()
        ctim = encode(*numbers)
        if ctim is None:
            print("Fields out of range.")
            sys.exit(1)
    else:
        ctim = sys.argv[1]

    fields = decode(ctim)
    if fields is None:
        print(f"Not a valid CTIM: {ctim!r}")
        sys.exit(1)

    print(f"--- CTIM {ctim} ---")
    print(f"  tag            {ctim[0]}        (0x{TAG:X})")
    print(f"  ledger index   {ctim[1:8]}  {fields.ledger_index}")
    print(f"  txn index      {ctim[8:12]}     {fields.transaction_index}")
    print(f"  network id     {ctim[12:CTIM_HEX_LEN]}     {fields.network_id}")


if __name__ == "__main__":
    main()
