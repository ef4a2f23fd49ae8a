import click
from ctim_core.ids import IntegerForm
from .logic import check_decode, check_encode, render_report

# Negative numbers such as "-1" must arrive as arguments, not unknown options.
_NUMERIC_ARGS = {"ignore_unknown_options": True}

def _parse_int(text: str):
    # Unparsable literals pass through as text and are reported as unsupported input.
    try:
        return int(text, 0)
    except ValueError:
        pass
    # int(x, 0) refuses zero-padded decimals like "010"
    try:
        return int(text, 10)
    except ValueError:
        return text

def _emit(result: dict, ctim_only: bool):
    if ctim_only and result["status"] == "PASS":
        click.echo(result["ctim"])
    else:
        click.echo(render_report(result))
    if result["status"] != "PASS":
        raise SystemExit(1)

@click.group()
def main():
    pass

@main.command("encode", context_settings=_NUMERIC_ARGS)
@click.argument("ledger_index")
@click.argument("transaction_index")
@click.argument("network_id")
@click.option("--ctim-only", is_flag=True, help="Print only the CTIM on success")
def encode_cmd(ledger_index: str, transaction_index: str, network_id: str, ctim_only: bool):
    """Pack LEDGER_INDEX TRANSACTION_INDEX NETWORK_ID into a CTIM."""
    result = check_encode(_parse_int(ledger_index), _parse_int(transaction_index), _parse_int(network_id))
    _emit(result, ctim_only)

@main.command("decode", context_settings=_NUMERIC_ARGS)
@click.argument("ctim")
@click.option("--integer", "as_integer", is_flag=True, help="Treat CTIM as an integer literal (decimal or 0x-prefixed)")
@click.option("--ctim-only", is_flag=True, help="Print only the canonical CTIM on success")
def decode_cmd(ctim: str, as_integer: bool, ctim_only: bool):
    """Unpack CTIM into ledger index, transaction index and network id."""
    if as_integer:
        result = check_decode(IntegerForm(_parse_int(ctim)))
    else:
        result = check_decode(ctim)
    _emit(result, ctim_only)

if __name__ == "__main__":
    main()
