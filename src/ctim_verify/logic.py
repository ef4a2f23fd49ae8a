import json
from ctim_core.ids import IntegerForm, TextForm, as_input_form, decode_checked, encode_checked
from ctim_core.protocol import E_MALFORMED_CHARS
from .const import ERRORS

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

def render_report(report: dict) -> str:
    return json.dumps(report, **CANONICAL_JSON_KW)

def _input_repr(value):
    if isinstance(value, (TextForm, IntegerForm)):
        value = value.text if isinstance(value, TextForm) else value.value
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return repr(value)
    return value

def _fail(code: str, **context) -> dict:
    err = {"code": code, "message": ERRORS[code]}
    err.update(context)
    return {"status": "FAIL", "error_count": 1, "errors": [err]}

def check_encode(ledger_index, transaction_index, network_id) -> dict:
    ctim, code = encode_checked(ledger_index, transaction_index, network_id)
    if code is not None:
        fields = [_input_repr(v) for v in (ledger_index, transaction_index, network_id)]
        return _fail(code, input=fields)
    return {"status": "PASS", "error_count": 0, "errors": [], "ctim": ctim}

def check_decode(ctim) -> dict:
    fields, code = decode_checked(ctim)
    if code is not None:
        context = {"input": _input_repr(ctim)}
        # Lowercase is never normalized; point at the canonical spelling instead.
        form = as_input_form(ctim)
        if code == E_MALFORMED_CHARS and isinstance(form, TextForm):
            upper = form.text.upper()
            if decode_checked(upper)[1] is None:
                context["hint"] = upper
        return _fail(code, **context)

    canonical, _ = encode_checked(*fields)
    return {
        "status": "PASS",
        "error_count": 0,
        "errors": [],
        "ctim": canonical,
        "fields": fields._asdict(),
    }
