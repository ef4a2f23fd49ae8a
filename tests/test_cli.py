import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from ctim_verify.logic import check_decode, check_encode, render_report

REPO = Path(__file__).resolve().parents[1]


def run(*args):
    env = dict(os.environ)
    env["PYTHONPATH"] = str(REPO / "src") + os.pathsep + env.get("PYTHONPATH", "")
    return subprocess.run(
        [sys.executable, "-m", "ctim_verify.cli", *args],
        cwd=REPO,
        env=env,
        check=False,
        capture_output=True,
        text=True,
    )


def test_check_encode_pass():
    report = check_encode(13249191, 12911, 49221)
    assert report == {"status": "PASS", "error_count": 0, "errors": [], "ctim": "C0CA2AA7326FC045"}


def test_check_encode_fail_carries_input():
    report = check_encode(0x10000000, 0xFFFF, 0xFFFF)
    assert report["status"] == "FAIL"
    assert report["error_count"] == 1
    assert report["errors"][0]["code"] == "E_OUT_OF_RANGE"
    assert report["errors"][0]["input"] == [0x10000000, 0xFFFF, 0xFFFF]


def test_check_decode_pass_reports_fields():
    report = check_decode(0xC0CA2AA7326FC045)
    assert report["status"] == "PASS"
    assert report["ctim"] == "C0CA2AA7326FC045"
    assert report["fields"] == {"ledger_index": 13249191, "transaction_index": 12911, "network_id": 49221}


def test_check_decode_lowercase_hint():
    report = check_decode("c0ca2aa7326fc045")
    err = report["errors"][0]
    assert err["code"] == "E_MALFORMED_CHARS"
    assert err["hint"] == "C0CA2AA7326FC045"


def test_check_decode_no_hint_for_bad_tag():
    err = check_decode("ffffffffffffffff")["errors"][0]
    assert err["code"] == "E_MALFORMED_CHARS"
    assert "hint" not in err


def test_render_report_is_canonical():
    out = render_report(check_encode(0, 0, 0))
    assert out == '{"ctim":"C000000000000000","error_count":0,"errors":[],"status":"PASS"}'


def test_cli_encode():
    r = run("encode", "13249191", "12911", "49221")
    assert r.returncode == 0, r.stderr + r.stdout
    assert json.loads(r.stdout)["ctim"] == "C0CA2AA7326FC045"


def test_cli_encode_hex_arguments_ctim_only():
    r = run("encode", "0x0FFFFFFF", "0xFFFF", "0xFFFF", "--ctim-only")
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stdout.strip() == "CFFFFFFFFFFFFFFF"


@pytest.mark.parametrize(
    "args,code",
    [
        (("encode", "0x10000000", "0", "0"), "E_OUT_OF_RANGE"),
        (("encode", "abc", "0", "0"), "E_UNSUPPORTED_INPUT"),
        (("decode", "C003FFFFFFFFFFF"), "E_MALFORMED_LENGTH"),
        (("decode", "C003FFFFFFFFFFFG"), "E_MALFORMED_CHARS"),
        (("decode", "FFFFFFFFFFFFFFFF"), "E_INVALID_TAG"),
        (("decode", "--integer", "0xCFFFFFFFFFFFFFFFF"), "E_NUMERIC_OVERFLOW"),
        (("decode", "--integer", "C0CA"), "E_UNSUPPORTED_INPUT"),
        (("encode", "-1", "0", "0"), "E_OUT_OF_RANGE"),
        (("encode", "0", "0", "-1"), "E_OUT_OF_RANGE"),
        (("decode", "--integer", "-1"), "E_NUMERIC_OVERFLOW"),
    ],
)
def test_cli_failures_exit_nonzero(args, code):
    r = run(*args)
    assert r.returncode == 1
    report = json.loads(r.stdout)
    assert report["status"] == "FAIL"
    assert report["errors"][0]["code"] == code


def test_cli_decode_text_and_integer():
    r = run("decode", "C0CA2AA7326FC045")
    assert r.returncode == 0, r.stderr + r.stdout
    by_text = json.loads(r.stdout)

    r = run("decode", "--integer", str(0xC0CA2AA7326FC045))
    assert r.returncode == 0, r.stderr + r.stdout
    assert json.loads(r.stdout) == by_text
    assert by_text["fields"]["network_id"] == 49221


def test_cli_encode_zero_padded_decimal():
    r = run("encode", "010", "0", "0", "--ctim-only")
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stdout.strip() == "C000000A00000000"


def test_cli_decode_ctim_only():
    r = run("decode", "--integer", str(0xC0CA2AA7326FC045), "--ctim-only")
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stdout.strip() == "C0CA2AA7326FC045"


def test_cli_ctim_only_still_reports_failure():
    r = run("decode", "c0ca2aa7326fc045", "--ctim-only")
    assert r.returncode == 1
    report = json.loads(r.stdout)
    assert report["status"] == "FAIL"
    assert report["errors"][0]["code"] == "E_MALFORMED_CHARS"
    assert report["errors"][0]["hint"] == "C0CA2AA7326FC045"


def test_layout_example_rejects_non_numeric_field():
    env = dict(os.environ)
    env["PYTHONPATH"] = str(REPO / "src") + os.pathsep + env.get("PYTHONPATH", "")
    r = subprocess.run(
        [sys.executable, "examples/layout.py", "12", "abc", "3"],
        cwd=REPO,
        env=env,
        check=False,
        capture_output=True,
        text=True,
    )
    assert r.returncode == 1
    assert r.stdout.startswith("Usage:")
    assert "Traceback" not in r.stderr
