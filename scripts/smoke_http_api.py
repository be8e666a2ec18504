"""
Manual smoke runner for the salmon chaincode HTTP adapter.

Runs the end-to-end scenarios against a live server:
    A. record salmon 1 → query it
    B. transfer salmon 1 → query it again
    C. seed the sample ledger → query all

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, parse, request


def _call(
    *,
    method: str,
    url: str,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    headers = {}
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            return response.status, json.loads(response.read().decode("utf-8"))
    except error.HTTPError as exc:
        return exc.code, json.loads(exc.read().decode("utf-8"))


def _invoke(api: str, fcn: str, args: list[str]) -> tuple[int, dict]:
    return _call(method="POST", url=f"{api}/invoke", body={"fcn": fcn, "args": args})


def _query(api: str, fcn: str, args: list[str]) -> tuple[int, dict]:
    params = parse.urlencode({"fcn": fcn, "args": json.dumps(args)})
    return _call(method="GET", url=f"{api}/query?{params}")


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1/chaincodes/salmon"

    status, payload = _call(method="POST", url=f"{api}/init")
    _print_case("init", status, payload)

    # ── Scenario A ────────────────────────────────────────────
    status, payload = _invoke(
        api,
        "recordSalmon",
        ["1", "Vessel #1", "2014-01-01", "Viet Nam", "Nha Hoang"],
    )
    _print_case("A record 1", status, payload)
    status, payload = _query(api, "querySalmon", ["1"])
    _print_case("A query 1", status, payload)

    status, payload = _invoke(
        api,
        "recordSalmon",
        ["1", "Vessel #1", "2014-01-01", "Viet Nam", "Nha Hoang"],
    )
    _print_case("A record 1 again (conflict)", status, payload)

    # ── Scenario B ────────────────────────────────────────────
    status, payload = _invoke(api, "changeSalmonHolder", ["1", "Thanh Dong"])
    _print_case("B transfer 1", status, payload)
    status, payload = _query(api, "querySalmon", ["1"])
    _print_case("B query 1", status, payload)

    # ── Scenario C ────────────────────────────────────────────
    # On a ledger that already holds salmon 1 seeding stops at the
    # first sample; run against a fresh ledger to see all three.
    status, payload = _invoke(api, "initLedger", [])
    _print_case("C initLedger", status, payload)
    status, payload = _query(api, "queryAllSalmon", [])
    _print_case("C queryAllSalmon", status, payload)

    status, payload = _query(api, "recordSalmon", ["9", "v", "t", "l", "h"])
    _print_case("query rejects mutation", status, payload)

    status, payload = _invoke(api, "deleteSalmon", ["1"])
    _print_case("unknown function", status, payload)


def main() -> None:
    parser = argparse.ArgumentParser(description="Salmon chaincode HTTP smoke runner")
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
