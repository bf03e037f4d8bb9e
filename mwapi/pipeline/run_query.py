import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

from mwapi.collect.frames import errors_frame, query_frame
from mwapi.common.logger_setup import setup_logging
from mwapi.common.mw import MWClient


def parse_params(pairs: List[str]) -> Dict[str, str]:
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"expected key=value, got {pair!r}")
        params[key] = value
    return params


def run_query(params: Dict[str, str], list_key: Optional[str] = None, out_csv: Optional[str] = None,
              url: Optional[str] = None) -> int:
    mw = MWClient(url=url)
    print(f"[query] {mw.url} {params}")
    resp = mw.query(params)
    print(f"[status] HTTP {resp.status} successful={resp.successful()}")

    if resp.has_warnings():
        print(f"[warn] {resp.get_warnings()}")

    if resp.has_errors():
        print("[errors]")
        print(errors_frame(resp).to_string(index=False))
        return 1

    if list_key:
        df = query_frame(resp, list_key)
        print(f"[{list_key}] {len(df)} rows")
        if out_csv:
            out_dir = os.path.dirname(out_csv)
            if out_dir:
                os.makedirs(out_dir, exist_ok=True)
            df.to_csv(out_csv, index=False)
            print(f"[save] {len(df)} rows → {out_csv}")
        elif not df.empty:
            print(df.head(20).to_string(index=False))
    else:
        print(f"[query keys] {sorted(resp.get_query())}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run one action=query request and report the normalized response.")
    ap.add_argument("--param", action="append", default=[], help="e.g., list=recentchanges (repeatable)")
    ap.add_argument("--list", dest="list_key", help="query key to tabulate, e.g., recentchanges")
    ap.add_argument("--out", help="CSV path for the --list rows")
    ap.add_argument("--url", help="API endpoint (default: $MW_API_URL or en.wikipedia)")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    try:
        params = parse_params(args.param)
    except argparse.ArgumentTypeError as e:
        ap.error(str(e))

    setup_logging("mwapi", logging.DEBUG if args.verbose else logging.WARNING)
    return run_query(params, list_key=args.list_key, out_csv=args.out, url=args.url)


if __name__ == "__main__":
    sys.exit(main())
