from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from netgsm.client import NetGsmClient
from netgsm.config import load_client_config
from netgsm.logging_utils import setup_logging


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a GET request to a NetGSM API endpoint")
    parser.add_argument("endpoint", help="Endpoint path below /api/, e.g. balance/list/json")
    parser.add_argument("--config", default="config.yaml", help="Path to client config")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter, repeatable. Use key[prop]=value for nested filters.",
    )
    args = parser.parse_args()

    if not Path(args.config).exists():
        raise FileNotFoundError(f"Config not found: {args.config}. Copy config.example.yaml to config.yaml")

    config = load_client_config(args.config)
    setup_logging(config.log_level)

    params: dict[str, str] = {}
    for item in args.param:
        key, sep, value = item.partition("=")
        if not sep:
            parser.error(f"invalid --param {item!r}, expected KEY=VALUE")
        params[key] = value

    with NetGsmClient(config) as client:
        resp = client.get(args.endpoint, params)

    try:
        print(json.dumps(resp.json(), ensure_ascii=False, indent=2))
    except ValueError:
        print(resp.text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
