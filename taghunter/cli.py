"""
Taghunter backend CLI (SQLite)

Commands:
  init          Create the database, tables and seed data (idempotent)
  game-types    Print all game types as JSON
  scenarios     Print scenarios as JSON, optionally for one game type
  serve         Run the HTTP API with uvicorn
"""
from __future__ import annotations

import argparse
import json
import os
import sys

from .db import close_store
from .errors import StorageError, StoreInitError
from .logs import setup_logging
from .services import catalog_svc
from .services.store_svc import init_store


def _dump(obj):
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def cmd_init(args):
    store = init_store(args.db)
    print(f"Database ready at {store.path}")


def cmd_game_types(args):
    init_store(args.db)
    _dump(catalog_svc.list_game_types())


def cmd_scenarios(args):
    init_store(args.db)
    _dump(catalog_svc.list_scenarios(args.game_type))


def cmd_serve(args):
    import uvicorn

    if args.db:
        os.environ["TAGHUNTER_DB_PATH"] = args.db
    uvicorn.run("taghunter.api:app", host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taghunter", description="Taghunter backend (SQLite)")
    parser.add_argument("--db", default=None, help="database file (default: resolved from env/config)")
    parser.add_argument("--log-level", default=None)
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="create tables and seed data")
    p_init.set_defaults(func=cmd_init)

    p_gt = sub.add_parser("game-types", help="list game types")
    p_gt.set_defaults(func=cmd_game_types)

    p_sc = sub.add_parser("scenarios", help="list scenarios")
    p_sc.add_argument("--game-type", default=None, help="only scenarios of this game type id")
    p_sc.set_defaults(func=cmd_scenarios)

    p_srv = sub.add_parser("serve", help="run the HTTP API")
    p_srv.add_argument("--host", default="127.0.0.1")
    p_srv.add_argument("--port", type=int, default=8000)
    p_srv.set_defaults(func=cmd_serve)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        args.func(args)
    except (StoreInitError, StorageError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        if args.cmd != "serve":
            close_store()
    return 0


if __name__ == "__main__":
    sys.exit(main())
