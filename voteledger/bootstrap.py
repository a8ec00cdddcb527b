"""
bootstrap.py - VoteLedger setup CLI

    python -m voteledger.bootstrap hash-password <password>
    python -m voteledger.bootstrap token <identity>
    python -m voteledger.bootstrap show-config
    python -m voteledger.bootstrap serve --port 8000
"""
import argparse
import sys

from voteledger import config
from voteledger.security import create_access_token, hash_password


def _mask(value):
    if not value:
        return "(unset)"
    return value[:4] + "****"


def cmd_hash_password(args) -> int:
    print(hash_password(args.password))
    print("Set this value as ADMIN_PASSWORD_HASH in your .env file.", file=sys.stderr)
    return 0


def cmd_token(args) -> int:
    print(create_access_token({"sub": args.identity}, expires_delta=args.minutes))
    return 0


def cmd_show_config(args) -> int:
    print(f"ADMIN_IDENTITY       = {config.ADMIN_IDENTITY}")
    print(f"ADMIN_PASSWORD_HASH  = {_mask(config.ADMIN_PASSWORD_HASH)}")
    print(f"SECRET_KEY           = {_mask(config.SECRET_KEY)}")
    print(f"LEDGER_ID            = {config.LEDGER_ID or '(random per process)'}")
    print(f"MONGO_URI            = {_mask(config.MONGO_URI)}")
    print(f"MONGO_DB             = {config.MONGO_DB_NAME}")
    print(f"EVENTS_COLLECTION    = {config.EVENTS_COLLECTION_NAME}")
    if not config.ADMIN_PASSWORD_HASH:
        print("WARNING: ADMIN_PASSWORD_HASH is unset; /auth/token will reject every login.")
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    print(f"Creating ledger with administrator {config.ADMIN_IDENTITY!r}")
    uvicorn.run("voteledger.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="voteledger", description="VoteLedger setup tool")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("hash-password", help="Print a bcrypt hash for ADMIN_PASSWORD_HASH")
    p.add_argument("password")
    p.set_defaults(func=cmd_hash_password)

    p = sub.add_parser("token", help="Mint a bearer token for an identity")
    p.add_argument("identity")
    p.add_argument("--minutes", type=int, default=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    p.set_defaults(func=cmd_token)

    p = sub.add_parser("show-config", help="Print the effective configuration")
    p.set_defaults(func=cmd_show_config)

    p = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
