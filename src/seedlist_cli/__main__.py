"""
Bootstrap cache CLI: inspect and edit a seedlist cache file.
Run: python -m seedlist_cli list, or the seedlist console script (with .env or env vars set).
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/seedlist_cli/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from seedlist import (
    MAX_CONTACTS,
    Contact,
    ContactStore,
    ContactStoreError,
    default_cache_path,
    open_file_store,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def _contact_arg(value: str) -> Contact:
    try:
        return Contact.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _get_store(path_arg: str | None) -> ContactStore:
    path = path_arg or os.environ.get("SEEDLIST_CACHE_PATH", "").strip()
    capacity = os.environ.get("SEEDLIST_MAX_CONTACTS", "").strip()
    return open_file_store(
        Path(path) if path else default_cache_path(),
        capacity=int(capacity) if capacity else MAX_CONTACTS,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seedlist", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--path", help="cache file (default: $SEEDLIST_CACHE_PATH or ./<program>.bootstrap.cache)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="print all contacts, freshest first")
    oldest = sub.add_parser("oldest", help="print the n oldest contacts, oldest first")
    oldest.add_argument("n", type=int)
    add = sub.add_parser("add", help="merge contacts into the cache")
    add.add_argument("contacts", nargs="+", type=_contact_arg, metavar="CONTACT")
    prune = sub.add_parser("prune", help="remove contacts from the cache")
    prune.add_argument("contacts", nargs="+", type=_contact_arg, metavar="CONTACT")
    sub.add_parser("export", help="write the encoded cache to stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "oldest" and args.n < 0:
        parser.error("n must be non-negative")

    try:
        store = _get_store(args.path)
    except ValueError as e:
        parser.error(f"invalid SEEDLIST_MAX_CONTACTS: {e}")

    try:
        if args.command == "list":
            for contact in store.read_all():
                print(contact)
        elif args.command == "oldest":
            for contact in store.oldest(args.n):
                print(contact)
        elif args.command == "add":
            store.update(args.contacts, [])
            logger.info("Cache holds %d contacts", len(store.read_all()))
        elif args.command == "prune":
            store.update([], args.contacts)
            logger.info("Cache holds %d contacts", len(store.read_all()))
        elif args.command == "export":
            sys.stdout.write(store.serialised_contacts().decode("utf-8"))
            sys.stdout.write("\n")
    except ContactStoreError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
