import argparse
import sys

from config import FLAG_FILE_NAME, FLAG_ID, FLAG_OPERATION, OP_REMOVE
from main import run
from users_store import DEFAULT_USERS_PATH


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--fileName", default=DEFAULT_USERS_PATH, help="JSON-файл со списком")
    ap.add_argument("--id", required=True, help="user id to remove")
    args = ap.parse_args(argv)

    return run({
        FLAG_OPERATION: OP_REMOVE,
        FLAG_FILE_NAME: args.fileName,
        FLAG_ID: args.id,
    })

if __name__ == "__main__":
    sys.exit(main())
