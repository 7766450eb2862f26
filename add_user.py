import argparse
import sys

from config import FLAG_FILE_NAME, FLAG_ITEM, FLAG_OPERATION, OP_ADD
from main import run
from users_store import DEFAULT_USERS_PATH, User


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--fileName", default=DEFAULT_USERS_PATH, help="JSON-файл со списком")
    ap.add_argument("--id", required=True, help="user id, например u1")
    ap.add_argument("--email", default="", help="email (можно пусто)")
    ap.add_argument("--age", type=int, default=0, help="возраст")
    args = ap.parse_args(argv)

    item = User(id=args.id, email=args.email, age=args.age).to_json()

    return run({
        FLAG_OPERATION: OP_ADD,
        FLAG_FILE_NAME: args.fileName,
        FLAG_ITEM: item,
    })

if __name__ == "__main__":
    sys.exit(main())
