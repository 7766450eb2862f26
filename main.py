import argparse
import sys
from typing import Dict, Optional, Sequence

from config import FLAG_FILE_NAME, FLAG_ID, FLAG_ITEM, FLAG_OPERATION, OPERATIONS
from logger import Logger
from operations import perform
from users_store import UsersError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Управление списком пользователей в JSON-файле",
        allow_abbrev=False,
    )
    ap.add_argument(f"-{FLAG_OPERATION}", f"--{FLAG_OPERATION}", dest=FLAG_OPERATION,
                    default="", help=f"type of operation: {' | '.join(OPERATIONS)}")
    ap.add_argument(f"-{FLAG_ID}", f"--{FLAG_ID}", dest=FLAG_ID,
                    default="", help="user id")
    ap.add_argument(f"-{FLAG_FILE_NAME}", f"--{FLAG_FILE_NAME}", dest=FLAG_FILE_NAME,
                    default="", help="name of file")
    ap.add_argument(f"-{FLAG_ITEM}", f"--{FLAG_ITEM}", dest=FLAG_ITEM,
                    default="", help='item, например {"id":"1","email":"a@b.c","age":23}')
    return ap


def parse_args(argv: Optional[Sequence[str]] = None) -> Dict[str, str]:
    args = build_parser().parse_args(argv)
    return {
        FLAG_OPERATION: args.operation,
        FLAG_ID: args.id,
        FLAG_ITEM: args.item,
        FLAG_FILE_NAME: args.fileName,
    }


def run(args: Dict[str, str]) -> int:
    out = sys.stdout.buffer
    try:
        perform(args, out)
    except (UsersError, OSError) as e:
        Logger.error(e)
        return 1
    finally:
        out.flush()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
