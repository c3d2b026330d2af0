import logging
import os
import sys

from rbtree import RedBlackTree
from rbtree.display import in_order, render

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def parse_value(raw: str) -> int | str:
    try:
        return int(raw)
    except ValueError:
        return raw


def main(argv: list[str]) -> int:
    if not argv:
        print("usage: show_tree.py VALUE [VALUE ...]", file=sys.stderr)
        return 2

    values = [parse_value(arg) for arg in argv]
    tree = RedBlackTree()
    try:
        for value in values:
            tree.add(value)
    except TypeError as e:
        logger.error(f"Values are not mutually comparable: {e}")
        return 1

    logger.debug(f"Inserted {tree.size()} values, height {tree.height()}")
    for line in render(tree):
        print(line)
    print(" ".join(str(v) for v in in_order(tree)))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
