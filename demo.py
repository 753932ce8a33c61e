import argparse
import logging
import os

from adt import ArrayList, BinarySearchTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a binary search tree and an array list from integers."
    )
    parser.add_argument("values", nargs="*", type=int, help="integers to insert, in order")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    tree = BinarySearchTree.of(*args.values)
    array_list = ArrayList.of(*args.values)
    logger.debug(f"Dropped {len(args.values) - tree.size()} duplicate values")

    ordered: list[int] = []
    tree.in_order_traversal(ordered.append)

    print(f"in-order: {' '.join(map(str, ordered))}")
    print(f"size:     {tree.size()}")
    print(f"depth:    {tree.depth()}")
    print(f"list:     {' '.join(map(str, array_list))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
