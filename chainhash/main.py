import sys

from .debug import dump_buckets
from .shared import printf, printf_err, println
from .table import HashTable


DEMO_PAIRS = [
    ("apple", "red"),
    ("banana", "yellow"),
    ("carrot", "orange"),
    ("dog", "brown"),
    ("elephant", "gray"),
    ("frog", "green"),
    ("grape", "purple"),
    ("hat", "black"),
    ("ice cream", "white"),
    ("jacket", "blue"),
    ("kite", "pink"),
    ("lion", "golden"),
]


class InputError(Exception):
    pass


def demo():
    table = HashTable()
    for key, value in DEMO_PAIRS:
        table.set(key, value)

    dump_buckets(table, "after inserts")

    println(table.get("apple"))
    println(table.has("lion"))
    println(table.remove("lion"))
    dump_buckets(table, "after remove")
    println(table.length)

    table.set("moon", "silver")
    dump_buckets(table, "after set moon")


def parse_pairs(text: str) -> list[tuple[str, str]]:
    pairs = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        key, sep, value = stripped.partition("=")
        if not sep:
            raise InputError("[line {0:d}] expected key=value".format(line_no))
        pairs.append((key.strip(), value.strip()))
    return pairs


def load_file(filepath: str):
    try:
        with open(filepath, encoding="utf-8") as fp:
            text = fp.read()
    except OSError as e:
        printf_err("Could not read '{0:s}': {1:s}\n", filepath, e.strerror or str(e))
        sys.exit(66)
    except UnicodeDecodeError as e:
        printf_err("Could not decode '{0:s}' as UTF-8: {1:s}\n", filepath, e.reason)
        sys.exit(65)

    try:
        pairs = parse_pairs(text)
    except InputError as e:
        printf_err("{0:s}\n", str(e))
        sys.exit(65)

    table = HashTable()
    table.update(pairs)
    dump_buckets(table, filepath)


def main():
    if len(sys.argv) == 1:
        demo()
    elif len(sys.argv) == 2:
        load_file(sys.argv[1])
    else:
        printf("Usage: chainhash [path]\n")
        sys.exit(64)
