from .shared import printf
from .table import HashTable


def dump_buckets(table: HashTable, name: str, show_empty: bool = False):
    printf("== {0:s} ==\n", name)
    printf("capacity {0:d}, length {1:d}\n", table.capacity, table.length)

    for index, bucket in enumerate(table.buckets()):
        if bucket or show_empty:
            dump_bucket(index, bucket)


def dump_bucket(index: int, bucket: tuple):
    printf("{0:04d} {1!r}\n", index, list(bucket))
