"""Dispatch a single operation against the record store."""

from __future__ import annotations

from typing import Protocol

from .config import Arguments
from .errors import MissingFlagError, UnknownOperationError
from .store import RecordStore


class Writer(Protocol):
    def write(self, s: str) -> int: ...


def perform(args: Arguments, writer: Writer) -> None:
    """Run the operation named in ``args``, writing any result to ``writer``.

    Errors are raised, never written.
    """
    if not args.operation:
        raise MissingFlagError("operation")
    if not args.file_name:
        raise MissingFlagError("fileName")

    store = RecordStore(args.file_name)

    if args.operation == "list":
        writer.write(store.list())
    elif args.operation == "add":
        if not args.item:
            raise MissingFlagError("item")
        store.add(args.item)
    elif args.operation == "remove":
        if not args.id:
            raise MissingFlagError("id")
        store.remove(args.id)
    elif args.operation == "findById":
        if not args.id:
            raise MissingFlagError("id")
        writer.write(store.find_by_id(args.id))
    else:
        raise UnknownOperationError(args.operation)
