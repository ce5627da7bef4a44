"""Loading and saving the record store on disk.

Neither function raises for I/O problems. Failures come back as a flag
(and, for loads, the StoreOpenError that caused them) so the caller can
decide whether to abort or carry on.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass, field
from typing import Optional

from .codec import decode, dumps
from .errors import StoreOpenError
from .records import RecordStore


ENCODING = "utf-8"


@dataclass
class LoadResult:
    store: RecordStore = field(default_factory=RecordStore)
    ok: bool = True
    error: Optional[StoreOpenError] = None

    @property
    def count(self) -> int:
        return len(self.store)


def load_store(path: str) -> LoadResult:
    """Decode the store from `path`.

    An empty file is ok=True with count 0; an unreadable one is ok=False.
    """
    try:
        with open(path, "r", encoding=ENCODING) as fh:
            store = decode(fh)
    except (OSError, UnicodeDecodeError) as ex:
        return LoadResult(ok=False, error=StoreOpenError(path, "r", ex))
    return LoadResult(store=store)


def save_store(store: RecordStore, path: str) -> bool:
    """Encode the store to `path`, replacing its contents.

    The text is encoded before the file is opened, so a value that cannot
    be encoded leaves the old file untouched.
    """
    try:
        data = dumps(store).encode(ENCODING)
        with open(path, "wb") as fh:
            fh.write(data)
    except (OSError, UnicodeError) as ex:
        sys.stderr.write(f"error: {StoreOpenError(path, 'w', ex)}\n")
        return False
    return True
