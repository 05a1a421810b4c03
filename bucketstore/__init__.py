"""In-memory stores of named, de-duplicating buckets."""

import logging
import os
from typing import Union

Logger = Union[logging.Logger, logging.LoggerAdapter]

LOG_LEVEL_ENV = "BUCKETSTORE_LOG_LEVEL"

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
handler.setFormatter(
    logging.Formatter(
        "%(levelname)s - %(bucket)s - %(message)s",
        defaults={"bucket": "-"},
    ),
)
logger.addHandler(handler)
logger.setLevel(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())

from .bucket import Bucket  # noqa: E402
from .errors import (  # noqa: E402
    BucketAlreadyExistsError,
    HashComputationError,
    NoItemError,
    NoKeyError,
    NoSuchBucketError,
    StoreError,
    ZeroItemsError,
)
from .hashing import Hashable, content_hash, identity_of  # noqa: E402
from .store import Store  # noqa: E402

__all__ = [
    "Bucket",
    "BucketAlreadyExistsError",
    "HashComputationError",
    "Hashable",
    "NoItemError",
    "NoKeyError",
    "NoSuchBucketError",
    "Store",
    "StoreError",
    "ZeroItemsError",
    "content_hash",
    "identity_of",
]
