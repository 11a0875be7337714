"""Which physical backend the record store is running on."""

from enum import Enum


class StoreBackend(str, Enum):
    """Storage backend, chosen once at process start."""

    REMOTE = "remote"
    LOCAL = "local"
