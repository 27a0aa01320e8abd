"""userstore - file-backed JSON user record store."""

__version__ = "0.1.0"

from .models import User
from .store import RecordStore

__all__ = ["User", "RecordStore", "__version__"]
