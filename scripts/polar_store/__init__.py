"""File-system backed storage of polar records."""

from .codec import EXTENSION, dumps, file_name, loads, read_polar, write_polar
from .errors import (
    AlreadyExists,
    IdMandatory,
    NotFound,
    PolarDecodeError,
    PolarError,
    StorageError,
    StoreSetupError,
)
from .models import (
    Foil,
    Hull,
    Penalty,
    PenaltyBoundaries,
    PenaltyCase,
    Polar,
    Sail,
    Winch,
    derive_id,
)
from .sorting import Order, SortKey, sort_polars
from .store import PolarStore
