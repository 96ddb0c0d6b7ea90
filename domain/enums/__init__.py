"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType, QUEUE_NAMES, queue_display_name
from .error_kind import ErrorKind

__all__ = [
    'Region',
    'QueueType',
    'QUEUE_NAMES',
    'queue_display_name',
    'ErrorKind',
]
