"""Defaults shared by the heap factory and the command line."""

from pileup.common import HeapKind, Orientation

DEFAULT_KIND = HeapKind.Binary
"""Heap algorithm used when none is requested."""

DEFAULT_ORIENTATION = Orientation.Min
"""Orientation used when none is requested; draining then sorts ascending."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Log level for the command line."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s"
"""Format string handed to logging.basicConfig."""
