"""Icon persistence."""
from icongen.storage.file_writer import IconFileWriter

__all__ = ["IconFileWriter"]
