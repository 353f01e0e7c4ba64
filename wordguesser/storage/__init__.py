from .io import write_library, read_library, write_csv, timestamp_id

__all__ = ["write_library", "read_library", "write_csv", "timestamp_id"]
