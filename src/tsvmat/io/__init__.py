from .sources import open_source, read_matrix, read_source

__all__ = ["open_source", "read_matrix", "read_source"]
