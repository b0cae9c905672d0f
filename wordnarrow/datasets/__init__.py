from .validator import validate_pool, pretty_summary
from .io import read_lines, read_text_pool, write_lines

__all__ = ["validate_pool", "pretty_summary", "read_lines", "read_text_pool", "write_lines"]
