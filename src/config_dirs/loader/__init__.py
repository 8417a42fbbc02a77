from .file_loader import ContentMode, load_from_path, read_contents
from .resolver import default_app_name, iter_candidates, load, probe_candidates

__all__ = [
    "ContentMode",
    "default_app_name",
    "iter_candidates",
    "load",
    "load_from_path",
    "probe_candidates",
    "read_contents",
]
