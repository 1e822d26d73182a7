"""NFSv3 virtual file system interface: file types, errors and one abstract class per procedure."""

__all__ = [
    "core",
    "create_ops",
    "data",
    "directory",
    "file",
    "fs_info",
    "query",
    "remove_ops",
    "set_attr",
]