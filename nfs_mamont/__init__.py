"""Building blocks for an NFS version 3 server: buffer allocator, MOUNT and VFS interfaces."""

__version__ = "0.0.0"
__all__ = ["allocator", "mount", "vfs"]