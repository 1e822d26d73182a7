# nfs_mamont

Building blocks for an NFS version 3 server (RFC 1813), written for asyncio:
a bounded pool of byte buffers, the MOUNT v3 interface, and the NFSv3
virtual file system interface as abstract asynchronous classes.

## Contents

- `nfs_mamont.allocator.pool`: `Allocator`, the abstract interface, and
  `Pool`, a fixed set of equally sized buffers. `Pool(buffer_size, buffer_count)`
  creates the buffers up front; `Pool.capacity` is their total size.
  `await pool.allocate(size)` waits until enough buffers are free and returns
  a `Slice`. A `size` below 1 or above the capacity raises `ValueError`.
- `nfs_mamont.allocator.slice`: `Slice`, a list of buffers limited to a byte
  range. `iter()` yields read-only `memoryview`s of the bytes inside the range,
  buffer by buffer; `iter_mut()` yields writable ones. `release()` zeroes every
  buffer and hands it back to its owner; it is also called when the slice is
  used as a context manager and leaves the `with` block, and when it is
  garbage-collected. Releasing twice is harmless.
- `nfs_mamont.mount`: the MOUNT v3 protocol. Data types `MountEntry`,
  `ExportEntry`, `MntSuccess`, `DumpSuccess`, `ExportSuccess`, `MountArgs`,
  `UnmountArgs`; status codes `MntError` and the exception `MountError`; the
  abstract `Mount` class with `null`, `mnt`, `dump`, `umnt`, `unmount_all` and
  `export`. Constants `MOUNT_PROGRAM`, `MOUNT_VERSION`, `MOUNT_DIRPATH_LEN`,
  `MOUNT_HOST_NAME_LEN`.
- `nfs_mamont.vfs.file`: `Handle` (8 bytes), `FileType`, `Time`, `Device`,
  `Attr` and `WccAttr`, with range checks on their integer fields.
- `nfs_mamont.vfs.core`: the `Error` status codes, the `VfsError` exception
  carrying one of them, `WccData`, `DirOpArgs`, the `Vfs` marker base, and
  `MAX_NAME_LEN` / `MAX_PATH_LEN`.
- One abstract class per NFSv3 procedure, each with its argument and success
  dataclasses and a failure exception derived from `VfsError`:
  - `nfs_mamont.vfs.query`: `Access` (with the `Mask` flags), `GetAttr`,
    `Lookup`, `ReadLink`
  - `nfs_mamont.vfs.set_attr`: `SetAttr`, with `NewAttr`, `SetTime`, `Guard`
  - `nfs_mamont.vfs.data`: `Read`, `Write` (with `StableHow`,
    `WriteVerifier`), `Commit`
  - `nfs_mamont.vfs.create_ops`: `Create` (with `Unchecked`, `Guarded`,
    `Exclusive`), `MkDir`, `MkNode` (with `What`), `Symlink`, `Link`
  - `nfs_mamont.vfs.remove_ops`: `Remove`, `RmDir`, `Rename`
  - `nfs_mamont.vfs.directory`: `ReadDir`, `ReadDirPlus`, with `Cookie` and
    `CookieVerifier`
  - `nfs_mamont.vfs.fs_info`: `FsInfo` (with the `Properties` flags),
    `FsStat`, `PathConf`

## Installing

```
pip install .
```

## Allocating buffers

```python
import asyncio

from nfs_mamont.allocator.pool import Pool


async def main():
    pool = Pool(buffer_size=4096, buffer_count=16)
    with await pool.allocate(10_000) as data:
        for chunk in data.iter_mut():
            chunk[:] = b"x" * len(chunk)
        print(sum(len(chunk) for chunk in data.iter()))  # 10000
    # the buffers are zeroed and back in the pool here


asyncio.run(main())
```

A request that fits the capacity but not the free buffers waits until
enough slices have been released.

## Implementing a file system

Each procedure is an abstract asynchronous method. An implementation
returns the success result and raises the matching failure, which carries
an `Error` code and any post-operation data:

```python
from nfs_mamont.vfs.core import Error
from nfs_mamont.vfs.query import Lookup, LookupArgs, LookupFailure, LookupSuccess


class MyFs(Lookup):
    async def lookup(self, args: LookupArgs) -> LookupSuccess:
        raise LookupFailure(Error.NO_ENTRY)
```

## What the package does not do

It defines interfaces and data types only. It has no RPC or XDR encoding,
no network listener, no command to start a server, and no file system
implementation or storage behind the abstract classes; those are left to
the code that uses it.

## Running the tests

```
pip install .[test]
pytest
```