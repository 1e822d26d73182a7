[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nfs-mamont"
version = "0.0.0"
description = "Building blocks for an NFS version 3 server: a bounded buffer allocator and the MOUNT and VFS interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["nfs", "nfsv3", "mount", "vfs", "filesystem", "rfc1813", "asyncio"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["nfs_mamont"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
