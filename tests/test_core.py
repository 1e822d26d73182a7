import pytest

from nfs_mamont.vfs.core import (
    DirOpArgs,
    Error,
    VfsError,
    WccData,
)
from nfs_mamont.vfs.file import HANDLE_SIZE, Handle, Time, WccAttr


@pytest.mark.parametrize(
    "code, member",
    [
        (1, Error.PERMISSION),
        (2, Error.NO_ENTRY),
        (63, Error.NAME_TOO_LONG),
        (10001, Error.BAD_FILE_HANDLE),
        (10008, Error.JUKEBOX),
    ],
)
def test_error_codes_match_protocol(code, member):
    error = VfsError(code)
    assert error.error is member
    assert int(error.error) == code


def test_vfs_error_carries_status():
    error = VfsError(Error.STALE_FILE)
    assert error.error is Error.STALE_FILE
    assert "STALE_FILE" in str(error)


def test_vfs_error_accepts_raw_code_and_message():
    error = VfsError(int(Error.EXIST), "already there")
    assert error.error is Error.EXIST
    assert str(error) == "already there"


def test_vfs_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        VfsError(4)


def test_wcc_data_defaults_to_empty():
    data = WccData()
    assert data.before is None
    assert data.after is None


def test_wcc_data_holds_before_attributes():
    before = WccAttr(size=1, mtime=Time(1, 0), ctime=Time(1, 0))
    data = WccData(before=before)
    assert data.before == before
    assert data == WccData(before=before, after=None)


def test_dir_op_args_equality():
    handle = Handle(bytes(HANDLE_SIZE))
    args = DirOpArgs(dir=handle, name="file.txt")
    assert args == DirOpArgs(Handle(bytes(HANDLE_SIZE)), "file.txt")
    assert args.name == "file.txt"