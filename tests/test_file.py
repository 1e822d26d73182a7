import pytest

from nfs_mamont.vfs.file import (
    HANDLE_SIZE,
    Attr,
    Device,
    FileType,
    Handle,
    Time,
    WccAttr,
)

U32 = 2**32
U64 = 2**64


def make_attr(**overrides):
    values = dict(
        file_type=FileType.REGULAR, mode=0o644, nlink=1, uid=1000, gid=1000,
        size=10, used=10, device=Device(0, 0), fs_id=1, file_id=2,
        atime=Time(1, 2), mtime=Time(3, 4), ctime=Time(5, 6),
    )
    values.update(overrides)
    return Attr(**values)


def test_handle_keeps_bytes_and_compares_by_value():
    expected = bytes(range(HANDLE_SIZE))
    handle = Handle(bytearray(expected))
    assert handle.data == expected
    assert handle == Handle(expected)
    assert hash(handle) == hash(Handle(expected))


def test_handle_is_not_affected_by_later_changes_to_source_buffer():
    raw = bytearray(HANDLE_SIZE)
    handle = Handle(raw)
    raw[0] = 9
    assert handle.data == bytes(HANDLE_SIZE)


@pytest.mark.parametrize(
    "build",
    [
        lambda: Handle(bytes(0)),
        lambda: Handle(bytes(HANDLE_SIZE - 1)),
        lambda: Handle(bytes(HANDLE_SIZE + 1)),
        lambda: Time(-1, 0),
        lambda: Time(0, U32),
        lambda: Device(U32, 0),
        lambda: WccAttr(size=-1, mtime=Time(1, 0), ctime=Time(2, 0)),
        lambda: make_attr(file_type=99),
    ],
)
def test_out_of_range_values_rejected(build):
    with pytest.raises(ValueError):
        build()


@pytest.mark.parametrize("build", [lambda: Handle(HANDLE_SIZE), lambda: make_attr(uid="root")])
def test_wrong_types_rejected(build):
    with pytest.raises(TypeError):
        build()


def test_file_type_values_match_protocol():
    assert FileType.REGULAR == 1
    assert FileType.DIRECTORY == 2
    assert FileType.FIFO == 7
    assert FileType(5) is FileType.SYMLINK


def test_value_types_compare_by_value():
    assert Time(1, 2) == Time(1, 2)
    assert Time(1, 2) != Time(2, 1)
    assert Device(8, 1).major == 8
    assert WccAttr(size=4, mtime=Time(1, 0), ctime=Time(2, 0)) == WccAttr(4, Time(1, 0), Time(2, 0))


def test_attr_coerces_file_type_from_int():
    assert make_attr(file_type=2).file_type is FileType.DIRECTORY


@pytest.mark.parametrize(
    "field, limit",
    [(name, U32) for name in ("mode", "nlink", "uid", "gid")]
    + [(name, U64) for name in ("size", "used", "fs_id", "file_id")],
)
def test_attr_integer_limits(field, limit):
    assert getattr(make_attr(**{field: limit - 1}), field) == limit - 1
    with pytest.raises(ValueError):
        make_attr(**{field: limit})