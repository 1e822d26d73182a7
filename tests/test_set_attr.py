import dataclasses

import pytest

from nfs_mamont.vfs.core import Error, VfsError, WccData
from nfs_mamont.vfs.file import Attr, Device, FileType, Handle, Time, WccAttr
from nfs_mamont.vfs.set_attr import (
    Guard,
    NewAttr,
    SetAttr,
    SetAttrArgs,
    SetAttrFailure,
    SetTime,
    SetTimeHow,
)

FILE = Handle(b"\x00" * 7 + b"\x01")
MISSING = Handle(b"\x00" * 7 + b"\x02")
SERVER_NOW = Time(1000, 0)


def make_attr(**overrides):
    values = dict(
        file_type=FileType.REGULAR,
        mode=0o644,
        nlink=1,
        uid=10,
        gid=20,
        size=5,
        used=5,
        device=Device(0, 0),
        fs_id=1,
        file_id=2,
        atime=Time(1, 0),
        mtime=Time(2, 0),
        ctime=Time(3, 0),
    )
    values.update(overrides)
    return Attr(**values)


def _apply_time(current, how):
    if how.how is SetTimeHow.TO_CLIENT:
        return how.time
    if how.how is SetTimeHow.TO_SERVER:
        return SERVER_NOW
    return current


class MemoryFs(SetAttr):
    def __init__(self):
        self.attrs = {FILE: make_attr()}

    async def set_attr(self, args):
        attr = self.attrs.get(args.file)
        if attr is None:
            raise SetAttrFailure(Error.STALE_FILE)
        before = WccAttr(attr.size, attr.mtime, attr.ctime)
        if args.guard is not None and args.guard.ctime != attr.ctime:
            raise SetAttrFailure(Error.NOT_SYNC, WccData(before, attr))
        new = args.new_attr
        changes = {
            name: getattr(new, name)
            for name in ("mode", "uid", "gid", "size")
            if getattr(new, name) is not None
        }
        mtime = _apply_time(attr.mtime, new.mtime)
        if new.size is not None and new.mtime.how is SetTimeHow.DONT_CHANGE:
            mtime = SERVER_NOW
        updated = dataclasses.replace(
            attr, atime=_apply_time(attr.atime, new.atime), mtime=mtime, **changes
        )
        self.attrs[args.file] = updated
        return WccData(before, updated)


def test_set_time_constructors():
    assert SetTime.dont_change().how is SetTimeHow.DONT_CHANGE
    assert SetTime.to_server().how is SetTimeHow.TO_SERVER
    client = SetTime.to_client(Time(7, 8))
    assert client.how is SetTimeHow.TO_CLIENT
    assert client.time == Time(7, 8)


def test_set_time_client_requires_time():
    with pytest.raises(ValueError):
        SetTime(SetTimeHow.TO_CLIENT)


def test_set_time_rejects_time_for_other_strategies():
    with pytest.raises(ValueError):
        SetTime(SetTimeHow.DONT_CHANGE, Time(1, 2))
    with pytest.raises(ValueError):
        SetTime(SetTimeHow.TO_SERVER, Time(1, 2))


def test_new_attr_defaults_change_nothing():
    attr = NewAttr()
    assert (attr.mode, attr.uid, attr.gid, attr.size) == (None, None, None, None)
    assert attr.atime == SetTime.dont_change()
    assert attr.mtime == SetTime.dont_change()


@pytest.mark.parametrize(
    "kwargs",
    [{"mode": -1}, {"uid": 2**32}, {"gid": 2**32}, {"size": 2**64}, {"size": -1}],
)
def test_new_attr_rejects_out_of_range(kwargs):
    with pytest.raises(ValueError):
        NewAttr(**kwargs)


def test_new_attr_rejects_non_integers():
    with pytest.raises(TypeError):
        NewAttr(mode="755")


def test_set_attr_args_defaults():
    args = SetAttrArgs(FILE)
    assert args.guard is None
    assert args.new_attr == NewAttr()


def test_failure_is_vfs_error_with_default_wcc():
    failure = SetAttrFailure(Error.NOT_SYNC)
    assert isinstance(failure, VfsError)
    assert failure.error is Error.NOT_SYNC
    assert failure.wcc_data == WccData()


def test_failure_accepts_raw_code():
    assert SetAttrFailure(70).error is Error.STALE_FILE


def test_set_attr_is_abstract():
    with pytest.raises(TypeError):
        SetAttr()


@pytest.mark.asyncio
async def test_set_attr_updates_requested_fields():
    fs = MemoryFs()
    wcc = await fs.set_attr(
        SetAttrArgs(FILE, NewAttr(mode=0o600, atime=SetTime.to_client(Time(9, 9))))
    )
    assert wcc.after.mode == 0o600
    assert wcc.after.uid == fs.attrs[FILE].uid
    assert wcc.after.atime == Time(9, 9)
    assert wcc.before.size == wcc.after.size


@pytest.mark.asyncio
async def test_set_attr_size_change_moves_mtime():
    fs = MemoryFs()
    wcc = await fs.set_attr(SetAttrArgs(FILE, NewAttr(size=0)))
    assert wcc.after.size == 0
    assert wcc.after.mtime == SERVER_NOW


@pytest.mark.asyncio
async def test_set_attr_guard_mismatch_preserves_attributes():
    fs = MemoryFs()
    original = fs.attrs[FILE]
    with pytest.raises(SetAttrFailure) as info:
        await fs.set_attr(
            SetAttrArgs(FILE, NewAttr(mode=0), guard=Guard(Time(99, 0)))
        )
    assert info.value.error is Error.NOT_SYNC
    assert info.value.wcc_data.after == original
    assert fs.attrs[FILE] == original


@pytest.mark.asyncio
async def test_set_attr_guard_match_applies():
    fs = MemoryFs()
    ctime = fs.attrs[FILE].ctime
    wcc = await fs.set_attr(SetAttrArgs(FILE, NewAttr(uid=0), guard=Guard(ctime)))
    assert wcc.after.uid == 0


@pytest.mark.asyncio
async def test_set_attr_unknown_handle():
    with pytest.raises(VfsError) as info:
        await MemoryFs().set_attr(SetAttrArgs(MISSING))
    assert info.value.error is Error.STALE_FILE