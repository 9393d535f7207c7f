import errno

import pytest

from battinfo.errors import (
    BatteryError,
    ErrorKind,
    from_os_error,
    invalid_data,
    not_found,
)


def test_not_found_kind_and_message():
    err = not_found("Unable to calculate device energy value")
    assert err.kind is ErrorKind.NOT_FOUND
    assert str(err) == "Unable to calculate device energy value"


def test_invalid_data_kind_and_message():
    err = invalid_data("Returned bif struct is invalid")
    assert err.kind is ErrorKind.INVALID_DATA
    assert str(err) == "Returned bif struct is invalid"


def test_default_kind_is_other():
    err = BatteryError("boom")
    assert err.kind is ErrorKind.OTHER
    assert err.message == "boom"


def test_can_be_raised_and_caught():
    err = invalid_data("Device voltage value is unknown")
    with pytest.raises(BatteryError) as info:
        raise err
    assert info.value is err
    assert info.value.kind is ErrorKind.INVALID_DATA
    assert str(info.value) == "Device voltage value is unknown"


def test_from_os_error_not_found_keeps_cause():
    original = FileNotFoundError(errno.ENOENT, "No such file or directory")
    wrapped = from_os_error(original)
    assert wrapped.kind is ErrorKind.NOT_FOUND
    assert wrapped.__cause__ is original
    assert str(wrapped) == "No such file or directory"


def test_from_os_error_other():
    original = PermissionError(errno.EACCES, "Permission denied")
    wrapped = from_os_error(original)
    assert wrapped.kind is ErrorKind.OTHER
    assert wrapped.__cause__ is original