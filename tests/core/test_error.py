import logging

import pytest

from collectforge import CollectionError, InvalidArgument, InvalidKey, KeyNotFound
from collectforge.core import error as cf_error


@pytest.mark.parametrize(
    "code, error_class, builtin",
    [
        (cf_error.INVALIDARGUMENT, InvalidArgument, ValueError),
        (cf_error.INVALIDKEY, InvalidKey, TypeError),
        (cf_error.KEYNOTFOUND, KeyNotFound, KeyError),
    ],
)
def test_e_raises_registered_class(code, error_class, builtin):
    with pytest.raises(error_class) as exc_info:
        cf_error.e(code, "put", "detail")
    error = exc_info.value
    assert isinstance(error, CollectionError)
    assert isinstance(error, builtin)
    assert error.code == code
    assert error.operation == "put"


def test_invalid_argument_message():
    with pytest.raises(InvalidArgument, match="^compare: bad operands$"):
        cf_error.e(cf_error.INVALIDARGUMENT, "compare", "bad operands")


def test_invalid_argument_default_message():
    with pytest.raises(InvalidArgument, match="invalid argument to invert"):
        cf_error.e(cf_error.INVALIDARGUMENT, "invert")


def test_key_errors_carry_the_key():
    with pytest.raises(InvalidKey) as exc_info:
        cf_error.e(cf_error.INVALIDKEY, "put", 1.5)
    assert exc_info.value.key == 1.5
    assert str(exc_info.value) == "key 1.5 is not allowed"

    with pytest.raises(KeyNotFound) as exc_info:
        cf_error.e(cf_error.KEYNOTFOUND, "get", "x")
    assert exc_info.value.key == "x"
    assert str(exc_info.value) == "key 'x' not found"


def test_unknown_code():
    with pytest.raises(RuntimeError):
        cf_error.e(99, "put")


def test_errors_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="collectforge.core.error")
    with pytest.raises(KeyNotFound):
        cf_error.e(cf_error.KEYNOTFOUND, "get", "x")
    assert "/keynotfound in --get--" in caplog.text


def test_error_names_match_codes():
    assert cf_error.error_names[cf_error.INVALIDARGUMENT] == "invalidargument"
    assert cf_error.error_names[cf_error.INVALIDKEY] == "invalidkey"
    assert cf_error.error_names[cf_error.KEYNOTFOUND] == "keynotfound"
