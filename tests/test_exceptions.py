"""Tests for the exception hierarchy."""

import pickle

from objstore import InvalidArgumentError, ObjectNotFoundError, ObjstoreError


def test_not_found_error():
    err = ObjectNotFoundError("a/b")
    assert err.name == "a/b"
    assert str(err) == "inmem: object not found: 'a/b'"
    assert isinstance(err, ObjstoreError)
    assert isinstance(err, KeyError)


def test_invalid_argument_error():
    err = InvalidArgumentError("inmem: object name is empty")
    assert isinstance(err, ObjstoreError)
    assert isinstance(err, ValueError)
    assert not isinstance(err, ObjectNotFoundError)


def test_not_found_error_pickles():
    err = pickle.loads(pickle.dumps(ObjectNotFoundError("a/b")))
    assert isinstance(err, ObjectNotFoundError)
    assert err.name == "a/b"
    assert str(err) == "inmem: object not found: 'a/b'"
