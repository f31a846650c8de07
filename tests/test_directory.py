""" End-to-end runs of the example directory promise type against a
    temporary directory.
"""

import os
import cfpromise
import pytest

import unitpromise
from unitpromise import evaluate, terminate, validate


def run(directory_module, *requests):
    session = unitpromise.Session(directory_module.Directory())
    session.run(*requests)
    return session


def test_repaired(directory_module, tmp_path):

    target = str(tmp_path / 'created')
    session = run(directory_module, evaluate(target, {'state': 'present'}), terminate())

    assert session.results == ['repaired', 'success']
    assert os.path.isdir(target)
    assert session.log_lines == ['log_info=Directory %s should be present but is not' % (target), 'log_info=Created directory ' + target]


def test_kept(directory_module, tmp_path):

    target = str(tmp_path)
    session = run(directory_module, evaluate(target, {'state': 'present'}), terminate())

    assert session.results == ['kept', 'success']
    assert session.log_lines == []


def test_kept_never_applies(directory_module, tmp_path, monkeypatch):

    def refuse(*args, **kwargs):
        raise AssertionError('apply must not be invoked')

    monkeypatch.setattr(directory_module.Directory, 'apply', refuse)

    session = run(directory_module, evaluate(str(tmp_path), {'state': 'present'}), terminate())
    assert session.results == ['kept', 'success']


def test_removed(directory_module, tmp_path):

    target = tmp_path / 'doomed'
    target.mkdir()

    session = run(directory_module, evaluate(str(target), {'state': 'absent'}), terminate())

    assert session.results == ['repaired', 'success']
    assert not target.exists()


def test_audit(directory_module, tmp_path):

    target = str(tmp_path / 'missing')
    session = run(directory_module, evaluate(target, {'state': 'present'}, action_policy='warn'), terminate())

    assert session.results == ['not_kept', 'success']
    assert not os.path.exists(target)
    assert session.log_lines == ['log_error=Directory %s should be present but is not' % (target)]


def test_not_kept(directory_module, tmp_path):

    # Creating a directory inside a missing parent fails.

    target = str(tmp_path / 'missing' / 'child')
    session = run(directory_module, evaluate(target, {'state': 'present'}), terminate())

    assert session.results == ['not_kept', 'success']
    assert not os.path.exists(target)


def test_invalid_state(directory_module, tmp_path):

    target = str(tmp_path / 'never')
    session = unitpromise.Session(directory_module.Directory())

    with pytest.raises(cfpromise.errors.AttributeValidationError):
        session.run(evaluate(target, {'state': 'partial'}), terminate())

    # Only the header was ever written.

    assert session.responses == []
    assert len(session.records) == 1
    assert not os.path.exists(target)


def test_validate(directory_module, tmp_path):

    session = run(directory_module, validate(str(tmp_path), {'state': 'absent'}), terminate())
    assert session.results == ['valid', 'success']
    assert session.records[0] == 'directory_promise_module 0.0.1 v1 json_based'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
