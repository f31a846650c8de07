import io
import cfpromise
import pytest

from cfpromise import ApplyResult, CheckResult, ProtocolResult, ValidateResult
from cfpromise.log import Gate, Level
from cfpromise.protocol.message import EvaluateOutcome, ProtocolOutcome, ValidateOutcome


def gate():
    return Gate(io.StringIO(), Level.DEBUG)


def lines(log):
    return log.stream.getvalue().splitlines()


def test_validate():

    log = gate()
    assert ValidateResult.valid().outcome(log) == ValidateOutcome.VALID
    assert ValidateResult.invalid('bad policy').outcome(log) == ValidateOutcome.INVALID
    assert ValidateResult.error('oops').outcome(log) == ValidateOutcome.ERROR

    assert lines(log) == ['log_error=bad policy', 'log_error=oops']


def test_check():

    log = gate()
    assert CheckResult.kept().outcome(log) == EvaluateOutcome.KEPT
    assert CheckResult.always_apply().outcome(log) == EvaluateOutcome.NOT_KEPT
    assert CheckResult.error('oops').outcome(log) == EvaluateOutcome.ERROR

    assert lines(log) == ['log_info=This promise needs to be applied', 'log_error=oops']


def test_check_not_kept_severity():

    # Drift that is about to be fixed is only information; drift that will
    # be left alone is an error.

    log = gate()
    assert CheckResult.not_kept('drift').outcome(log, check_only=False) == EvaluateOutcome.NOT_KEPT
    assert lines(log) == ['log_info=drift']

    log = gate()
    assert CheckResult.not_kept('drift').outcome(log, check_only=True) == EvaluateOutcome.NOT_KEPT
    assert lines(log) == ['log_error=drift']


def test_apply():

    log = gate()
    assert ApplyResult.kept().outcome(log) == EvaluateOutcome.KEPT
    assert ApplyResult.repaired('made it').outcome(log) == EvaluateOutcome.REPAIRED
    assert ApplyResult.not_kept('could not').outcome(log) == EvaluateOutcome.NOT_KEPT
    assert ApplyResult.error('oops').outcome(log) == EvaluateOutcome.ERROR
    assert ApplyResult.audit_only().outcome(log) == EvaluateOutcome.ERROR

    expected = list()
    expected.append('log_info=made it')
    expected.append('log_error=could not')
    expected.append('log_error=oops')
    expected.append('log_error=Should not be applied, audit only promise')

    assert lines(log) == expected


def test_protocol():

    log = gate()
    assert ProtocolResult.success().outcome(log) == ProtocolOutcome.SUCCESS
    assert ProtocolResult.failure('no').outcome(log) == ProtocolOutcome.FAILURE
    assert ProtocolResult.error('oops').outcome(log) == ProtocolOutcome.ERROR

    assert lines(log) == ['log_error=no', 'log_error=oops']


def test_gated():

    log = Gate(io.StringIO(), Level.ERROR)

    ApplyResult.repaired('made it').outcome(log)
    CheckResult.not_kept('drift').outcome(log)
    assert lines(log) == []

    CheckResult.not_kept('drift').outcome(log, check_only=True)
    assert lines(log) == ['log_error=drift']


def test_equality():

    assert CheckResult.kept() == CheckResult.kept()
    assert CheckResult.not_kept('a') == CheckResult.not_kept('a')
    assert CheckResult.not_kept('a') != CheckResult.not_kept('b')
    assert CheckResult.kept() != ApplyResult.kept()
    assert 'not_kept' in repr(CheckResult.not_kept('a'))

    with pytest.raises(ValueError):
        CheckResult('repaired')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
