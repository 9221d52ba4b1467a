# -*- coding: utf-8 -*-
"""
backend/tests/modules/settlement/test_withdrawal_status_transitions.py

Máquina de estados de WithdrawalStatus y mapeo de decisiones.
"""

import pytest

from app.shared.errors import InvalidStateTransition
from app.modules.settlement.enums import (
    VALID_WITHDRAWAL_TRANSITIONS,
    WithdrawalDecision,
    WithdrawalStatus,
    get_allowed_transitions,
    is_valid_withdrawal_transition,
    validate_withdrawal_transition,
)


def test_every_status_has_entry():
    assert set(VALID_WITHDRAWAL_TRANSITIONS) == set(WithdrawalStatus)


def test_pending_can_be_decided_either_way():
    assert get_allowed_transitions(WithdrawalStatus.PENDING) == {
        WithdrawalStatus.APPROVED,
        WithdrawalStatus.REJECTED,
    }


@pytest.mark.parametrize("terminal", [WithdrawalStatus.APPROVED, WithdrawalStatus.REJECTED])
def test_terminal_states_have_no_exit(terminal):
    assert terminal.is_terminal
    assert get_allowed_transitions(terminal) == set()
    for target in WithdrawalStatus:
        assert not is_valid_withdrawal_transition(terminal, target)


def test_validate_raises_domain_error_on_redecision():
    with pytest.raises(InvalidStateTransition) as ei:
        validate_withdrawal_transition(WithdrawalStatus.APPROVED, WithdrawalStatus.APPROVED)
    assert ei.value.code == "invalid_state_transition"
    assert "approved" in ei.value.message


def test_decision_target_status():
    assert WithdrawalDecision.APPROVE.target_status is WithdrawalStatus.APPROVED
    assert WithdrawalDecision("reject").target_status is WithdrawalStatus.REJECTED
# Fin del archivo backend/tests/modules/settlement/test_withdrawal_status_transitions.py
