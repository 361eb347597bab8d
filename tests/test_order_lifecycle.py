"""Tests for the order status rules (no database involved)."""

import random
from datetime import datetime, timedelta

import pytest

from storefront.errors import InvalidTransition, ValidationFailure
from storefront.model import Order
from storefront.model.order import (
    PROCESSING, SHIPPED, OUT_FOR_DELIVERY, DELIVERED, CANCELLED, RETURN_REQUESTED, RETURNED,
)
from storefront.services import order_lifecycle

T0 = datetime(2025, 1, 10, 9, 0, 0)


def make_order(status=PROCESSING, order_date=T0, scheduled_date=None):
    return Order(
        id="o-1",
        owner_id="1",
        items=[],
        status=status,
        order_date=order_date,
        scheduled_date=scheduled_date,
        tracking_id="TRK123456",
    )


class TestAutoAdvance:
    def test_fresh_order_stays_processing(self):
        order = make_order()
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=2)) is False
        assert order.status == PROCESSING

    def test_exactly_three_days_is_not_enough(self):
        order = make_order()
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=3)) is False
        assert order.status == PROCESSING

    def test_ships_after_three_days(self):
        order = make_order()
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=4)) is True
        assert order.status == SHIPPED

    def test_scenario_without_scheduled_date(self):
        order = make_order()
        order_lifecycle.advance_status(order, T0 + timedelta(days=4))
        assert order.status == SHIPPED
        order_lifecycle.advance_status(order, T0 + timedelta(days=7))
        assert order.status == DELIVERED

    def test_fallback_delivery_is_six_days(self):
        order = make_order(status=SHIPPED)
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=6)) is False
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=6, seconds=1)) is True
        assert order.status == DELIVERED

    def test_processing_can_jump_to_delivered(self):
        order = make_order(scheduled_date=T0 + timedelta(days=5))
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=10)) is True
        assert order.status == DELIVERED

    def test_scheduled_date_wins_over_fallback(self):
        order = make_order(scheduled_date=T0 + timedelta(days=2))
        # not yet 3 days old, but past the scheduled delivery
        order_lifecycle.advance_status(order, T0 + timedelta(days=2, hours=1))
        assert order.status == DELIVERED

    def test_later_scheduled_date_holds_delivery(self):
        order = make_order(scheduled_date=T0 + timedelta(days=12))
        order_lifecycle.advance_status(order, T0 + timedelta(days=8))
        assert order.status == SHIPPED

    def test_out_for_delivery_is_delivered_after_threshold(self):
        order = make_order(status=OUT_FOR_DELIVERY, scheduled_date=T0 + timedelta(days=5))
        order_lifecycle.advance_status(order, T0 + timedelta(days=5, minutes=1))
        assert order.status == DELIVERED

    @pytest.mark.parametrize("status", [DELIVERED, CANCELLED, RETURNED])
    def test_terminal_statuses_never_move(self, status):
        order = make_order(status=status)
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=365)) is False
        assert order.status == status

    def test_return_requested_is_left_alone(self):
        order = make_order(status=RETURN_REQUESTED)
        assert order_lifecycle.advance_status(order, T0 + timedelta(days=30)) is False
        assert order.status == RETURN_REQUESTED


class TestCancel:
    @pytest.mark.parametrize("status", [PROCESSING, SHIPPED, OUT_FOR_DELIVERY, CANCELLED, RETURN_REQUESTED, RETURNED])
    def test_cancel_allowed_unless_delivered(self, status):
        order = make_order(status=status)
        now = T0 + timedelta(hours=5)
        order_lifecycle.apply_action(order, "cancel", now, reason="changed my mind")
        assert order.status == CANCELLED
        assert order.cancellation == {"reason": "changed my mind", "cancelledAt": now.isoformat()}

    def test_cancel_delivered_fails_and_leaves_order_alone(self):
        order = make_order(status=DELIVERED)
        with pytest.raises(InvalidTransition):
            order_lifecycle.apply_action(order, "cancel", T0, reason="late")
        assert order.status == DELIVERED
        assert order.cancellation is None


class TestReturn:
    def test_return_delivered(self):
        order = make_order(status=DELIVERED)
        now = T0 + timedelta(days=9)
        order_lifecycle.apply_action(order, "return", now, reason="wrong size")
        assert order.status == RETURN_REQUESTED
        assert order.return_request["status"] == "Pending"
        assert order.return_request["reason"] == "wrong size"
        assert order.return_request["requestedAt"] == now.isoformat()

    @pytest.mark.parametrize("status", [PROCESSING, SHIPPED, CANCELLED, RETURN_REQUESTED])
    def test_return_requires_delivered(self, status):
        order = make_order(status=status)
        with pytest.raises(InvalidTransition):
            order_lifecycle.apply_action(order, "return", T0)
        assert order.status == status
        assert order.return_request is None


class TestReschedule:
    def test_reschedule_open_order(self):
        order = make_order(status=SHIPPED)
        order_lifecycle.apply_action(order, "reschedule", T0, new_date="2025-01-20T10:00:00Z")
        assert order.scheduled_date == datetime(2025, 1, 20, 10, 0, 0)
        assert order.status == SHIPPED

    @pytest.mark.parametrize("status", [DELIVERED, CANCELLED, RETURNED])
    def test_reschedule_closed_order_fails(self, status):
        order = make_order(status=status)
        with pytest.raises(InvalidTransition):
            order_lifecycle.apply_action(order, "reschedule", T0, new_date="2025-01-20")
        assert order.scheduled_date is None

    def test_reschedule_needs_a_date(self):
        order = make_order()
        with pytest.raises(ValidationFailure):
            order_lifecycle.apply_action(order, "reschedule", T0, new_date="next tuesday")
        assert order.scheduled_date is None


def test_unknown_action_is_invalid_transition():
    order = make_order()
    with pytest.raises(InvalidTransition):
        order_lifecycle.apply_action(order, "refund", T0)
    assert order.status == PROCESSING


@pytest.mark.parametrize("action", [5, None, ["cancel"], {"name": "cancel"}, True])
def test_non_string_action_is_invalid_transition(action):
    order = make_order()
    with pytest.raises(InvalidTransition):
        order_lifecycle.apply_action(order, action, T0)
    assert order.status == PROCESSING


def test_action_names_are_case_insensitive():
    order = make_order()
    order_lifecycle.apply_action(order, "Cancel", T0)
    assert order.status == CANCELLED


def test_tracking_id_format():
    rng = random.Random(7)
    for _ in range(50):
        tid = order_lifecycle.generate_tracking_id(rng)
        assert tid.startswith("TRK")
        assert len(tid) == 9
        assert 100000 <= int(tid[3:]) <= 999999


def test_default_scheduled_date():
    assert order_lifecycle.default_scheduled_date(T0) == T0 + timedelta(days=5)
