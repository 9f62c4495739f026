import pytest
from pydantic import ValidationError

from hub_subscriptions.http.cache import build_cache_control_header
from hub_subscriptions.http.errors import bad_request, error_payload, internal_error
from hub_subscriptions.models.event_kind import EventKind
from hub_subscriptions.models.subscription import Subscription


@pytest.mark.parametrize(
    "max_age,expected",
    [(0, "max-age=0"), (300, "max-age=300"), (1.9, "max-age=1"), (-5, "max-age=0")],
)
def test_build_cache_control_header(max_age, expected):
    assert build_cache_control_header(max_age) == expected


def test_error_payload_resolves_code_from_status():
    assert error_payload("nope", status_code=400) == {"error": "bad_request", "message": "nope"}
    assert error_payload("boom", status_code=418) == {"error": "error", "message": "boom"}


def test_error_helpers():
    exc = bad_request("bad")
    assert exc.status_code == 400
    assert exc.detail == {"error": "bad_request", "message": "bad"}
    assert internal_error().status_code == 500


def test_subscription_event_kind_defaults_to_new_release():
    subscription = Subscription.from_json('{"package_id": "invalid"}')

    assert subscription.event_kind == EventKind.NEW_RELEASE
    assert subscription.user_id is None


def test_subscription_rejects_non_integer_event_kind():
    with pytest.raises(ValidationError):
        Subscription.from_json('{"package_id": "p", "event_kind": true}')


def test_event_kind_membership():
    assert EventKind.is_valid(0)
    assert EventKind.is_valid(1)
    assert not EventKind.is_valid(2)
