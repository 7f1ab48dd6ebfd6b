"""Chargeback model decoding/encoding and query options."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mollie_chargebacks import (
    Chargeback,
    ChargebackList,
    ChargebackOptions,
    ListChargebackOptions,
)

FULL_CHARGEBACK = {
    "resource": "chargeback",
    "id": "chb_n9z0tp",
    "amount": {"currency": "USD", "value": "43.38"},
    "settlementAmount": {"currency": "EUR", "value": "-35.07"},
    "createdAt": "2018-03-14T17:00:52.0Z",
    "reversedAt": None,
    "paymentId": "tr_WDqYK6vllg",
    "_links": {
        "self": {
            "href": "https://api.mollie.com/v2/payments/tr_WDqYK6vllg/chargebacks/chb_n9z0tp",
            "type": "application/hal+json",
        },
        "payment": {
            "href": "https://api.mollie.com/v2/payments/tr_WDqYK6vllg",
            "type": "application/hal+json",
        },
        "documentation": {
            "href": "https://docs.mollie.com/reference/v2/chargebacks-api/get-chargeback",
            "type": "text/html",
        },
    },
}


class TestChargeback:
    def test_decodes_wire_names(self):
        cb = Chargeback.model_validate(FULL_CHARGEBACK)
        assert cb.id == "chb_n9z0tp"
        assert cb.payment_id == "tr_WDqYK6vllg"
        assert cb.amount.value == "43.38"
        assert cb.settlement_amount.currency == "EUR"
        assert cb.created_at == datetime(2018, 3, 14, 17, 0, 52, tzinfo=timezone.utc)
        assert cb.reversed_at is None
        assert cb.links.self_.type == "application/hal+json"
        assert cb.links.settlement is None

    def test_minimal_body_leaves_everything_else_absent(self):
        cb = Chargeback.model_validate_json(
            '{"resource":"chargeback","id":"chb_n9z0tp","paymentId":"tr_7UhSN1zuXS"}'
        )
        assert (cb.resource, cb.id, cb.payment_id) == ("chargeback", "chb_n9z0tp", "tr_7UhSN1zuXS")
        assert cb.amount is None
        assert cb.settlement_amount is None
        assert cb.created_at is None
        assert cb.reversed_at is None
        assert cb.links.self_ is None
        assert not cb.is_reversed
        assert not cb.is_settled

    def test_round_trip_keeps_absent_fields_absent(self):
        cb = Chargeback.model_validate(FULL_CHARGEBACK)
        encoded = json.loads(cb.to_json())
        assert "reversedAt" not in encoded
        assert "settlement" not in encoded["_links"]
        assert encoded["paymentId"] == "tr_WDqYK6vllg"
        assert encoded["_links"]["self"]["href"].endswith("/chargebacks/chb_n9z0tp")
        assert Chargeback.model_validate(encoded).model_dump() == cb.model_dump()

    def test_reversed_and_settled(self):
        cb = Chargeback.model_validate({
            **FULL_CHARGEBACK,
            "reversedAt": "2018-03-15T09:12:01+00:00",
        })
        assert cb.is_reversed
        assert cb.is_settled

    def test_null_links_decode_as_empty(self):
        cb = Chargeback.model_validate_json('{"id":"chb_1","_links":null}')
        assert cb.id == "chb_1"
        assert cb.links.self_ is None

    def test_ignores_unknown_fields(self):
        cb = Chargeback.model_validate({"id": "chb_1", "reason": {"code": "AC01"}})
        assert cb.id == "chb_1"

    def test_is_immutable(self):
        cb = Chargeback(id="chb_1")
        with pytest.raises(ValidationError):
            cb.id = "chb_2"


class TestChargebackList:
    def test_decodes_page(self):
        page = ChargebackList.model_validate_json(
            '{"count":1,"_embedded":{"chargebacks":[{"id":"chb_1"}]},"_links":{}}'
        )
        assert page.count == 1
        assert [cb.id for cb in page.chargebacks] == ["chb_1"]
        assert not page.has_next()
        assert not page.has_previous()

    def test_pagination_links(self):
        page = ChargebackList.model_validate({
            "count": 0,
            "_embedded": {"chargebacks": []},
            "_links": {
                "self": {"href": "https://api.mollie.com/v2/chargebacks?limit=5"},
                "previous": None,
                "next": {"href": "https://api.mollie.com/v2/chargebacks?from=chb_2&limit=5"},
            },
        })
        assert page.has_next()
        assert page.links.next.href.endswith("from=chb_2&limit=5")
        assert page.links.self_.href.endswith("limit=5")

    def test_empty_body(self):
        page = ChargebackList.model_validate_json("{}")
        assert page.count == 0
        assert page.chargebacks == []

    def test_null_containers_decode_as_empty(self):
        page = ChargebackList.model_validate_json('{"count":0,"_embedded":null,"_links":null}')
        assert page.chargebacks == []
        assert not page.has_next()


class TestOptions:
    def test_only_set_fields(self):
        assert ChargebackOptions(include="details").to_query() == {"include": "details"}
        assert ChargebackOptions(include="a", embed="b").to_query() == {"include": "a", "embed": "b"}

    def test_list_profile_id_uses_wire_name(self):
        opts = ListChargebackOptions(embed="payments", profile_id="pfl_QkEhN94Ba")
        assert opts.to_query() == {"embed": "payments", "profileId": "pfl_QkEhN94Ba"}

    def test_empty_strings_are_dropped(self):
        assert ChargebackOptions(include="", embed="").to_query() == {}
        assert ListChargebackOptions().to_query() == {}

    def test_parameters_sorted_by_name(self):
        opts = ListChargebackOptions(include="a", embed="b", profile_id="p")
        assert list(opts.to_query()) == ["embed", "include", "profileId"]
