"""HTTP tests for promo code lookup and give-out."""
import uuid
from datetime import datetime, timedelta

from promocode_api.db.fixtures import CUSTOMER_ID, PROMO_CODE_IDS

BASE = "/api/v1"


def _give(**overrides):
    body = {
        "serviceInfo": "autumn campaign",
        "partnerName": "Bolshoi",
        "promoCode": "THEATRE10",
        "preference": "Theatre",
    }
    body.update(overrides)
    return body


class TestLookup:
    def test_list_seeded_promo_codes(self, client):
        resp = client.get(f"{BASE}/promocodes")
        assert resp.status_code == 200
        assert [p["code"] for p in resp.json()] == ["ALLFOR100", "PROMO 200"]

    def test_get_by_id(self, client):
        resp = client.get(f"{BASE}/promocodes/{PROMO_CODE_IDS[0]}")
        assert resp.status_code == 200
        assert resp.json()["partnerName"] == "SuperToys"
        assert resp.json()["endDate"] == "2020-08-09T00:00:00+00:00"

    def test_get_unknown_404(self, client):
        assert client.get(f"{BASE}/promocodes/{uuid.uuid4()}").status_code == 404


class TestGiveOut:
    def test_give_to_customers_with_preference(self, client):
        resp = client.post(f"{BASE}/promocodes", json=_give())
        assert resp.status_code == 200
        issued = resp.json()
        assert len(issued) == 1
        assert issued[0]["code"] == "THEATRE10"
        assert issued[0]["serviceInfo"] == "autumn campaign"

        begin = datetime.fromisoformat(issued[0]["beginDate"])
        end = datetime.fromisoformat(issued[0]["endDate"])
        assert end - begin == timedelta(days=30)

        codes = client.get(f"{BASE}/customers/{CUSTOMER_ID}").json()["promoCodes"]
        assert "THEATRE10" in {c["code"] for c in codes}

    def test_give_reaches_new_customers(self, client):
        client.post(
            f"{BASE}/customers",
            json={
                "firstName": "Olga",
                "lastName": "Smirnova",
                "email": "olga@mail.ru",
                "preferenceIds": [],
            },
        )
        prefs = {p["name"]: p["id"] for p in client.get(f"{BASE}/preferences").json()}
        resp = client.post(
            f"{BASE}/customers",
            json={
                "firstName": "Oleg",
                "lastName": "Kuznetsov",
                "email": "oleg@mail.ru",
                "preferenceIds": [prefs["Children"]],
            },
        )
        oleg_id = resp.json()["id"]

        issued = client.post(f"{BASE}/promocodes", json=_give(preference="Children")).json()
        assert len(issued) == 1
        codes = client.get(f"{BASE}/customers/{oleg_id}").json()["promoCodes"]
        assert [c["code"] for c in codes] == ["THEATRE10"]

    def test_give_with_no_matching_customers_returns_empty(self, client):
        resp = client.post(f"{BASE}/promocodes", json=_give(preference="Children"))
        assert resp.status_code == 200
        assert resp.json() == []

    def test_give_unknown_preference_400(self, client):
        resp = client.post(f"{BASE}/promocodes", json=_give(preference="Opera"))
        assert resp.status_code == 400
        assert len(client.get(f"{BASE}/promocodes").json()) == 2


def test_two_give_outs_both_visible_on_customer(client):
    client.post(f"{BASE}/promocodes", json=_give(promoCode="FIRST"))
    client.post(f"{BASE}/promocodes", json=_give(promoCode="SECOND"))
    codes = {c["code"] for c in client.get(f"{BASE}/customers/{CUSTOMER_ID}").json()["promoCodes"]}
    assert {"FIRST", "SECOND"} <= codes
    assert len(codes) == 4
