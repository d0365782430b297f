from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from stepup_sip.app import create_app
from stepup_sip.config import Settings


def sip_payload() -> dict:
    return {
        "monthly_investment": 5000,
        "step_up_percentage": 10,
        "expected_return_percent": 12,
        "years": 10,
    }


def test_calculation_endpoint_returns_totals_and_breakdown(client: FlaskClient):
    resp = client.post("/api/calc/step-up-sip", json=sip_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["future_value"] == 1687163
    assert body["total_investment"] == 956245
    assert body["estimated_returns"] == 730918
    assert [row["year"] for row in body["yearly_breakdown"]] == list(range(1, 11))
    assert body["yearly_breakdown"][4] == {
        "year": 5,
        "monthly_investment_at_start": 7321,
        "yearly_investment": 87846,
        "cumulative_future_value": 492285,
    }
    assert body["allocation"] == [
        {"name": "Total Investment", "value": 956245, "percent": 56.68},
        {"name": "Estimated Returns", "value": 730918, "percent": 43.32},
    ]


def test_empty_body_uses_default_inputs(client: FlaskClient):
    resp = client.post("/api/calc/step-up-sip", json={})

    assert resp.status_code == 200
    assert resp.get_json()["future_value"] == 1687163


def test_summary_endpoint_returns_display_strings(client: FlaskClient):
    resp = client.post("/api/calc/step-up-sip/summary", json=sip_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["future_value"] == "₹16.87 L"
    assert body["total_investment"] == "₹9.56 L"
    assert body["estimated_returns"] == "₹7.31 L"
    assert body["yearly_breakdown"][0]["monthly_investment"] == "₹5,000"


@pytest.mark.parametrize(
    "override",
    [
        {"monthly_investment": -1},
        {"years": 0},
        {"years": -5},
        {"years": 2.5},
        {"step_up_percentage": -10},
        {"expected_return_percent": -1},
        {"step_up_percentage": 250},
        {"years": 101},
        {"unexpected": True},
    ],
)
def test_invalid_inputs_return_422(client: FlaskClient, override):
    payload = sip_payload()
    payload.update(override)

    resp = client.post("/api/calc/step-up-sip", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["detail"]


def test_non_finite_rate_is_rejected(client: FlaskClient):
    resp = client.post(
        "/api/calc/step-up-sip",
        data='{"monthly_investment": 5000, "expected_return_percent": NaN, "years": 10}',
        content_type="application/json",
    )

    assert resp.status_code == 422
    locations = [tuple(err["loc"]) for err in resp.get_json()["detail"]]
    assert ("expected_return_percent",) in locations


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/step-up-sip", data="not json", content_type="application/json")

    assert resp.status_code == 400


def test_limits_come_from_settings():
    flask_app = create_app(Settings(_env_file=None, max_years=5))
    with flask_app.test_client() as client:
        payload = sip_payload()
        payload["years"] = 6
        resp = client.post("/api/calc/step-up-sip", json=payload)

    assert resp.status_code == 422
    messages = [err["msg"] for err in resp.get_json()["detail"]]
    assert any("years must be at most 5" in message for message in messages)


def test_cors_headers_for_configured_origin(client: FlaskClient):
    resp = client.post(
        "/api/calc/step-up-sip",
        json=sip_payload(),
        headers={"Origin": "http://localhost:5173"},
    )

    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
