"""
End-to-end tests for the HTTP and GraphQL endpoints
"""

import pytest
from unittest.mock import patch

SEARCH_QUERY = """
query Search($origin: String!, $destination: String!, $dates: [String!]!) {
  searchFlights(origin: $origin, destination: $destination, dates: $dates) {
    id origin destination departureTime arrivalTime price
  }
}
"""

BOOK_MUTATION = """
mutation Book($flightId: Int!) {
  bookFlight(passengerDetails: "Jane Doe", payment: "4111222233334444", flightId: $flightId) {
    bookingId
    flight { id price }
  }
}
"""

BOT_BOOK_MUTATION = """
mutation Book($flightId: Float!) {
  bookFlight(passengerDetails: "Agent Smith", payment: "4111222233334444", flightId: $flightId) {
    bookingId
    flight { id }
  }
}
"""

GET_BOOKING_QUERY = """
query GetBooking($id: Int!) {
  getBooking(id: $id) {
    bookingId passengerDetails paymentDetails bookingTime
    flight { id origin destination }
  }
}
"""

BOT_HEADERS = {"X-Bot-Confidence": "0.95", "X-User-Agent-Type": "bot"}


def graphql(client, path, query, variables=None, headers=None):
    response = client.post(path, json={"query": query, "variables": variables or {}}, headers=headers or {})
    assert response.status_code == 200
    return response.json()


class TestHealth:
    """Test health check endpoint"""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "version" in data
        assert "environment" in data
        assert data["components"]["gateway"]["status"] == "healthy"
        assert data["components"]["gateway"]["type"] == "SqlDataGateway"

    def test_health_reports_classification(self, client):
        data = client.get("/health", headers=BOT_HEADERS).json()

        assert data["classification"] == {
            "confidence": 0.95,
            "agent_type": "bot",
            "automated": True,
            "surface": "bot",
        }

    def test_invalid_endpoint(self, client):
        """Test invalid endpoint returns 404"""
        response = client.get("/invalid-endpoint")
        assert response.status_code == 404
        assert response.json()["error_code"] == "ENDPOINT_NOT_FOUND"


class TestClassificationEvents:
    """Test every request emits one classification event"""

    def test_event_per_request(self, client, classification_events):
        client.get("/health", headers={"X-Bot-Confidence": "0.3"})

        assert classification_events[-1] == {
            "path": "/health",
            "confidence": 0.3,
            "agent_type": "unknown",
            "automated": False,
        }

    def test_malformed_signal_does_not_abort(self, client, classification_events):
        data = graphql(
            client, "/graphql", SEARCH_QUERY,
            {"origin": "NYC", "destination": "LAX", "dates": []},
            headers={"X-Bot-Confidence": "very-likely"},
        )

        assert len(data["data"]["searchFlights"]) == 1
        assert classification_events[-1]["path"] == "/graphql"
        assert classification_events[-1]["confidence"] == 0.5
        assert classification_events[-1]["automated"] is False

    def test_threshold_boundary(self, client, classification_events):
        client.get("/health", headers={"X-Bot-Confidence": "0.55"})
        assert classification_events[-1]["automated"] is True

        client.get("/health", headers={"X-Bot-Confidence": "0.5499999"})
        assert classification_events[-1]["automated"] is False


class TestHumanGraphQL:
    """Test the human GraphQL endpoint"""

    def test_search_flights(self, client):
        data = graphql(client, "/graphql", SEARCH_QUERY, {"origin": "NYC", "destination": "LAX", "dates": ["2025-06-01"]})

        assert data["data"]["searchFlights"] == [{
            "id": 1,
            "origin": "NYC",
            "destination": "LAX",
            "departureTime": "2025-06-01T08:00:00",
            "arrivalTime": "2025-06-01T11:00:00",
            "price": 199.0,
        }]

    def test_search_unknown_route(self, client):
        data = graphql(client, "/graphql", SEARCH_QUERY, {"origin": "ZZZ", "destination": "LAX", "dates": []})
        assert data["data"]["searchFlights"] == []

    @pytest.mark.parametrize("addons,expected_total", [([], 199.0), (["wifi"], 209.0), (["a", "b", "c", "d", "a"], 249.0)])
    def test_build_offer(self, client, addons, expected_total):
        query = "mutation($addons: [String!]!) { buildOffer(flightId: 1, addons: $addons) { addons totalPrice flight { id } } }"
        data = graphql(client, "/graphql", query, {"addons": addons})

        assert data["data"]["buildOffer"] == {"addons": addons, "totalPrice": expected_total, "flight": {"id": 1}}

    def test_build_offer_unknown_flight(self, client):
        data = graphql(client, "/graphql", 'mutation { buildOffer(flightId: 99, addons: []) { totalPrice } }')

        assert data["data"] is None
        assert data["errors"][0]["message"] == "Flight not found: 99"
        assert data["errors"][0]["extensions"]["code"] == "FLIGHT_NOT_FOUND"

    def test_book_and_get_booking(self, client):
        booked = graphql(client, "/graphql", BOOK_MUTATION, {"flightId": 1})["data"]["bookFlight"]
        assert booked["bookingId"] > 0
        assert booked["flight"] == {"id": 1, "price": 199.0}

        booking = graphql(client, "/graphql", GET_BOOKING_QUERY, {"id": booked["bookingId"]})["data"]["getBooking"]
        assert booking["bookingId"] == booked["bookingId"]
        assert booking["passengerDetails"] == "Jane Doe"
        assert booking["paymentDetails"] == "4111222233334444"
        assert booking["bookingTime"]
        assert booking["flight"] == {"id": 1, "origin": "NYC", "destination": "LAX"}

    def test_book_unknown_flight(self, client):
        data = graphql(client, "/graphql", BOOK_MUTATION, {"flightId": 404})

        assert data["errors"][0]["extensions"]["code"] == "FLIGHT_NOT_FOUND"
        missing = graphql(client, "/graphql", GET_BOOKING_QUERY, {"id": 1})
        assert missing["errors"][0]["extensions"]["code"] == "BOOKING_NOT_FOUND"

    def test_bot_operations_not_exposed(self, client):
        data = graphql(client, "/graphql", "query { requestExplanation(flightId: 1) { baseFare } }")

        assert "errors" in data
        assert data.get("data") is None

    def test_bot_caller_served(self, client):
        """Test classification never blocks the human endpoint"""
        data = graphql(
            client, "/graphql", SEARCH_QUERY,
            {"origin": "NYC", "destination": "SFO", "dates": []},
            headers=BOT_HEADERS,
        )

        assert data["data"]["searchFlights"][0]["price"] == 329.0


class TestBotGraphQL:
    """Test the bot GraphQL endpoint"""

    def test_same_facts_as_human_endpoint(self, client):
        variables = {"origin": "NYC", "destination": "LAX", "dates": []}
        human = graphql(client, "/graphql", SEARCH_QUERY, variables)
        bot = graphql(client, "/bot/graphql", SEARCH_QUERY, variables, headers=BOT_HEADERS)

        assert bot["data"] == human["data"]

    def test_human_caller_served(self, client):
        data = graphql(client, "/bot/graphql", SEARCH_QUERY, {"origin": "BOS", "destination": "MIA", "dates": []})
        assert data["data"]["searchFlights"][0]["id"] == 4

    def test_book_flight_with_float_id(self, client):
        data = graphql(client, "/bot/graphql", BOT_BOOK_MUTATION, {"flightId": 2.0}, headers=BOT_HEADERS)

        booked = data["data"]["bookFlight"]
        assert booked["bookingId"] > 0
        assert booked["flight"] == {"id": 2}

    def test_book_flight_with_oversized_float_id(self, client):
        """Test an id past the integer range is reported as a missing flight"""
        data = graphql(client, "/bot/graphql", BOT_BOOK_MUTATION, {"flightId": 1e20}, headers=BOT_HEADERS)

        assert data["data"] is None
        assert data["errors"][0]["extensions"]["code"] == "FLIGHT_NOT_FOUND"

    def test_request_explanation(self, client):
        query = """
        query { requestExplanation(flightId: 3) {
          flightId baseFare taxesFees comparativeValue cancellationPolicy
          seatDetails { hasPower hasWifi }
          structuredExplanation
        } }
        """
        explanation = graphql(client, "/bot/graphql", query, headers=BOT_HEADERS)["data"]["requestExplanation"]

        assert explanation["flightId"] == 3
        assert explanation["baseFare"] + explanation["taxesFees"] == 329.0
        assert explanation["seatDetails"] == {"hasPower": True, "hasWifi": True}
        assert explanation["structuredExplanation"]["loyalty_points"] == 32

    def test_offer_insights(self, client):
        query = """
        query { offerInsights(flightId: 1) {
          flightId convenienceScore reliabilityScore
          priceComparison { averagePrice percentile priceHistory { date price } }
          structuredData
        } }
        """
        insights = graphql(client, "/bot/graphql", query)["data"]["offerInsights"]

        assert insights["priceComparison"]["percentile"] == 35.0
        assert len(insights["priceComparison"]["priceHistory"]) == 5
        assert insights["priceComparison"]["priceHistory"][0]["date"] == "2024-02-01"
        assert insights["structuredData"]["alternative_flights"][0]["id"] == 2

    def test_structured_booking_masks_payment(self, client):
        booking_id = graphql(client, "/graphql", BOOK_MUTATION, {"flightId": 1})["data"]["bookFlight"]["bookingId"]

        data = graphql(client, "/bot/graphql", "query($id: Int!) { getStructuredBooking(id: $id) }", {"id": booking_id})
        document = data["data"]["getStructuredBooking"]

        assert document["booking"]["payment_last4"] == "4444"
        assert document["flight"]["price"] == {"total": 199.0, "currency": "USD"}
        assert "4111222233334444" not in str(document)

    @pytest.mark.parametrize("context,expected", [
        ({"type": "discount"}, {"success": True, "negotiated_price": 189.0}),
        ({"type": "upgrade"}, {"success": True, "upgrade_fee": 30.0}),
        ({"type": "refund"}, {"success": False}),
        ({}, {"success": False}),
    ])
    def test_negotiate_offer(self, client, context, expected):
        query = "mutation($ctx: JSON!) { negotiateOffer(flightId: 1, negotiationContext: $ctx) }"
        outcome = graphql(client, "/bot/graphql", query, {"ctx": context}, headers=BOT_HEADERS)["data"]["negotiateOffer"]

        for key, value in expected.items():
            assert outcome[key] == value

    def test_negotiate_unknown_flight(self, client):
        query = "mutation($ctx: JSON!) { negotiateOffer(flightId: 77, negotiationContext: $ctx) }"
        data = graphql(client, "/bot/graphql", query, {"ctx": {"type": "discount"}})

        assert data["errors"][0]["extensions"]["code"] == "FLIGHT_NOT_FOUND"

    def test_submit_intent(self, client, audit):
        query = "mutation($intent: BotIntent!) { submitIntent(intent: $intent) }"
        intent = {"intentType": "search", "queryParams": {"origin": "NYC"}, "reason": "price check"}

        with patch.object(audit.logger, 'info') as mock_info:
            data = graphql(client, "/bot/graphql", query, {"intent": intent}, headers=BOT_HEADERS)

        assert data["data"]["submitIntent"] is True
        kwargs = mock_info.call_args.kwargs
        assert kwargs['intent_type'] == "search"
        assert kwargs['query_params'] == {"origin": "NYC"}
        assert kwargs['automated'] is True

    @pytest.mark.parametrize("metrics", [{"clicks": 3}, [1, 2, 3], "idle", 7.5])
    def test_submit_behavior_metrics(self, client, metrics):
        query = "mutation($metrics: JSON!) { submitBehaviorMetrics(metrics: $metrics) }"
        data = graphql(client, "/bot/graphql", query, {"metrics": metrics})

        assert data["data"]["submitBehaviorMetrics"] is True


class TestBotTelemetryEndpoints:
    """Test the plain HTTP telemetry endpoints"""

    @pytest.mark.parametrize("payload", [{"scroll_depth": 0.8}, [1, 2], "text", 42, False])
    def test_behavior_metrics_accepts_any_json(self, client, payload):
        response = client.post("/bot/behaviorMetrics", json=payload)

        assert response.status_code == 200
        assert response.json() == {"status": "accepted"}

    def test_behavior_metrics_forwarded_to_audit(self, client, audit):
        with patch.object(audit.logger, 'info') as mock_info:
            client.post("/bot/behaviorMetrics", json={"dwell_ms": 1200}, headers=BOT_HEADERS)

        kwargs = mock_info.call_args.kwargs
        assert kwargs['metrics'] == {"dwell_ms": 1200}
        assert kwargs['source'] == "http"
        assert kwargs['agent_type'] == "bot"

    def test_behavior_metrics_rejects_invalid_json(self, client):
        response = client.post(
            "/bot/behaviorMetrics",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_PAYLOAD"

    def test_intent(self, client):
        response = client.post("/bot/intent", json={"intent_type": "booking", "additional_context": {"step": 2}})

        assert response.status_code == 200
        assert response.json() == {"status": "accepted"}

    def test_intent_validation(self, client):
        """Test intent_type is required"""
        response = client.post("/bot/intent", json={"reason": "missing type"})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
