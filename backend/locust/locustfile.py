"""
Locust Load Test Suite

Seed the database first (python -m trainbook.seed), then run:
  locust -f locustfile.py --tags booking     # Full booking flow
  locust -f locustfile.py --tags browse      # Stations and fare quotes only
  locust -f locustfile.py --tags edge        # Test bad input
  locust -f locustfile.py                    # All tests
"""

import random
import string
from datetime import date, timedelta

from locust import HttpUser, task, between, tag

STATION_IDS = [1, 2, 3, 4]
CLASSES = ["ac", "sleeper", "general"]


def random_email():
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=10))
    return f"load_{suffix}@test.com"


def random_route():
    return random.sample(STATION_IDS, 2)


def travel_date(days_ahead: int = None) -> str:
    if days_ahead is None:
        days_ahead = random.randint(0, 60)
    return (date.today() + timedelta(days=days_ahead)).isoformat()


class BookingUser(HttpUser):
    """
    Register, log in, then quote and book tickets.

    Run: locust -f locustfile.py --tags booking -u 50 -r 10 --run-time 60s

    Every successful booking must appear in /my-bookings with the quoted amount.
    """
    wait_time = between(0.5, 2)

    def on_start(self):
        email = random_email()
        password = "load-test-pass"
        self.client.post("/register", json={
            "name": "Load Tester",
            "email": email,
            "password": password,
        })
        resp = self.client.post("/login", json={"email": email, "password": password})
        self.user_id = resp.json().get("user", {}).get("id") if resp.ok else None

    @tag("booking")
    @task(3)
    def quote_and_book(self):
        if not self.user_id:
            return
        from_id, to_id = random_route()
        travel_class = random.choice(CLASSES)

        quote = self.client.post("/calculate-fare", json={
            "fromStationId": from_id,
            "toStationId": to_id,
            "reservationType": travel_class,
        })
        if quote.status_code != 200:
            return

        with self.client.post("/book", json={
            "userId": self.user_id,
            "passengerName": "Load Passenger",
            "age": random.randint(1, 90),
            "reservationType": travel_class,
            "travelDate": travel_date(),
            "fromStationId": from_id,
            "toStationId": to_id,
        }, catch_response=True) as resp:
            if resp.status_code != 200:
                resp.failure(f"Booking failed: {resp.status_code}")
            elif resp.json()["booking"]["amount"] != quote.json()["amount"]:
                resp.failure("Booked amount differs from quote")
            else:
                resp.success()

    @tag("booking")
    @task(1)
    def my_bookings(self):
        if self.user_id:
            self.client.get("/my-bookings", params={"userId": self.user_id}, name="/my-bookings")


class BrowsingUser(HttpUser):
    """Read-heavy traffic: station list and fare quotes."""
    wait_time = between(0.1, 0.5)

    @tag("browse")
    @task(2)
    def stations(self):
        self.client.get("/stations")

    @tag("browse")
    @task(3)
    def quote(self):
        from_id, to_id = random_route()
        self.client.post("/calculate-fare", json={
            "fromStationId": from_id,
            "toStationId": to_id,
            "reservationType": random.choice(CLASSES),
        })


class EdgeCaseUser(HttpUser):
    """
    Bad input must be rejected with 400/404, never 500.

    Run: locust -f locustfile.py --tags edge -u 10 -r 5 --run-time 30s
    """
    wait_time = between(0.5, 1)

    def _expect(self, resp, allowed):
        if resp.status_code in allowed:
            resp.success()
        else:
            resp.failure(f"Unexpected status {resp.status_code}")

    @tag("edge")
    @task
    def past_date(self):
        with self.client.post("/book", json={
            "userId": 1,
            "passengerName": "Late",
            "age": 30,
            "reservationType": "ac",
            "travelDate": travel_date(-1),
            "fromStationId": 1,
            "toStationId": 2,
        }, catch_response=True, name="/book [past date]") as resp:
            self._expect(resp, {400})

    @tag("edge")
    @task
    def same_station(self):
        with self.client.post("/calculate-fare", json={
            "fromStationId": 1,
            "toStationId": 1,
            "reservationType": "ac",
        }, catch_response=True, name="/calculate-fare [same station]") as resp:
            self._expect(resp, {400})

    @tag("edge")
    @task
    def unknown_route(self):
        with self.client.post("/calculate-fare", json={
            "fromStationId": 1,
            "toStationId": 9999,
            "reservationType": "sleeper",
        }, catch_response=True, name="/calculate-fare [no fare]") as resp:
            self._expect(resp, {404})

    @tag("edge")
    @task
    def missing_fields(self):
        with self.client.post("/book", json={"userId": 1}, catch_response=True,
                              name="/book [missing fields]") as resp:
            self._expect(resp, {400})
