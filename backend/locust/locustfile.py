"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --tags contention   # Test double booking of a room
  locust -f locustfile.py --tags throughput   # Test catalog cache
  locust -f locustfile.py --tags edge         # Test bad input
  locust -f locustfile.py                     # All tests

Seed the catalog first (python seed_catalog.py from backend/).
"""

import os
import random
from datetime import date, timedelta

from locust import HttpUser, task, between, tag

# Room every ContentionUser fights for; defaults to the first seeded room
ROOM_ID = int(os.environ.get("ROOM_ID", "1"))

HOTEL_IDS = []


def random_email():
    return f"load_{random.randint(100000, 999999)}@test.com"


def random_cpf():
    return "".join(random.choices("0123456789", k=11))


class Attendee(HttpUser):
    """
    Signs up, enrolls, buys a hotel-inclusive ticket and pays for it.
    Subclasses add the tasks; self.headers is empty if any step failed.
    """
    abstract = True

    def on_start(self):
        self.headers = {}
        email = random_email()
        credentials = {"email": email, "password": "test123"}

        self.client.post("/users", json=credentials)
        resp = self.client.post("/auth/sign-in", json=credentials)
        if resp.status_code != 200:
            return
        headers = {"Authorization": f"Bearer {resp.json()['token']}"}

        birthday = date.today() - timedelta(days=random.randint(18 * 365, 60 * 365))
        self.client.post("/enrollments", json={
            "name": "Load Test",
            "cpf": random_cpf(),
            "birthday": birthday.isoformat(),
            "phone": "11999999999",
        }, headers=headers)

        types = self.client.get("/tickets/types", headers=headers)
        if types.status_code != 200:
            return
        hotel_types = [t for t in types.json() if t["includesHotel"] and not t["isRemote"]]
        if not hotel_types:
            return

        ticket = self.client.post(
            "/tickets", json={"ticketTypeId": hotel_types[0]["id"]}, headers=headers
        )
        if ticket.status_code != 201:
            return

        paid = self.client.post("/payments/process", json={
            "ticketId": ticket.json()["id"],
            "cardData": {
                "issuer": "VISA",
                "number": 4111111111111111,
                "name": "Load Test",
                "expirationDate": "12/30",
                "cvv": 123,
            },
        }, headers=headers)
        if paid.status_code == 200:
            self.headers = headers


class ContentionUser(Attendee):
    """
    TEST 1: Contention - N attendees, 1 room

    Run: locust -f locustfile.py --tags contention -u 100 -r 50 --run-time 30s

    After test, verify:
      SELECT COUNT(*) FROM bookings WHERE room_id = X;
    Should be exactly 1
    """
    wait_time = between(0, 0.1)

    @tag("contention")
    @task
    def book_same_room(self):
        if not self.headers:
            return

        with self.client.post("/booking",
            json={"roomId": ROOM_ID},
            headers=self.headers,
            catch_response=True
        ) as resp:
            if resp.status_code in (200, 403):
                resp.success()  # 403: someone else holds it
            else:
                resp.failure(f"Unexpected: {resp.status_code}")


class ThroughputUser(Attendee):
    """
    TEST 2: Throughput - Cache effectiveness

    Run twice:
      1. With Redis: locust -f locustfile.py --tags throughput -u 100 -r 20 --run-time 60s
      2. Without Redis: REDIS_ENABLED=false on the API, run again

    Compare avg response time and P95/P99 latency of the catalog reads.
    """
    wait_time = between(0.1, 0.5)

    @tag("throughput", "read")
    @task(10)
    def list_ticket_types(self):
        if self.headers:
            self.client.get("/tickets/types", headers=self.headers, name="/tickets/types [cached]")

    @tag("throughput", "read")
    @task(5)
    def list_hotels(self):
        if not self.headers:
            return
        resp = self.client.get("/hotels", headers=self.headers, name="/hotels [cached]")
        if resp.status_code == 200:
            for hotel in resp.json():
                if hotel["id"] not in HOTEL_IDS:
                    HOTEL_IDS.append(hotel["id"])

    @tag("throughput", "read")
    @task(3)
    def hotel_rooms(self):
        if self.headers and HOTEL_IDS:
            self.client.get(f"/hotels/{random.choice(HOTEL_IDS)}",
                headers=self.headers, name="/hotels/{id}")

    @tag("throughput", "read")
    @task(3)
    def event(self):
        self.client.get("/event", name="/event [cached]")

    @tag("throughput")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def on_start(self):
        credentials = {"email": random_email(), "password": "test123"}
        self.client.post("/users", json=credentials)
        resp = self.client.post("/auth/sign-in", json=credentials)
        if resp.status_code == 200:
            self.headers = {"Authorization": f"Bearer {resp.json()['token']}"}
        else:
            self.headers = {}

    def _expect(self, resp, codes):
        if resp.status_code in codes:
            resp.success()
        else:
            resp.failure(f"Expected {codes}, got {resp.status_code}")

    @tag("edge")
    @task
    def book_without_ticket(self):
        with self.client.post("/booking", json={"roomId": ROOM_ID},
                              headers=self.headers, catch_response=True) as resp:
            self._expect(resp, (403,))

    @tag("edge")
    @task
    def hotels_without_ticket(self):
        with self.client.get("/hotels", headers=self.headers, catch_response=True) as resp:
            self._expect(resp, (404,))

    @tag("edge")
    @task
    def invalid_hotel_id(self):
        with self.client.get("/hotels/abc", headers=self.headers,
                             name="/hotels/{id}", catch_response=True) as resp:
            self._expect(resp, (400, 404))

    @tag("edge")
    @task
    def invalid_booking_id(self):
        with self.client.put("/booking/abc", json={"roomId": ROOM_ID},
                             headers=self.headers, name="/booking/{id}", catch_response=True) as resp:
            self._expect(resp, (403,))

    @tag("edge")
    @task
    def malformed_json(self):
        with self.client.post("/booking", data="not json at all",
                              headers=self.headers, catch_response=True) as resp:
            self._expect(resp, (400,))

    @tag("edge")
    @task
    def bad_card(self):
        with self.client.post("/payments/process", json={
            "ticketId": 1,
            "cardData": {"issuer": "AMEX", "number": 1, "name": "", "expirationDate": "x", "cvv": 0},
        }, headers=self.headers, catch_response=True) as resp:
            self._expect(resp, (400,))

    @tag("edge")
    @task
    def missing_auth(self):
        with self.client.post("/booking", json={"roomId": ROOM_ID}, catch_response=True) as resp:
            self._expect(resp, (401,))
