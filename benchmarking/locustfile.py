"""Locust load testing script for TubeSummary read endpoints."""

import random

from locust import HttpUser, between, task

HISTORY_LIMITS = [5, 10, 20, 50]


class TubeSummaryUser(HttpUser):
    """Simulated user browsing summary history and share links."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    def on_start(self) -> None:
        self.known_ids: list[str] = []

    @task(3)
    def fetch_recent_summaries(self) -> None:
        """Fetch the history list - most common operation."""
        limit = random.choice(HISTORY_LIMITS)
        with self.client.get(
            f"/api/v1/summaries?limit={limit}",
            name="/api/v1/summaries",
            catch_response=True,
        ) as response:
            if response.status_code != 200:
                response.failure(f"HTTP {response.status_code}")
                return
            self.known_ids = [s["id"] for s in response.json()["summaries"]]

    @task(2)
    def open_shared_summary(self) -> None:
        """Open a share link for a summary seen in the history list."""
        if not self.known_ids:
            return
        summary_id = random.choice(self.known_ids)
        self.client.get(f"/api/v1/summaries/{summary_id}", name="/api/v1/summaries/[id]")

    @task(1)
    def health_check(self) -> None:
        """Hit the health endpoint."""
        self.client.get("/health")
