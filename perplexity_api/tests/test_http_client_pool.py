"""Unit tests for the shared httpx client pool.

Covers:
- Same purpose returns the same instance.
- Different purpose yields different instances.
- A closed client is replaced on next request.
- Pooled clients carry the configured timeouts.
"""
from __future__ import annotations

from perplexity_api.base.http import close_all_clients, get_httpx_client


def setup_function(_):
    # Ensure a clean slate for each test
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_purpose_returns_same_instance():
    c1 = get_httpx_client("chat")
    c2 = get_httpx_client("chat")
    assert c1 is c2, "Expected pooled client instances to be identical for same purpose"


def test_different_purpose_returns_different_instances():
    c1 = get_httpx_client("chat")
    c2 = get_httpx_client("stream")
    assert c1 is not c2, "Different purposes should not share the same client instance"


def test_closed_client_is_recreated():
    c1 = get_httpx_client("chat")
    c1.close()
    c2 = get_httpx_client("chat")
    assert c2 is not c1 and not c2.is_closed  # nosec B101 - pytest assert in tests


def test_close_all_clients_closes_pooled_instances():
    c1 = get_httpx_client("chat")
    close_all_clients()
    assert c1.is_closed  # nosec B101 - pytest assert in tests


def test_pooled_client_uses_timeout_config(monkeypatch):
    monkeypatch.setenv("PERPLEXITY_TIMEOUT_CONNECT_SECONDS", "4")
    client = get_httpx_client("timeouts")
    assert client.timeout.connect == 4.0  # nosec B101 - pytest assert in tests
    assert client.timeout.read == 300.0  # nosec B101 - pytest assert in tests
