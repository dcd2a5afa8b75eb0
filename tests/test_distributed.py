import threading

import pytest

from interviewkit.distributed import (
    AllReplicasFailedError,
    DatabaseHost,
    NotFoundError,
    QueryTimeoutError,
    distributed_query,
)

FAST = {"retry_interval": 0.01, "total_timeout": 2.0}


class MockHost(DatabaseHost):
    def __init__(self, name, *, flaky_until=0, not_found=False, slow=0.0, always_fail=False):
        self.name = name
        self.flaky_until = flaky_until
        self.not_found = not_found
        self.slow = slow
        self.always_fail = always_fail
        self.calls = 0
        self.seen_cancel = None

    def do_query(self, cancelled, query):
        self.calls += 1
        self.seen_cancel = cancelled
        if self.slow and cancelled.wait(self.slow):
            raise RuntimeError("cancelled")
        if self.not_found:
            raise NotFoundError("not found")
        if self.always_fail:
            raise ConnectionError("temporary connection error")
        if self.calls < self.flaky_until:
            raise ConnectionError("temporary connection error")
        return f"result from {self.name}"


def test_healthy_replica_wins():
    replicas = [
        MockHost("Replica 1 (flaky)", always_fail=True),
        MockHost("Replica 2 (ok)"),
        MockHost("Replica 3 (slow)", slow=1.0),
    ]
    assert distributed_query("SELECT * FROM users", replicas, **FAST) == "result from Replica 2 (ok)"


def test_flaky_replica_succeeds_after_retries():
    host = MockHost("flaky", flaky_until=3)
    assert distributed_query("q", [host], **FAST) == "result from flaky"
    assert host.calls == 3


def test_all_replicas_fail():
    hosts = [MockHost("a", always_fail=True), MockHost("b", always_fail=True)]
    with pytest.raises(AllReplicasFailedError):
        distributed_query("q", hosts, **FAST)
    assert [h.calls for h in hosts] == [3, 3]


def test_attempts_are_limited():
    host = MockHost("flaky", flaky_until=3)
    with pytest.raises(AllReplicasFailedError):
        distributed_query("q", [host], max_attempts=2, **FAST)
    assert host.calls == 2


def test_timeout():
    hosts = [MockHost("slow 1", slow=5.0), MockHost("slow 2", slow=5.0)]
    with pytest.raises(QueryTimeoutError):
        distributed_query("q", hosts, retry_interval=0.01, total_timeout=0.1)


def test_not_found_is_skipped_in_favour_of_success():
    hosts = [MockHost("Replica 1 (not found)", not_found=True), MockHost("Replica 2 (ok)")]
    assert distributed_query("q", hosts, **FAST) == "result from Replica 2 (ok)"


def test_not_found_is_not_retried():
    host = MockHost("nf", not_found=True)
    with pytest.raises(AllReplicasFailedError):
        distributed_query("q", [host], **FAST)
    assert host.calls == 1


def test_no_replicas_fails():
    with pytest.raises(AllReplicasFailedError):
        distributed_query("q", [], **FAST)


def test_other_replicas_are_cancelled_after_success():
    slow = MockHost("slow", slow=5.0)
    fast = MockHost("fast")
    assert distributed_query("q", [slow, fast], **FAST) == "result from fast"
    assert isinstance(slow.seen_cancel, threading.Event)
    assert slow.seen_cancel.wait(1.0) is True