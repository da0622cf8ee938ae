"""
Unit tests for the in-flight request tracker used during shutdown.
"""
import threading

from subscription_service.server import InFlightTracker


def test_tracker_counts_active_requests():
    started = threading.Event()
    release = threading.Event()

    def slow_app(environ, start_response):
        started.set()
        release.wait(5)
        return [b"ok"]

    tracker = InFlightTracker(slow_app)
    worker = threading.Thread(target=tracker, args=({}, None))
    worker.start()
    started.wait(5)

    assert tracker.active == 1
    assert tracker.wait_idle(0.05) is False

    release.set()
    assert tracker.wait_idle(5) is True
    assert tracker.active == 0
    worker.join(5)


def test_tracker_releases_on_error():
    def failing_app(environ, start_response):
        raise RuntimeError("boom")

    tracker = InFlightTracker(failing_app)
    try:
        tracker({}, None)
    except RuntimeError:
        pass
    assert tracker.active == 0
    assert tracker.wait_idle(0) is True


def test_tracker_passes_response_through():
    tracker = InFlightTracker(lambda environ, start_response: [b"body"])
    assert tracker({}, None) == [b"body"]
