"""
Threaded WSGI server with graceful shutdown.

On SIGINT or SIGTERM the server stops accepting connections and gives
in-flight requests up to ``shutdown_timeout`` seconds to finish.
"""
import logging
import signal
import threading

from werkzeug.serving import make_server

logger = logging.getLogger(__name__)


class InFlightTracker:
    """WSGI middleware counting requests that are currently being handled."""

    def __init__(self, wsgi_app):
        self.wsgi_app = wsgi_app
        self._active = 0
        self._condition = threading.Condition()

    @property
    def active(self):
        with self._condition:
            return self._active

    def __call__(self, environ, start_response):
        with self._condition:
            self._active += 1
        try:
            return self.wsgi_app(environ, start_response)
        finally:
            with self._condition:
                self._active -= 1
                if self._active == 0:
                    self._condition.notify_all()

    def wait_idle(self, timeout):
        """
        Block until no request is in flight.

        Returns:
            bool: False if requests were still running after ``timeout`` seconds.
        """
        with self._condition:
            return self._condition.wait_for(lambda: self._active == 0, timeout)


def serve(app, host, port, shutdown_timeout=5.0):
    """
    Serve ``app`` until a termination signal arrives.

    Args:
        app: Flask application.
        host (str): Interface to bind.
        port (int): Port to bind.
        shutdown_timeout (float): Grace period for in-flight requests.
    """
    tracker = InFlightTracker(app.wsgi_app)
    app.wsgi_app = tracker
    server = make_server(host, port, app, threaded=True)

    def signal_handler(signum, frame):
        """Handle shutdown signals gracefully."""
        logger.info("Received signal %s, shutting down server...", signum)
        # shutdown() blocks until serve_forever returns, so it cannot run
        # on the thread that is serving
        threading.Thread(target=server.shutdown, daemon=True).start()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info("Server starting on %s:%s", host, port)
    try:
        server.serve_forever()
    finally:
        if not tracker.wait_idle(shutdown_timeout):
            logger.warning(
                "Server forced to shutdown with %d request(s) in flight", tracker.active
            )
        server.server_close()
    logger.info("Server exited")
