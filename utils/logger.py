"""
Logging Setup

Provides centralized logging configuration for the Flask application
and the blog store, with request tracking.
"""

import logging
import sys
from flask import request, has_request_context

HANDLER_NAME = 'blog_app'


def setup_logger(app):
    """
    Configure logging for the Flask application.

    Sets up:
    - Structured log format with timestamps
    - Console output to stdout for app.logger and the 'blog_app' store logger
    - Request logging for all incoming HTTP requests
    - Log level based on debug mode

    Args:
        app: Flask application instance
    """
    handler = logging.StreamHandler(sys.stdout)

    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    handler.set_name(HANDLER_NAME)

    level = logging.DEBUG if app.debug else logging.INFO

    for logger in (app.logger, logging.getLogger('blog_app')):
        # create_app may run many times in one process (tests)
        for existing in list(logger.handlers):
            if existing.get_name() == HANDLER_NAME:
                logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False

    @app.before_request
    def log_request_info():
        """Log incoming request details."""
        if has_request_context():
            app.logger.info(
                f"Request: {request.method} {request.path} "
                f"from {request.remote_addr} "
                f"[User-Agent: {request.user_agent.string[:50]}...]"
            )

    @app.after_request
    def log_response_info(response):
        """Log response status."""
        if has_request_context():
            app.logger.info(
                f"Response: {response.status_code} for "
                f"{request.method} {request.path}"
            )
        return response

    app.logger.info(f"Logging configured - Level: {logging.getLevelName(level)}")

    return app
