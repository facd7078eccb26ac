"""
Blog App - A minimal blog publishing interface backed by an in-memory store
"""
from flask import Flask, request
import os
from config import get_config
from extensions import csrf, limiter
from services import BlogService, init_blog_store
from utils.logger import setup_logger

blog_service = BlogService()


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline'; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https:; "
        "connect-src 'self'; "
        "frame-ancestors 'self'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )

    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def create_app(config_class=None):
    """
    Application factory.

    Each call builds an independent application with its own blog store,
    seeded unless the config turns SEED_BLOG_POSTS off.

    Args:
        config_class: Config class to load; defaults to get_config()

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    setup_logger(app)
    app.after_request(set_security_headers)
    app.jinja_env.filters["excerpt"] = blog_service.get_excerpt

    csrf.init_app(app)
    limiter.init_app(app)

    init_blog_store(app, seed=None if app.config['SEED_BLOG_POSTS'] else [])

    from routes import main_bp, blog_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(blog_bp)

    return app


if __name__ == "__main__":
    app = create_app()

    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    app.logger.info("=" * 60)
    app.logger.info("Blog App Starting")
    app.logger.info(f"Environment: {env_name}")
    app.logger.info(f"Debug Mode: {debug_mode}")
    app.logger.info("=" * 60)

    if debug_mode and env_name == 'production':
        app.logger.warning("Debug mode enabled in production! Set FLASK_ENV=production without DEBUG.")

    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)
