"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the Flask application using the
application factory pattern with clean, isolated test instances.
"""

import pytest
import os

# config.py refuses to import without a secret key
os.environ['FLASK_ENV'] = 'testing'
os.environ.setdefault('SECRET_KEY', 'test-secret-key-for-pytest')


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def app(test_config):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern so every test gets its own
    freshly seeded blog store.
    """
    from app import create_app
    app = create_app(test_config)

    # Push application context
    ctx = app.app_context()
    ctx.push()

    yield app

    # Clean up
    ctx.pop()


@pytest.fixture
def client(app):
    """
    Flask test client for making HTTP requests.

    Provides a test client that can make requests to the application
    without running a live server.
    """
    return app.test_client()


@pytest.fixture
def store(app):
    """The seeded blog store owned by the test application."""
    from services import get_blog_store
    return get_blog_store(app)


@pytest.fixture
def empty_store():
    """A blog store with no posts."""
    from services import BlogStore
    return BlogStore(seed=[])


@pytest.fixture
def blog_service():
    """
    BlogService instance for testing presentation helpers.

    Imports the actual service from the application to ensure
    tests validate real code, not reimplementations.
    """
    from app import blog_service
    return blog_service


@pytest.fixture
def sample_fields():
    """Sample BlogPostFields with every field set."""
    from models import BlogPostFields
    return BlogPostFields(
        title='Test Post',
        summary='A short summary.',
        content='First paragraph.\n\nSecond paragraph.',
        image_url='https://example.com/image.jpg',
        category='Culture'
    )


@pytest.fixture
def sample_post():
    """Sample BlogPost model for testing."""
    from models import BlogPost
    return BlogPost(
        id=7,
        title='Sample',
        summary='Sample summary.',
        content='Sample content.',
        image_url=None,
        category='Health'
    )
