"""
Main Routes Blueprint

Handles the homepage and the not-found page.
"""

from flask import Blueprint, render_template, current_app
from services import get_blog_store

main_bp = Blueprint('main', __name__)


@main_bp.route("/")
def home():
    """Homepage with the most recent posts and the category strip."""
    from app import blog_service

    posts = blog_service.get_home_posts(
        get_blog_store().get_all(),
        current_app.config['HOME_PAGE_POST_LIMIT']
    )
    return render_template(
        "index.html",
        posts=posts,
        categories=current_app.config['BLOG_CATEGORIES']
    )


@main_bp.app_errorhandler(404)
def page_not_found(e):
    """Custom 404 error page."""
    return render_template("404.html"), 404
