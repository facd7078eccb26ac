"""
Blog Routes Blueprint

Handles the post listing, post detail, and the create, edit and delete flows.
Every page reads from and writes to the application's blog store.
"""

from flask import Blueprint, render_template, redirect, url_for, request, flash, current_app
from pydantic import ValidationError

from extensions import limiter
from schemas import BlogPostSchema
from services import get_blog_store

blog_bp = Blueprint('blog', __name__, url_prefix='/blogs')

FORM_FIELDS = ('title', 'summary', 'content', 'image_url', 'category')


def _post_not_found(post_id):
    current_app.logger.warning(f"Blog post not found: {post_id}")
    return render_template("404.html", missing_post_id=post_id), 404


def _form_data_from_request() -> dict:
    return {name: request.form.get(name, '') for name in FORM_FIELDS}


def _validation_errors(exc: ValidationError) -> dict:
    """Map pydantic errors to one message per form field."""
    errors = {}
    for error in exc.errors():
        field = error['loc'][0] if error['loc'] else '__all__'
        errors.setdefault(field, error['msg'].removeprefix('Value error, '))
    return errors


def _render_form(form_data, post_id=None, errors=None, status=200):
    return render_template(
        "blog_form.html",
        form=form_data,
        post_id=post_id,
        errors=errors or {},
        categories=current_app.config['BLOG_CATEGORIES']
    ), status


@blog_bp.route("")
def blog_list():
    """All posts, most recent first, optionally filtered by category."""
    from app import blog_service

    category = request.args.get('category', '').strip() or None
    posts = blog_service.filter_by_category(get_blog_store().get_all(), category)
    current_app.logger.info(f"Blog listing accessed - {len(posts)} posts (category={category})")

    return render_template(
        "blogs.html",
        posts=posts,
        categories=current_app.config['BLOG_CATEGORIES'],
        active_category=category
    )


@blog_bp.route("/<int:post_id>")
def blog_detail(post_id):
    """Display a single post."""
    from app import blog_service

    post = get_blog_store().get_by_id(post_id)
    if post is None:
        return _post_not_found(post_id)

    return render_template(
        "blog_detail.html",
        post=post,
        content_blocks=blog_service.parse_content(post.content),
        reading_time=blog_service.calculate_reading_time(post.content)
    )


@blog_bp.route("/new", methods=["GET", "POST"])
@limiter.limit("30 per hour", methods=["POST"])
def blog_create():
    """
    Create a new post.

    GET: Display a blank form
    POST: Validate, add the post to the front of the store, redirect to the listing
    """
    if request.method == "GET":
        return _render_form({
            **{name: '' for name in FORM_FIELDS},
            'category': current_app.config['DEFAULT_BLOG_CATEGORY'],
        })

    form_data = _form_data_from_request()
    try:
        schema = BlogPostSchema(**form_data)
    except ValidationError as e:
        current_app.logger.info(f"Rejected new blog post: {list(_validation_errors(e))}")
        return _render_form(form_data, errors=_validation_errors(e), status=400)

    post = get_blog_store().create(schema.to_fields())
    flash(f"Published \"{post.title}\".", "success")
    return redirect(url_for('blog.blog_list'))


@blog_bp.route("/edit/<int:post_id>", methods=["GET", "POST"])
@limiter.limit("30 per hour", methods=["POST"])
def blog_edit(post_id):
    """
    Edit an existing post.

    GET: Display the form pre-populated from the post
    POST: Validate, replace the post's fields in place, redirect to the listing
    """
    store = get_blog_store()
    post = store.get_by_id(post_id)
    if post is None:
        return _post_not_found(post_id)

    if request.method == "GET":
        form_data = {name: getattr(post, name) or '' for name in FORM_FIELDS}
        form_data['category'] = post.category or current_app.config['DEFAULT_BLOG_CATEGORY']
        return _render_form(form_data, post_id=post_id)

    form_data = _form_data_from_request()
    try:
        schema = BlogPostSchema(**form_data)
    except ValidationError as e:
        current_app.logger.info(f"Rejected edit of blog post {post_id}: {list(_validation_errors(e))}")
        return _render_form(form_data, post_id=post_id, errors=_validation_errors(e), status=400)

    store.update(post_id, schema.to_fields())
    flash(f"Updated \"{schema.title}\".", "success")
    return redirect(url_for('blog.blog_list'))


@blog_bp.route("/<int:post_id>/delete", methods=["GET", "POST"])
def blog_delete(post_id):
    """
    Delete a post.

    GET: Ask for confirmation
    POST: Remove the post (unknown ids are ignored) and redirect to the listing
    """
    store = get_blog_store()

    if request.method == "GET":
        post = store.get_by_id(post_id)
        if post is None:
            return _post_not_found(post_id)
        return render_template("blog_delete.html", post=post)

    existed = post_id in store
    store.delete(post_id)
    if existed:
        flash("Post deleted.", "success")
    return redirect(url_for('blog.blog_list'))
