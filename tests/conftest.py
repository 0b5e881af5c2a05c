"""Pytest configuration and fixtures."""
from types import SimpleNamespace

import pytest
from flask import Flask, jsonify, request

from page_headers import Page, PageHeaders, paginated, set_current_page, setup_logging
from page_headers.core.config import config_by_name

PEOPLE = [{"id": i, "name": f"Person {i}"} for i in range(1, 51)]
PAGE_SIZE = 10


def _people_page() -> Page:
    number = request.args.get("page", 1, type=int)
    offset = (number - 1) * PAGE_SIZE
    return Page.from_total(number, PAGE_SIZE, len(PEOPLE), PEOPLE[offset:offset + PAGE_SIZE])


def create_test_app() -> Flask:
    """Small API with a few paginated endpoints."""
    app = Flask(__name__)
    app.config.from_object(config_by_name["testing"])
    setup_logging(app)
    PageHeaders(app)

    @app.route("/people")
    def people():
        page = set_current_page(_people_page())
        return jsonify(page.entries)

    @app.route("/people/decorated")
    @paginated
    def people_decorated():
        page = _people_page()
        return jsonify(page.entries), page

    @app.route("/people/created", methods=["POST"])
    @paginated
    def people_created():
        page = _people_page()
        return jsonify(page.entries), page, 201

    @app.route("/people/legacy")
    @paginated
    def people_legacy():
        # Flask-SQLAlchemy shaped result
        page = _people_page()
        pagination = SimpleNamespace(
            page=page.page_number,
            per_page=page.page_size,
            pages=page.total_pages,
            total=page.total_entries,
            items=page.entries,
        )
        return jsonify(page.entries), pagination

    @app.route("/people/empty")
    def people_empty():
        set_current_page(Page.from_total(1, PAGE_SIZE, 0))
        return jsonify([])

    @app.route("/people/broken")
    @paginated
    def people_broken():
        return jsonify(PEOPLE)

    @app.route("/people/not-a-page")
    def people_not_a_page():
        set_current_page({"count": 3})
        return jsonify([])

    @app.route("/files/<path:name>")
    @paginated
    def files(name):
        return jsonify({"name": name}), Page(1, 10, 3, 25)

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"})

    return app


@pytest.fixture(scope="session")
def app():
    """Create application for testing."""
    app = create_test_app()

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
