from __future__ import annotations

import io
import json

from conftest import make_response
from shortlink_client import cli


def test_login_command_stores_session(service, store, http_session):
    http_session.request.return_value = make_response(
        200, {"token": "jwt", "user_id": 1, "email": "ana@example.com", "email_verified": False, "is_admin": False}
    )
    out = io.StringIO()

    code = cli.main(["login", "ana@example.com", "--password", "pw"], service=service, out=out)

    assert code == 0
    assert "Signed in as ana@example.com" in out.getvalue()
    assert "not verified" in out.getvalue()
    assert store.get_token() == "jwt"


def test_links_command_prints_json(service, http_session):
    http_session.request.return_value = make_response(
        200, [{"id": 1, "code": "abc", "original_url": "https://example.com"}]
    )
    out = io.StringIO()

    code = cli.main(["links", "--search", "exa"], service=service, out=out)

    assert code == 0
    assert json.loads(out.getvalue())[0]["code"] == "abc"


def test_expired_session_prints_login_hint(service, store, http_session, capsys):
    store.set_session("abc")
    http_session.request.return_value = make_response(401)

    code = cli.main(["whoami"], service=service, out=io.StringIO())

    captured = capsys.readouterr()
    assert code == 1
    assert "Session expired. Please log in again." in captured.err
    assert "shortlink login" in captured.err
    assert store.get_token() is None


def test_logout_command(service, store):
    store.set_session("abc")
    out = io.StringIO()

    assert cli.main(["logout"], service=service, out=out) == 0
    assert store.get_token() is None


def test_dashboard_command_reports_partial_errors(service, http_session):
    def request(method, url, **kwargs):
        if url.endswith("/analytics/dashboard"):
            return make_response(500, {"error": "Stats unavailable"})
        return make_response(200, [])

    http_session.request.side_effect = request
    out = io.StringIO()

    code = cli.main(["dashboard"], service=service, out=out)

    document = json.loads(out.getvalue())
    assert code == 1
    assert document["links"] == []
    assert document["errors"] == {"stats": "Stats unavailable"}
