"""
Tests for reading saved search dumps.
"""

import io
import json

import pytest
import requests

import user_source
from telemetry import snapshot
from user_source import (
    UserSourceError,
    gh_get,
    load_results,
    normalize_user,
    parse_results,
)


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload

    def json(self):
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        return self.responses.pop(0)


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(user_source.time, "sleep", lambda s: None)


class TestNormalizeUser:
    def test_snake_case(self):
        raw = {
            "name": "Ann",
            "login": "ann",
            "avatar_url": "https://a/ann",
            "company": "@acme",
            "organizations": ["acme"],
            "commits_count": 3,
            "public_contribution_count": 4,
            "contribution_count": 5,
            "follower_count": 6,
        }
        assert normalize_user(raw) == raw

    def test_graphql_shape(self):
        raw = {
            "login": "ann",
            "name": None,
            "avatarUrl": "https://a/ann",
            "organizations": {"nodes": [{"login": "Acme"}, {"login": "Other"}]},
            "followers": {"totalCount": 42},
            "contributionCount": 9,
            "commitsCount": "7",
        }
        user = normalize_user(raw)
        assert user["name"] == ""
        assert user["avatar_url"] == "https://a/ann"
        assert user["organizations"] == ["Acme", "Other"]
        assert user["follower_count"] == 42
        assert user["commits_count"] == 7
        assert user["contribution_count"] == 9
        assert user["public_contribution_count"] == 0
        assert user["company"] == ""

    def test_negative_count_rejected(self):
        with pytest.raises(UserSourceError, match="negative"):
            normalize_user({"login": "x", "contribution_count": -1})

    def test_non_numeric_count_rejected(self):
        with pytest.raises(UserSourceError):
            normalize_user({"login": "x", "follower_count": "lots"})
        with pytest.raises(UserSourceError):
            normalize_user({"login": "x", "follower_count": True})

    def test_entry_must_be_object(self):
        with pytest.raises(UserSourceError):
            normalize_user(["ann"])


class TestParseResults:
    def test_list_defaults(self):
        results = parse_results([{"login": "a", "followers": 5}, {"login": "b", "followers": 2}])
        assert results["total_user_count"] == 2
        assert results["minimum_follower_count"] == 2
        assert snapshot("users_loaded") == {"users_loaded": 2}

    def test_object_with_provenance(self):
        results = parse_results(
            {"users": [{"login": "a"}], "total_user_count": 900, "min_followers_required": 40}
        )
        assert results["total_user_count"] == 900
        assert results["minimum_follower_count"] == 40

    def test_empty(self):
        results = parse_results({"users": []})
        assert results == {"users": [], "total_user_count": 0, "minimum_follower_count": 0}

    def test_bad_shape(self):
        with pytest.raises(UserSourceError):
            parse_results({"people": []})
        with pytest.raises(UserSourceError):
            parse_results("users")


class TestGhGet:
    def test_retries_gateway_errors(self):
        session = FakeSession(FakeResponse(503), FakeResponse(200, [{"login": "a"}]))
        assert gh_get(session, "https://example.com/dump.json") == [{"login": "a"}]
        assert len(session.urls) == 2

    def test_not_found(self):
        assert gh_get(FakeSession(FakeResponse(404)), "https://example.com/x") is None

    def test_gives_up(self):
        session = FakeSession(*[FakeResponse(502) for _ in range(5)])
        assert gh_get(session, "https://example.com/x") is None

    def test_other_errors_raise(self):
        with pytest.raises(requests.HTTPError):
            gh_get(FakeSession(FakeResponse(500)), "https://example.com/x")


class TestLoadResults:
    def test_local_file(self, tmp_path):
        path = tmp_path / "dump.json"
        path.write_text(json.dumps({"users": [{"login": "a", "contributionCount": 3}]}), encoding="utf-8")
        results = load_results(str(path))
        assert results["users"][0]["contribution_count"] == 3

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr(user_source.sys, "stdin", io.StringIO('[{"login": "a"}]'))
        assert load_results("-")["users"][0]["login"] == "a"

    def test_url(self):
        session = FakeSession(FakeResponse(200, {"users": [{"login": "a"}]}))
        results = load_results("https://example.com/dump.json", session=session)
        assert results["users"][0]["login"] == "a"
        assert snapshot("remote_fetches") == {"remote_fetches": 1}

    def test_url_not_found(self):
        with pytest.raises(UserSourceError, match="nothing found"):
            load_results("https://example.com/missing.json", session=FakeSession(FakeResponse(404)))

    def test_http_error_wrapped(self):
        with pytest.raises(UserSourceError):
            load_results("https://example.com/x.json", session=FakeSession(FakeResponse(401)))

    def test_missing_file(self, tmp_path):
        with pytest.raises(UserSourceError, match="cannot read"):
            load_results(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "dump.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(UserSourceError):
            load_results(str(path))


def test_gh_session_uses_token(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", " secret ")
    assert user_source.gh_session().headers["Authorization"] == "Bearer secret"


class TestProvenanceCounts:
    def test_non_numeric_total_rejected(self):
        with pytest.raises(UserSourceError, match="total_user_count"):
            parse_results({"users": [], "total_user_count": "many"})

    def test_list_total_rejected(self):
        with pytest.raises(UserSourceError, match="total_user_count"):
            parse_results({"users": [], "total_user_count": [3]})

    def test_negative_minimum_rejected(self):
        with pytest.raises(UserSourceError, match="min_followers_required"):
            parse_results({"users": [], "min_followers_required": -5})

    def test_numeric_strings_accepted(self):
        results = parse_results({"users": [], "total_user_count": "12", "min_followers_required": "3"})
        assert results["total_user_count"] == 12
        assert results["minimum_follower_count"] == 3


class TestOrganizationsField:
    def test_single_string_is_one_organization(self):
        assert normalize_user({"login": "a", "organizations": "Acme"})["organizations"] == ["Acme"]

    def test_other_shapes_rejected(self):
        with pytest.raises(UserSourceError, match="organizations"):
            normalize_user({"login": "a", "organizations": 7})


def test_progress_bar_loads_users(capsys):
    results = parse_results([{"login": "a"}, {"login": "b"}, {"login": "c"}], progress=True)
    assert [u["login"] for u in results["users"]] == ["a", "b", "c"]
    assert snapshot("users_loaded") == {"users_loaded": 3}
