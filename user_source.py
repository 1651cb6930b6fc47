import json
import logging
import os
import sys
import time
from contextlib import contextmanager

import requests
from alive_progress import alive_bar

from ranking import min_followers
from telemetry import inc

log = logging.getLogger(__name__)

STRING_FIELDS = {
    "name": ("name",),
    "login": ("login",),
    "avatar_url": ("avatar_url", "avatarUrl"),
    "company": ("company",),
}
COUNT_FIELDS = {
    "commits_count": ("commits_count", "commitsCount"),
    "public_contribution_count": ("public_contribution_count", "publicContributionCount"),
    "contribution_count": ("contribution_count", "contributionCount"),
    "follower_count": ("follower_count", "followerCount", "followers"),
}


class UserSourceError(ValueError):
    pass


def gh_session():
    s = requests.Session()
    tok = os.environ.get("GITHUB_TOKEN", "").strip()
    if tok:
        s.headers.update({"Authorization": f"Bearer {tok}"})
    s.headers.update({"Accept": "application/json"})
    return s


def gh_get(session, url, attempts=5):
    for attempt in range(attempts):
        r = session.get(url)
        if r.status_code in (502, 503, 504):
            log.info("%s answered %s, retrying", url, r.status_code)
            time.sleep(1.5 * (attempt + 1))
            continue
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()
    return None


def _first(raw, keys):
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    return None


def _as_count(value, field):
    if isinstance(value, bool):
        raise UserSourceError(f"{field} must be a count, got {value!r}")
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise UserSourceError(f"{field} must be a count, got {value!r}") from None
    if n < 0:
        raise UserSourceError(f"{field} must not be negative, got {n}")
    return n


def _count(raw, field):
    value = _first(raw, COUNT_FIELDS[field])
    if value is None:
        return 0
    # GraphQL connections report counts as {"totalCount": n}
    if isinstance(value, dict):
        value = value.get("totalCount", 0)
    return _as_count(value, field)


def _organizations(raw):
    orgs = raw.get("organizations") or []
    if isinstance(orgs, str):
        orgs = [orgs]
    elif isinstance(orgs, dict):
        orgs = orgs.get("nodes") or []
    if not isinstance(orgs, list):
        raise UserSourceError(f"organizations must be a list, got {type(orgs).__name__}")
    logins = []
    for o in orgs:
        if isinstance(o, dict):
            o = o.get("login")
        if o:
            logins.append(str(o))
    return logins


def normalize_user(raw):
    if not isinstance(raw, dict):
        raise UserSourceError(f"user entries must be objects, got {type(raw).__name__}")
    user = {}
    for field, keys in STRING_FIELDS.items():
        user[field] = str(_first(raw, keys) or "")
    user["organizations"] = _organizations(raw)
    for field in COUNT_FIELDS:
        user[field] = _count(raw, field)
    return user


@contextmanager
def noop_bar(total, title=""):
    def step():
        return None

    yield step


def parse_results(data, progress=False):
    if isinstance(data, list):
        data = {"users": data}
    if not isinstance(data, dict) or not isinstance(data.get("users"), list):
        raise UserSourceError("expected a list of users or an object with a 'users' list")

    raw_users = data["users"]
    bar_factory = alive_bar if progress else noop_bar
    users = []
    with bar_factory(len(raw_users), title="Loading users") as bar:
        for raw in raw_users:
            users.append(normalize_user(raw))
            inc("users_loaded")
            bar()

    total = data.get("total_user_count")
    minimum = data.get("min_followers_required")
    return {
        "users": users,
        "total_user_count": len(users) if total is None else _as_count(total, "total_user_count"),
        "minimum_follower_count": (
            min_followers(users) if minimum is None else _as_count(minimum, "min_followers_required")
        ),
    }


def _read(source, session):
    if source == "-":
        return json.load(sys.stdin)
    if source.startswith(("http://", "https://")):
        inc("remote_fetches")
        data = gh_get(session or gh_session(), source)
        if data is None:
            raise UserSourceError(f"nothing found at {source}")
        return data
    with open(source, "r", encoding="utf-8") as fh:
        return json.load(fh)


def load_results(source, session=None, progress=False):
    try:
        data = _read(source, session)
    except UserSourceError:
        raise
    except (OSError, ValueError, requests.RequestException) as e:
        raise UserSourceError(f"cannot read users from {source}: {e}") from e
    results = parse_results(data, progress=progress)
    log.info("loaded %d users from %s", len(results["users"]), source)
    return results
