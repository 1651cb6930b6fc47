import logging
import re
from collections import Counter

from telemetry import inc

log = logging.getLogger(__name__)

TOP_ORGS = 10

# "@acme" in the company field names an organization login
COMPANY_LOGIN = re.compile(r"@([a-zA-Z0-9]+)")


def company_login(company):
    match = COMPANY_LOGIN.fullmatch((company or "").strip())
    if match:
        return match.group(1)
    return None


def user_organizations(user):
    """Declared organizations plus the one inferred from ``company``.

    The inferred login is only added when the exact string (case-sensitive)
    is not declared already; case folding happens later, at tally time.
    """
    orgs = list(user.get("organizations") or [])
    login = company_login(user.get("company"))
    if login and login not in orgs:
        orgs.append(login)
    return orgs


def top_orgs(users, count=TOP_ORGS):
    counts = Counter()
    for user in users:
        # one vote per user per normalized name
        for org in {o.lower() for o in user_organizations(user)}:
            counts[org] += 1
    inc("org_tallies_built")
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    log.debug("tallied %d organizations over %d users", len(ranked), len(users))
    return [{"name": name, "member_count": n} for name, n in ranked[:count]]
