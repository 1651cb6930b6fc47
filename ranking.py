import logging

from telemetry import inc

log = logging.getLogger(__name__)

# amount == 0 is a cap, not "unbounded"
DEFAULT_CAP = 256


def commits(user):
    return user["commits_count"]


def public_contributions(user):
    return user["public_contribution_count"]


def contributions(user):
    return user["contribution_count"]


def trim(users, amount):
    if amount == 0:
        amount = DEFAULT_CAP
    if len(users) < amount:
        amount = len(users)
    return users[:amount]


def top_by(users, selector, user_filter=None, amount=0):
    """Rank a copy of ``users`` by ``selector``, highest first.

    Equal metric values are ordered by ascending login so the same input
    always renders the same output.
    """
    cloned = list(users)
    if user_filter is not None:
        cloned = [u for u in cloned if user_filter(u)]
    cloned.sort(key=lambda u: u.get("login") or "")
    cloned.sort(key=selector, reverse=True)
    inc("rankings_built")
    ranked = trim(cloned, amount)
    log.debug("ranked %d of %d users", len(ranked), len(users))
    return ranked


def min_followers(users):
    if not users:
        return 0
    return min(u["follower_count"] for u in users)
