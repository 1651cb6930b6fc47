from collections import Counter

RANKING_KEYS = ("users_loaded", "remote_fetches", "rankings_built", "org_tallies_built")

# process-wide; tests reset it between cases
COUNTERS = Counter()


def inc(key, amount=1):
    COUNTERS[key] += amount


def snapshot(*keys):
    return {k: COUNTERS[k] for k in keys or sorted(COUNTERS)}


def reset():
    COUNTERS.clear()


def ranking_summary():
    return snapshot(*RANKING_KEYS)
