import pytest
from alive_progress import config_handler

import telemetry


def make_user(
    login,
    name="",
    company="",
    organizations=None,
    commits=0,
    public=0,
    contributions=0,
    followers=0,
    avatar_url="",
):
    return {
        "name": name or login.title(),
        "login": login,
        "avatar_url": avatar_url or f"https://avatars.githubusercontent.com/{login}",
        "company": company,
        "organizations": list(organizations or []),
        "commits_count": commits,
        "public_contribution_count": public,
        "contribution_count": contributions,
        "follower_count": followers,
    }


@pytest.fixture(autouse=True)
def clean_telemetry():
    telemetry.reset()
    yield
    telemetry.reset()


@pytest.fixture(autouse=True)
def fresh_progress_config():
    # alive_progress binds its default output file to whatever sys.stdout is
    # when its global config is first built; rebuild it per test so it never
    # points at a previous test's (closed) capture stream.
    config_handler.reset()
    yield


@pytest.fixture
def scenario_users():
    return [
        make_user("a", company="@Foo", contributions=50, commits=5, public=40, followers=12),
        make_user("b", organizations=["Foo"], contributions=80, commits=30, public=20, followers=7),
        make_user("c", company="", contributions=10, commits=60, public=1, followers=30),
    ]
