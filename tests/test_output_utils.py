"""
Tests for the plain, CSV and YAML renderers.
"""

import csv
import io
from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_user
from output_utils import (
    FORMATS,
    csv_output,
    plain_output,
    quote_ascii,
    rfc3339,
    yaml_output,
)

GENERATED = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


def results_for(users, total=None, minimum=3):
    return {
        "users": users,
        "total_user_count": len(users) if total is None else total,
        "minimum_follower_count": minimum,
    }


class FailingWriter:
    def __init__(self, fail_after=0):
        self.writes = 0
        self.fail_after = fail_after

    def write(self, text):
        if self.writes >= self.fail_after:
            raise OSError("disk full")
        self.writes += 1
        return len(text)

    def flush(self):
        pass


class TestQuoteAscii:
    def test_plain(self):
        assert quote_ascii("Jane Doe") == '"Jane Doe"'

    def test_quotes_and_backslashes(self):
        assert quote_ascii('say "hi" \\o/') == '"say \\"hi\\" \\\\o/"'

    def test_control_characters(self):
        assert quote_ascii("a\nb\tc\x01") == '"a\\nb\\tc\\x01"'

    def test_non_latin(self):
        assert quote_ascii("José") == '"Jos\\u00e9"'
        assert quote_ascii("Ελλάδα") == '"\\u0395\\u03bb\\u03bb\\u03ac\\u03b4\\u03b1"'

    def test_astral(self):
        assert quote_ascii("🚀") == '"\\U0001f680"'

    def test_empty(self):
        assert quote_ascii("") == '""'
        assert quote_ascii(None) == '""'

    def test_output_is_ascii(self):
        assert quote_ascii("日本語 «ok»").isascii()


class TestRfc3339:
    def test_utc_uses_z(self):
        assert rfc3339(GENERATED) == "2024-05-01T12:30:00Z"

    def test_offset_kept(self):
        tz = timezone(timedelta(hours=2))
        assert rfc3339(datetime(2024, 5, 1, 14, 30, tzinfo=tz)) == "2024-05-01T14:30:00+02:00"

    def test_default_is_now(self):
        assert rfc3339().startswith(str(datetime.now(timezone.utc).year))


class TestPlainOutput:
    def test_layout(self, scenario_users):
        buf = io.StringIO()
        plain_output(results_for(scenario_users), buf, {"amount": 2})
        assert buf.getvalue() == (
            "USERS\n"
            "--------\n"
            "#1: B (b):80 () Foo\n"
            "#2: A (a):50 (@Foo) \n"
            "\n"
            "ORGANIZATIONS\n"
            "--------\n"
            "#1: foo (2)\n"
        )

    def test_empty(self):
        buf = io.StringIO()
        plain_output(results_for([]), buf, {"amount": 5})
        assert buf.getvalue() == "USERS\n--------\n\nORGANIZATIONS\n--------\n"

    def test_write_failure_propagates(self, scenario_users):
        with pytest.raises(OSError, match="disk full"):
            plain_output(results_for(scenario_users), FailingWriter(1), {"amount": 2})


class TestCsvOutput:
    def test_scenario_rows(self, scenario_users):
        buf = io.StringIO()
        csv_output(results_for(scenario_users), buf, {"amount": 2})
        lines = buf.getvalue().splitlines()
        assert lines[0] == "rank,name,login,contributions,company,organizations"
        assert lines[1:] == ["1,B,b,80,,Foo", "2,A,a,50,@Foo,"]

    def test_multiple_orgs_single_field(self):
        users = [make_user("x", name="X, Jr.", organizations=["one", "two"], contributions=3)]
        buf = io.StringIO()
        csv_output(results_for(users), buf, {"amount": 0})
        assert buf.getvalue().splitlines()[1] == '1,"X, Jr.",x,3,,"one,two"'

    def test_leading_whitespace_kept_unquoted(self):
        users = [make_user("x", name="X", company=" Acme", contributions=1)]
        buf = io.StringIO()
        csv_output(results_for(users), buf, {"amount": 0})
        row = buf.getvalue().splitlines()[1]
        assert row == "1,X,x,1, Acme,"
        assert next(csv.reader([row]))[4] == " Acme"

    def test_write_failure_propagates(self, scenario_users):
        with pytest.raises(OSError):
            csv_output(results_for(scenario_users), FailingWriter(0), {"amount": 2})


class TestYamlOutput:
    def render(self, users, **options):
        options.setdefault("amount", 0)
        options.setdefault("generated", GENERATED)
        buf = io.StringIO()
        yaml_output(results_for(users, total=1234, minimum=7), buf, options)
        return buf.getvalue()

    def test_sections_in_order(self, scenario_users):
        text = self.render(scenario_users)
        keys = [line for line in text.splitlines() if line and not line.startswith(" ")]
        assert keys == [
            "users:",
            "users_public_contributions:",
            "private_users:",
            "organizations:",
            "public_contributions_organizations:",
            "private_organizations:",
            "generated: 2024-05-01T12:30:00Z",
            "min_followers_required: 7",
            "total_user_count: 1234",
        ]

    def test_user_entry(self, scenario_users):
        text = self.render(scenario_users, amount=1)
        assert (
            "users:\n"
            "\n"
            "  - rank: 1\n"
            '    name: "C"\n'
            '    login: "c"\n'
            "    avatarUrl: https://avatars.githubusercontent.com/c\n"
            "    contributions: 60\n"
            '    company: ""\n'
            '    organizations: ""\n'
        ) in text

    def test_each_ranking_uses_its_metric(self, scenario_users):
        text = self.render(scenario_users, amount=1)
        public = text.split("users_public_contributions:\n")[1].split("private_users:")[0]
        private = text.split("private_users:\n")[1].split("organizations:")[0]
        assert 'login: "a"' in public and "contributions: 40" in public
        assert 'login: "b"' in private and "contributions: 80" in private

    def test_org_tallies_scoped_per_ranking(self, scenario_users):
        text = self.render(scenario_users, amount=1)
        by_commits = text.split("\norganizations:\n")[1].split("public_contributions_organizations:")[0]
        by_public = text.split("public_contributions_organizations:\n")[1].split("private_organizations:")[0]
        by_total = text.split("private_organizations:\n")[1].split("generated:")[0]
        assert "rank" not in by_commits
        assert by_public == '\n  - rank: 1\n    name: "foo"\n    membercount: 1\n\n'
        assert by_total == '\n  - rank: 1\n    name: "foo"\n    membercount: 1\n'

    def test_non_latin_strings_escaped(self):
        users = [make_user("jose", name="José Müller", company="東京", organizations=["Ελλάδα"])]
        text = self.render(users)
        assert text.isascii()
        assert 'name: "Jos\\u00e9 M\\u00fcller"' in text

    def test_preset_requires_title_and_checksum(self, scenario_users):
        assert "title:" not in self.render(scenario_users, preset_title="Panama")
        assert "definition_checksum" not in self.render(scenario_users, preset_checksum="abc")
        text = self.render(scenario_users, preset_title="Panama", preset_checksum="abc123")
        assert text.endswith('title: "Panama"\ndefinition_checksum: abc123\n')

    def test_write_failure_aborts(self, scenario_users):
        writer = FailingWriter(3)
        with pytest.raises(OSError):
            yaml_output(results_for(scenario_users), writer, {"amount": 0})
        assert writer.writes == 3


def test_formats_registry():
    assert FORMATS == {"plain": plain_output, "csv": csv_output, "yaml": yaml_output}
