import csv
from datetime import datetime, timezone

from organizations import TOP_ORGS, top_orgs
from ranking import commits, contributions, public_contributions, top_by

CSV_HEADER = ["rank", "name", "login", "contributions", "company", "organizations"]

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def quote_ascii(value):
    """Double-quote ``value`` using only printable ASCII.

    Anything outside printable ASCII becomes a ``\\x``, ``\\u`` or ``\\U``
    escape, all of which YAML double-quoted scalars understand.
    """
    out = ['"']
    for ch in value or "":
        code = ord(ch)
        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
        elif 0x20 <= code < 0x7F:
            out.append(ch)
        elif code < 0x80:
            out.append(f"\\x{code:02x}")
        elif code <= 0xFFFF:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def rfc3339(moment=None):
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def joined_orgs(user):
    return ",".join(user.get("organizations") or [])


def plain_output(results, writer, options):
    users = top_by(results["users"], contributions, None, options.get("amount", 0))
    writer.write("USERS\n--------\n")
    for i, u in enumerate(users, 1):
        writer.write(
            f"#{i}: {u['name']} ({u['login']}):{u['contribution_count']} "
            f"({u['company']}) {joined_orgs(u)}\n"
        )
    writer.write("\nORGANIZATIONS\n--------\n")
    for i, org in enumerate(top_orgs(users, TOP_ORGS), 1):
        writer.write(f"#{i}: {org['name']} ({org['member_count']})\n")
    writer.flush()


def csv_output(results, writer, options):
    users = top_by(results["users"], contributions, None, options.get("amount", 0))
    w = csv.writer(writer, lineterminator="\n")
    w.writerow(CSV_HEADER)
    for i, u in enumerate(users, 1):
        w.writerow([
            str(i),
            u["name"],
            u["login"],
            str(u["contribution_count"]),
            u["company"],
            joined_orgs(u),
        ])
    writer.flush()


def _write_yaml_users(writer, users, selector):
    for i, u in enumerate(users, 1):
        writer.write(
            "\n"
            f"  - rank: {i}\n"
            f"    name: {quote_ascii(u['name'])}\n"
            f"    login: {quote_ascii(u['login'])}\n"
            f"    avatarUrl: {u['avatar_url']}\n"
            f"    contributions: {selector(u)}\n"
            f"    company: {quote_ascii(u['company'])}\n"
            f"    organizations: {quote_ascii(joined_orgs(u))}\n"
        )


def _write_yaml_orgs(writer, orgs):
    for i, org in enumerate(orgs, 1):
        writer.write(
            "\n"
            f"  - rank: {i}\n"
            f"    name: {quote_ascii(org['name'])}\n"
            f"    membercount: {org['member_count']}\n"
        )


def yaml_output(results, writer, options):
    users = results["users"]
    amount = options.get("amount", 0)

    # each view gets its own organization tally
    top_commits = top_by(users, commits, None, amount)
    top_public = top_by(users, public_contributions, None, amount)
    top_total = top_by(users, contributions, None, amount)

    writer.write("users:\n")
    _write_yaml_users(writer, top_commits, commits)
    writer.write("users_public_contributions:\n")
    _write_yaml_users(writer, top_public, public_contributions)
    writer.write("\nprivate_users:\n")
    _write_yaml_users(writer, top_total, contributions)

    writer.write("\norganizations:\n")
    _write_yaml_orgs(writer, top_orgs(top_commits, TOP_ORGS))
    writer.write("\npublic_contributions_organizations:\n")
    _write_yaml_orgs(writer, top_orgs(top_public, TOP_ORGS))
    writer.write("\nprivate_organizations:\n")
    _write_yaml_orgs(writer, top_orgs(top_total, TOP_ORGS))

    writer.write(f"generated: {rfc3339(options.get('generated'))}\n")
    writer.write(f"min_followers_required: {results.get('minimum_follower_count', 0)}\n")
    writer.write(f"total_user_count: {results.get('total_user_count', 0)}\n")

    title = options.get("preset_title")
    checksum = options.get("preset_checksum")
    if title and checksum:
        writer.write(f"title: {quote_ascii(title)}\n")
        writer.write(f"definition_checksum: {checksum}\n")
    writer.flush()


FORMATS = {
    "plain": plain_output,
    "csv": csv_output,
    "yaml": yaml_output,
}
