import pandas as pd
import warnings
from dataclasses import dataclass


@dataclass(frozen=True)
class HostRecord:
    name: str
    hostgroup_title: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "HostRecord":
        return cls(name=data["name"], hostgroup_title=data.get("hostgroup_title"))


def filter_hosts(hosts: list[HostRecord], pattern: str) -> list[HostRecord]:
    """Hosts whose hostgroup title matches `pattern` anywhere (re.search)."""
    if len(hosts) == 0:
        return []

    titles = pd.Series([host.hostgroup_title for host in hosts], dtype="object")
    with warnings.catch_warnings():
        # groups in a pattern only group, nothing is extracted
        warnings.filterwarnings("ignore", message="This pattern .* has match groups")
        matched = titles.str.contains(pattern, regex=True, case=True, na=False)
    return [host for host, keep in zip(hosts, matched) if keep]


def hostnames(hosts: list[HostRecord]) -> list[str]:
    return [host.name for host in hosts]


def generate_hosts_summary(
    hosts: list[HostRecord], patterns: list[str]
) -> dict[str, list[str]]:
    summary: dict[str, list[str]] = {}
    for pattern in sorted(patterns):
        summary[pattern] = sorted(hostnames(filter_hosts(hosts, pattern)))

    return summary
