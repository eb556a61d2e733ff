from dataclasses import replace
from types import SimpleNamespace

import pytest
from jira import JIRAError

import run
from maintcal import Config, HostRecord

FIELDS = [
    {"id": "summary", "name": "Summary"},
    {"id": "customfield_10400", "name": "Start date"},
    {"id": "customfield_10401", "name": "End date"},
]


class FakeJira:
    def __init__(self) -> None:
        self.project_key = "TST"
        self.issue_types = [
            SimpleNamespace(id="1", name="Bug"),
            SimpleNamespace(id="4", name="Improvement"),
        ]
        self.components = [
            SimpleNamespace(id="10100", name="Other"),
            SimpleNamespace(id="10101", name="Something"),
        ]
        self.priority_list = [SimpleNamespace(id="7", name="SUMMIT-1")]
        self.field_list = list(FIELDS)
        self.created: list[dict] = []
        self.confirm_error: JIRAError | None = None

    def project(self, key):
        if key != self.project_key:
            raise JIRAError(text="No project could be found", status_code=404)
        return SimpleNamespace(id="10000", key=key, issueTypes=self.issue_types)

    def project_components(self, key):
        return self.components

    def priorities(self):
        return self.priority_list

    def fields(self):
        return self.field_list

    def create_issue(self, fields, prefetch=True):
        self.created.append(fields)
        key = f"TST-{len(self.created)}"
        if prefetch:
            # the real client re-fetches the new issue before returning
            return self.issue(key)
        return SimpleNamespace(key=key)

    def issue(self, key):
        if self.confirm_error is not None:
            raise self.confirm_error
        summary = self.created[-1]["summary"]
        return SimpleNamespace(key=key, fields=SimpleNamespace(summary=summary))


class FakeForeman:
    def __init__(self, hosts: list[HostRecord]) -> None:
        self.hosts = hosts
        self.fetched = 0

    def fetch(self) -> list[HostRecord]:
        self.fetched += 1
        return self.hosts


@pytest.fixture
def hosts() -> list[HostRecord]:
    return [
        HostRecord(name="cp-comcam-02", hostgroup_title="cp/comcam/rack1"),
        HostRecord(name="aux-01", hostgroup_title="cp/auxtel/rack2"),
        HostRecord(name="other", hostgroup_title="unrelated"),
        HostRecord(name="cp-comcam-01", hostgroup_title="cp/comcam/rack1"),
        HostRecord(name="orphan", hostgroup_title=None),
    ]


ENV = {
    "FOREMAN_USER": "foreman-user",
    "FOREMAN_PASS": "foreman-pass",
    "JIRA_USER": "jira-user",
    "JIRA_PASS": "jira-pass",
}


@pytest.fixture
def config() -> Config:
    return replace(
        run.load_config(ENV),
        foreman_hostname="foreman.example.org",
        jira_site="https://jira.example.org",
        hostgroup_patterns=["^cp/comcam", "^cp/auxtel"],
        priority=None,
    )


@pytest.fixture
def jira() -> FakeJira:
    return FakeJira()


@pytest.fixture
def foreman(hosts) -> FakeForeman:
    return FakeForeman(hosts)
