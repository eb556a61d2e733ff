import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Everything a run needs, gathered once at startup.

    Credentials come from the environment, everything else from `settings.py`.
    """

    foreman_hostname: str
    foreman_user: str
    foreman_password: str
    foreman_per_page: str
    jira_site: str
    jira_user: str
    jira_password: str
    hostgroup_patterns: list[str]
    project_key: str
    issue_type: str
    assignee: str
    component: str
    label: str
    summary_prefix: str
    start_date_field: str
    end_date_field: str
    priority: str | None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **settings) -> "Config":
        env = os.environ if environ is None else environ
        return cls(
            foreman_user=env["FOREMAN_USER"],
            foreman_password=env["FOREMAN_PASS"],
            jira_user=env["JIRA_USER"],
            jira_password=env["JIRA_PASS"],
            **settings,
        )
