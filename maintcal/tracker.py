"""Jira connection and the metadata lookups needed to file a ticket.

Every lookup is an exact name match over a short list returned by Jira and
raises `NotFoundError` when nothing matches, so a ticket is never written with
a missing project, issue type, component, priority or field.
"""

import logging
from collections.abc import Iterable
from jira import JIRA, JIRAError
from .config import Config

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    kind: str
    name: str

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"No {kind} named {name!r}")
        self.kind = kind
        self.name = name


def connect(config: Config) -> JIRA:
    return JIRA(
        server=config.jira_site,
        basic_auth=(config.jira_user, config.jira_password),
        # no request until the inventory has been read
        get_server_info=False,
    )


def find_by_name(items: Iterable, name: str):
    return next((item for item in items if item.name == name), None)


def find_project(client: JIRA, key: str):
    try:
        return client.project(key)
    except JIRAError as e:
        if e.status_code == 404:
            raise NotFoundError("project", key) from e
        raise


def find_issue_type(project, name: str):
    issue_type = find_by_name(project.issueTypes, name)
    if issue_type is None:
        raise NotFoundError("issue type", name)
    return issue_type


def find_component(client: JIRA, project, name: str):
    component = find_by_name(client.project_components(project.key), name)
    if component is None:
        raise NotFoundError("component", name)
    return component


def find_priority(client: JIRA, name: str):
    priority = find_by_name(client.priorities(), name)
    if priority is None:
        raise NotFoundError("priority", name)
    return priority


def map_fields(client: JIRA) -> dict[str, str]:
    """Field display name to field key, e.g. "Start date" -> "customfield_10400"."""
    return {field["name"]: field["id"] for field in client.fields()}


def find_field(fields: dict[str, str], name: str) -> str:
    if name not in fields:
        raise NotFoundError("field", name)
    logger.debug("Field %r is %s", name, fields[name])
    return fields[name]
