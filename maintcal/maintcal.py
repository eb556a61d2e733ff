import arrow
import logging
from pprint import pprint
from jira import JIRA, JIRAError
from .config import Config
from .foreman import ForemanHosts
from .host import generate_hosts_summary
from .maint_day import next_maintenance_day
from .ticket import MaintenanceTicket
from . import tracker

logger = logging.getLogger(__name__)


class MaintCal:
    config: Config
    foreman: ForemanHosts
    jira: JIRA

    def __init__(
        self,
        config: Config,
        foreman: ForemanHosts | None = None,
        jira: JIRA | None = None,
    ) -> None:
        self.config = config
        if foreman is None:
            foreman = ForemanHosts(
                hostname=config.foreman_hostname,
                user=config.foreman_user,
                password=config.foreman_password,
                per_page=config.foreman_per_page,
            )
        self.foreman = foreman
        if jira is None:
            jira = tracker.connect(config)
        self.jira = jira

    def fetch_hosts_summary(self) -> dict[str, list[str]]:
        hosts = self.foreman.fetch()
        return generate_hosts_summary(hosts, self.config.hostgroup_patterns)

    def generate_ticket(
        self, maint_day: arrow.Arrow, hosts_summary: dict[str, list[str]]
    ) -> MaintenanceTicket:
        config = self.config
        project = tracker.find_project(self.jira, config.project_key)
        issue_type = tracker.find_issue_type(project, config.issue_type)
        component = tracker.find_component(self.jira, project, config.component)

        priority_id = None
        if config.priority is not None:
            priority_id = tracker.find_priority(self.jira, config.priority).id

        fields = tracker.map_fields(self.jira)

        return MaintenanceTicket(
            maint_day=maint_day,
            hosts_summary=hosts_summary,
            project_id=project.id,
            issue_type_id=issue_type.id,
            component_id=component.id,
            assignee=config.assignee,
            start_date_field=tracker.find_field(fields, config.start_date_field),
            end_date_field=tracker.find_field(fields, config.end_date_field),
            summary_prefix=config.summary_prefix,
            labels=[config.label],
            priority_id=priority_id,
        )

    def publish(self, today: arrow.Arrow | None = None, noop: bool = False) -> int:
        if today is None:
            today = arrow.now()

        hosts_summary = self.fetch_hosts_summary()
        maint_day = next_maintenance_day(today)
        logger.info("Next maintenance day is %s", maint_day.format("YYYY-MM-DD"))

        ticket = self.generate_ticket(maint_day, hosts_summary)
        if noop:
            pprint(ticket.to_fields())
            return 0

        # the confirmation fetch below is the only re-fetch
        issue = self.jira.create_issue(fields=ticket.to_fields(), prefetch=False)
        logger.info("Created %s", issue.key)

        # The ticket already exists here, so a failed re-fetch is only
        # reported and the run still succeeds. Nothing is rolled back.
        try:
            issue = self.jira.issue(issue.key)
            print(f"{issue.key} - {issue.fields.summary}")
        except JIRAError as e:
            logger.warning("Could not confirm %s, check it by hand", issue.key)
            print(e)

        return 0
