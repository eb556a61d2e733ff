import arrow
import logging
import sys
from collections.abc import Mapping
import settings
from maintcal import Config, MaintCal


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    return Config.from_env(
        environ,
        foreman_hostname=settings.foreman_hostname,
        foreman_per_page=settings.foreman_per_page,
        jira_site=settings.jira_site,
        hostgroup_patterns=settings.hostgroup_patterns,
        project_key=settings.project_key,
        issue_type=settings.issue_type,
        assignee=settings.assignee,
        component=settings.component,
        label=settings.label,
        summary_prefix=settings.summary_prefix,
        start_date_field=settings.start_date_field,
        end_date_field=settings.end_date_field,
        priority=settings.priority,
    )


def main() -> int:
    noop = settings.noop or "--noop" in sys.argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    instance = MaintCal(load_config())
    return instance.publish(arrow.now(settings.tzinfo), noop=noop)


if __name__ == "__main__":
    sys.exit(main())
