import arrow
import yaml
from dataclasses import dataclass, field

DESCRIPTION_PREAMBLE = "Maintenance is planned on these hosts:"


def generate_description(hosts_summary: dict[str, list[str]]) -> str:
    # keep the insertion order, the summary is already sorted by pattern
    body = yaml.safe_dump(
        hosts_summary,
        default_flow_style=False,
        explicit_start=True,
        sort_keys=False,
    )
    return f"{DESCRIPTION_PREAMBLE}\n\n{{code}}\n{body}{{code}}"


@dataclass(frozen=True)
class MaintenanceTicket:
    maint_day: arrow.Arrow
    hosts_summary: dict[str, list[str]]
    project_id: str
    issue_type_id: str
    component_id: str
    assignee: str
    start_date_field: str
    end_date_field: str
    summary_prefix: str
    labels: list[str] = field(default_factory=list)
    priority_id: str | None = None

    @property
    def summary(self) -> str:
        month = self.maint_day.format("MMMM")
        year = self.maint_day.format("YYYY")
        return f"{self.summary_prefix} - {month}, {year}"

    @property
    def start_date(self) -> str:
        return self.maint_day.format("YYYY-MM-DD")

    @property
    def description(self) -> str:
        return generate_description(self.hosts_summary)

    def to_fields(self) -> dict:
        fields = {
            "summary": self.summary,
            "project": {"id": self.project_id},
            "issuetype": {"id": self.issue_type_id},
            "assignee": {"name": self.assignee},
            # maintenance fits in one day
            self.start_date_field: self.start_date,
            self.end_date_field: self.start_date,
            "components": [{"id": self.component_id}],
            "labels": list(self.labels),
            "description": self.description,
        }

        if self.priority_id is not None:
            fields["priority"] = {"id": self.priority_id}

        return fields
