debug = False
noop = False
tzinfo = "local"

foreman_hostname = "foreman.cp.lsst.org"
foreman_per_page = "all"
hostgroup_patterns = [
    "^cp/comcam",
    "^cp/auxtel",
]

jira_site = "https://jira.lsstcorp.org"
project_key = "TST"
issue_type = "Improvement"
assignee = "jhoblitt"
component = "Something"
label = "it-calendar"
summary_prefix = "jch test"
start_date_field = "Start date"
end_date_field = "End date"
# e.g. "SUMMIT-1"
priority = None
