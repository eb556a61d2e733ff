from .config import Config
from .foreman import ForemanHosts
from .host import HostRecord, filter_hosts, generate_hosts_summary, hostnames
from .maint_day import MaintDay, next_maintenance_day, next_occurrence
from .maintcal import MaintCal
from .ticket import MaintenanceTicket, generate_description
from .tracker import NotFoundError
