import logging
import requests
from .host import HostRecord, filter_hosts

logger = logging.getLogger(__name__)


class ForemanHosts:
    """Host list of a Foreman instance.

    TLS certificates are not verified: the Foreman instances live on the
    internal network with self-signed certificates.
    """

    hostname: str
    user: str
    password: str
    per_page: str
    session: requests.Session
    hosts: list[HostRecord]

    def __init__(
        self,
        hostname: str,
        user: str,
        password: str,
        per_page: str = "all",
        session: requests.Session | None = None,
    ) -> None:
        self.hostname = hostname
        self.user = user
        self.password = password
        self.per_page = per_page
        self.session = session if session is not None else requests.Session()
        self.hosts = []

    @property
    def url(self) -> str:
        return f"https://{self.hostname}/api/v2/hosts"

    def fetch(self) -> list[HostRecord]:
        logger.debug("Fetching hosts from %s (TLS verification disabled)", self.url)
        response = self.session.get(
            self.url,
            params={"per_page": self.per_page},
            auth=(self.user, self.password),
            verify=False,
        )
        response.raise_for_status()

        results = response.json()["results"]
        self.hosts = [HostRecord.from_json(data) for data in results]
        logger.info("Fetched %d hosts from %s", len(self.hosts), self.hostname)

        return self.hosts

    def hostgroup_filter(self, pattern: str) -> list[HostRecord]:
        return filter_hosts(self.hosts, pattern)
