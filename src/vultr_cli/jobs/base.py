"""Base job class for Vultr operations."""

from abc import ABC, abstractmethod
import uuid
from vultr_cli.core.provider import VultrClient
from vultr_cli.utils.logger import setup_logger


class BaseJob(ABC):
    """Base class for all server operation jobs.

    A job performs exactly one call on the injected client and returns the
    text to print. Client errors are not caught here; they propagate to the
    command boundary.
    """

    job_name: str = ""

    def __init__(self, client: VultrClient):
        """Initialize the job with the shared API client."""
        self.client = client
        self.job_name = self.job_name or self.__class__.__name__.lower().replace("job", "")
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking

        self.logger = setup_logger(
            name=self.__class__.__module__,
            log_file=f"{self.job_name}.log",
        )

    def log_call(self, message: str) -> None:
        self.logger.info(f"[{self.correlation_id}] {self.job_name}: {message}")

    @abstractmethod
    def execute(self, **kwargs) -> str:
        """Execute the job and return the output text."""
        pass
