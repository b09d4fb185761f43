"""User service configuration and endpoint constants."""

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://dummyapi.io/data/v1/"
DEFAULT_PROFILE_IMAGE_URL = (
    "https://st4.depositphotos.com/29453910/37778/v/450/"
    "depositphotos_377785406-stock-illustration-hand-drawn-modern-man-avatar.jpg"
)

# Endpoints, relative to the base URL
USER_ENDPOINT = "user"
USER_BY_ID_ENDPOINT = "user/{id}"
USER_CREATE_ENDPOINT = "user/create"

PAGE_PARAM = "page"
LIMIT_PARAM = "limit"
CREATED_PARAM = "created"


@dataclass
class ApiConfig:
    """Configuration for the user service client."""
    base_url: str = DEFAULT_BASE_URL
    app_id: str | None = None
    api_key_header: str = "app-id"
    connect_timeout: float = 30.0
    read_timeout: float = 30.0
    write_timeout: float = 30.0
    page_limit: int = 20

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.base_url:
            raise ValueError("Base URL is required")
        if not self.base_url.endswith("/"):
            self.base_url = f"{self.base_url}/"
        for name in ("connect_timeout", "read_timeout", "write_timeout"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.page_limit <= 0:
            raise ValueError("Page limit must be positive")

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        if self.app_id:
            return {self.api_key_header: self.app_id}
        return {}
