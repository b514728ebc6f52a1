import os
from typing import Optional


class Config:
    """
    Application configuration class.

    """

    @property
    def HOST(self) -> str: return os.getenv("HOST", "0.0.0.0")

    @property
    def PORT(self) -> int: return int(os.getenv("PORT", 8000))

    @property
    def DEBUG(self) -> bool: return (os.getenv("DEBUG", "false").lower() == "true")

    @property
    def APP_TITLE(self) -> str: return os.getenv("APP_TITLE", "vRA Block Device Service")

    @property
    def APP_VERSION(self) -> str: return os.getenv("APP_VERSION", "0.1.0")

    @property
    def VRA_SERVER(self) -> str: return os.getenv("VRA_SERVER", "")

    @property
    def VRA_API_TOKEN(self) -> Optional[str]: return os.getenv("VRA_API_TOKEN") or None

    @property
    def VRA_REFRESH_TOKEN(self) -> Optional[str]: return os.getenv("VRA_REFRESH_TOKEN") or None

    @property
    def VRA_VERIFY_SSL(self) -> bool: return (os.getenv("VRA_VERIFY_SSL", "true").lower() == "true")

    @property
    def VRA_REQUEST_TIMEOUT(self) -> float: return float(os.getenv("VRA_REQUEST_TIMEOUT", 30))

    @property
    def VRA_BASE_URL(self) -> str:
        server = self.VRA_SERVER
        if server.startswith("http://") or server.startswith("https://"):
            return server.rstrip("/")
        return f"https://{server}"

    @property
    def COMPLETION_POLL_INTERVAL(self) -> float: return float(os.getenv("COMPLETION_POLL_INTERVAL", 5))

    @property
    def COMPLETION_TIMEOUT(self) -> int: return int(os.getenv("COMPLETION_TIMEOUT", 120))

    @property
    def LOG_LEVEL(self) -> str: return os.getenv("LOG_LEVEL", "INFO")

    @property
    def LOG_FORMAT(self) -> str: return os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @property
    def API_PREFIX(self) -> str: return os.getenv("API_PREFIX", "/api/v1")

    @property
    def BLOCK_DEVICE_ROUTER_PREFIX(self) -> str: return os.getenv("BLOCK_DEVICE_ROUTER_PREFIX", "/block-device")

config = Config()
