from .base import HTTPProvider, RequestConfig
from .current import ClientConfig, CurrentWeatherClient

__all__ = ["ClientConfig", "CurrentWeatherClient", "HTTPProvider", "RequestConfig"]
