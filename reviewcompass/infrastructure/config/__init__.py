from .settings import Settings, ApiSettings, BusinessSettings, ReviewSettings, get_settings

__all__ = ["Settings", "ApiSettings", "BusinessSettings", "ReviewSettings", "get_settings"]
