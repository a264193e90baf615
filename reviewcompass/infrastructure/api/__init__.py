from .review_api_client import ReviewApiClient

__all__ = ["ReviewApiClient"]
