"""Shared dependencies for API routes."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from services import jsearch_client
from services.jsearch_client import JSearchClient

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def get_listings_client() -> JSearchClient:
    return jsearch_client.get_client()
