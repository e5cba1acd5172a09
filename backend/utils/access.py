# backend/utils/access.py
import logging

from fastapi import Request

logger = logging.getLogger(__name__)


# Authorization stage for admin pages and mutating API calls.
# PLACEHOLDER: the catalog ships without authentication, every caller
# is let through. Replace this dependency to put real checks in front
# of the admin panel and the write endpoints.
def authorize_request(request: Request) -> None:
    logger.debug("No authorization configured, allowing %s %s", request.method, request.url.path)
