"""
Caller identity resolution.

The caller's user id currently arrives as a raw, unsigned request header and
is trusted on presence alone. Handlers only see the resolved id, so another
resolver (signed tokens, session lookup) can be installed on
``app.state.identity_resolver`` without touching them.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Depends, Request

from app.exceptions import UnauthorizedError

logger = logging.getLogger("dailydiet.identity")


class IdentityResolver(ABC):
    """Turns an inbound request into an opaque caller id, or None"""

    @abstractmethod
    def resolve(self, request: Request) -> Optional[str]:
        raise NotImplementedError


class HeaderIdentityResolver(IdentityResolver):
    """Reads the caller id verbatim from a request header"""

    def __init__(self, header_name: str = "user_id"):
        self.header_name = header_name

    def resolve(self, request: Request) -> Optional[str]:
        value = request.headers.get(self.header_name)
        return value or None


def get_caller_identity(request: Request) -> Optional[str]:
    """Optional caller id for routes that behave differently when anonymous."""
    resolver: IdentityResolver = request.app.state.identity_resolver
    return resolver.resolve(request)


def require_caller_identity(
    request: Request, caller_id: Optional[str] = Depends(get_caller_identity)
) -> str:
    """Identity gate: reject the request with 401 when no caller id is present."""
    if not caller_id:
        logger.warning(f"identity_missing path={request.url.path}")
        raise UnauthorizedError()
    return caller_id
