"""Build the HTTP request envelope for creating a Source.

This module only shapes data: it resolves the endpoint URL from
configuration and encodes the params as a form body. Sending the request,
authentication and response parsing belong to the caller's transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urlencode

from payment_sources.base.constants import FORM_CONTENT_TYPE
from payment_sources.base.encoding import form_pairs
from payment_sources.base.logging import LogContext, get_logger, log_event
from payment_sources.config import get_sources_config
from payment_sources.dto.source_params import SourceParams

logger = get_logger(__name__)


@dataclass(frozen=True)
class SourceRequest:
    """A ready-to-send ``POST`` for the sources endpoint.

    Attributes:
        method: HTTP method, always ``"POST"``.
        url: Absolute endpoint URL.
        body: ``application/x-www-form-urlencoded`` body.
        headers: Content headers; the transport adds authentication.
    """

    method: str
    url: str
    body: str
    headers: Dict[str, str] = field(default_factory=dict)


def build_create_source_request(
    params: SourceParams,
    *,
    api_base: Optional[str] = None,
    request_id: Optional[str] = None,
) -> SourceRequest:
    """Encode ``params`` into a :class:`SourceRequest`.

    Parameters
    ----------
    params:
        Source parameters; a preset or a manually built instance.
    api_base:
        Overrides the configured API base URL.
    request_id:
        Optional caller correlation id, only used for logging.

    Returns
    -------
    SourceRequest
        Envelope with the resolved URL and encoded body.

    Raises
    ------
    EncodingError
        If ``metadata`` or ``additional_api_parameters`` hold values with no
        form representation.
    """
    cfg = get_sources_config({"api_base": api_base})
    url = f"{str(cfg['api_base']).rstrip('/')}/{str(cfg['sources_endpoint']).strip('/')}"
    pairs = form_pairs(params)
    request = SourceRequest(
        method="POST",
        url=url,
        body=urlencode(pairs),
        headers={"Content-Type": FORM_CONTENT_TYPE},
    )
    # keys only: values include card numbers and IBANs
    log_event(
        logger,
        "sources.request.built",
        LogContext(source_type=params.type.value, request_id=request_id),
        url=url,
        keys=[key for key, _ in pairs],
    )
    return request


__all__ = ["SourceRequest", "build_create_source_request"]
