"""Parsing of ``docker container port`` output."""

import structlog

from ...models.endpoint import Endpoint
from ...models.errors import ErrorDetail, PortParseError

logger = structlog.get_logger(__name__)


def parse_first_endpoint(text: str) -> Endpoint:
    """Return the first socket address found in ``text``.

    The output may hold several bindings separated by spaces or newlines,
    e.g. one IPv4 and one IPv6 binding on dual-stack hosts. Tokens are
    scanned in document order and the first valid one wins; the rest of the
    input is not examined.

    Raises:
        PortParseError: no token is an ``a.b.c.d:port`` or ``[ipv6]:port``
    """
    skipped = []
    for token in text.split():
        token = token.strip()
        if not token:
            continue
        try:
            return Endpoint.parse(token)
        except ValueError as e:
            logger.debug("Skipping unparseable port binding", token=token, error=str(e))
            skipped.append(ErrorDetail(field=token, message=str(e), code="invalid_binding"))

    raise PortParseError(output=text, details=skipped)
