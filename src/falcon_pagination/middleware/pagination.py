from typing import Optional

import falcon
from loguru import logger

from falcon_pagination.config import DEFAULT_OPTIONS, Options, apply_custom_options
from falcon_pagination.exceptions import PaginationError
from falcon_pagination.paginator import Paginator


class PaginationMiddleware:
    """
    Read ``page`` and ``size`` from the query string, validate them and
    publish the result to ``req.context`` and the response headers.

    Invalid input ends the request with a plain-text 400 response and the
    responder is never called.
    """

    def __init__(
        self, *custom_options, options: Optional[Options] = None, exempt_methods=None
    ):
        base = DEFAULT_OPTIONS if options is None else options
        self.options = apply_custom_options(*custom_options, base=base)
        self.exempt_methods = frozenset(exempt_methods or ())

    def process_request(self, req: falcon.Request, resp: falcon.Response):
        if req.method in self.exempt_methods:
            return

        paginator = Paginator(self.options, req, resp)
        try:
            page, size = paginator.resolve()
        except PaginationError as e:
            logger.debug(f"Rejecting pagination parameters of {req.relative_uri}: {e}")
            paginator.abort_with_bad_request(e)
            return

        logger.debug(f"Resolved pagination page={page} size={size}")
        paginator.publish(page, size)
