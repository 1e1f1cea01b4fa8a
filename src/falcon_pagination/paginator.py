import re

import falcon

from falcon_pagination.config import Options
from falcon_pagination.exceptions import ParseError, ValidationError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class Paginator:
    """
    Resolve page and page size for a single request.

    A paginator is created per request and never shared. The options it
    holds are the middleware's immutable configuration.
    """

    def __init__(self, options: Options, req: falcon.Request, resp: falcon.Response):
        self.opts = options
        self.req = req
        self.resp = resp

    def resolve(self):
        page = self.read_page()
        self.validate_page(page)

        size = self.read_page_size()
        self.validate_page_size(size)

        return page, size

    def read_page(self) -> int:
        return self._int_param_with_default(self.opts.page_text, self.opts.default_page)

    def read_page_size(self) -> int:
        return self._int_param_with_default(
            self.opts.size_text, self.opts.default_page_size
        )

    def _int_param_with_default(self, name, default):
        value = self.req.get_param(name)
        if not value:
            return default

        if not INTEGER_PATTERN.fullmatch(value):
            raise ParseError(f"{name} parameter must be an integer")
        return int(value)

    def validate_page(self, page):
        if page < 0:
            raise ValidationError(f"{self.opts.page_text} must be positive")

    def validate_page_size(self, size):
        if size < self.opts.min_page_size or size > self.opts.max_page_size:
            raise ValidationError(
                f"{self.opts.size_text} must be between "
                f"{self.opts.min_page_size} and {self.opts.max_page_size}"
            )

    def publish(self, page, size):
        self.req.context[self.opts.page_text] = page
        self.req.context[self.opts.size_text] = size

        prefix = self.opts.header_prefix
        self.resp.set_header(prefix + self.opts.page_text, str(page))
        self.resp.set_header(prefix + self.opts.size_text, str(size))

    def abort_with_bad_request(self, error):
        self.resp.status = falcon.HTTP_BAD_REQUEST
        self.resp.content_type = falcon.MEDIA_TEXT
        self.resp.text = str(error)
        # skip routing and the responder, process_response still runs
        self.resp.complete = True
