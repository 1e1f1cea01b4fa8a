import sys

import falcon
from loguru import logger

from falcon_pagination.api import PaginationResource
from falcon_pagination.config import LOG_LEVEL, SERVICE_NAME, options_from_env
from falcon_pagination.middleware import PaginationMiddleware


class PaginatedAPI(falcon.App):
    def __init__(self, pagination_options, *args, **kwargs):
        super().__init__(*args, **kwargs)
        logger.info(f"{SERVICE_NAME} is starting")

        self.add_route("/pagination", PaginationResource(pagination_options))


def create_app(options=None):
    options = options_from_env() if options is None else options
    pagination = PaginationMiddleware(options=options, exempt_methods=["OPTIONS"])
    return PaginatedAPI(pagination.options, middleware=[pagination])


logger.remove()
logger.add(sys.stderr, level=LOG_LEVEL)
application = create_app()


if __name__ == "__main__":
    from wsgiref import simple_server

    httpd = simple_server.make_server("127.0.0.1", 5000, application)
    httpd.serve_forever()
