import json

import falcon
from loguru import logger

from falcon_pagination.config import Options, with_page_text, with_size_text
from falcon_pagination.utils.context import get_page, get_page_size


class PaginationResource:
    def __init__(self, options: Options):
        self.custom_options = (
            with_page_text(options.page_text),
            with_size_text(options.size_text),
        )

    def on_get(self, req: falcon.Request, res: falcon.Response):
        page = get_page(req, *self.custom_options)
        size = get_page_size(req, *self.custom_options)
        logger.debug(f"Serving pagination info page={page} size={size}")

        res.content_type = falcon.MEDIA_JSON
        res.text = json.dumps({"page": page, "size": size})
