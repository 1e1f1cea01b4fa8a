import falcon

from falcon_pagination.config import apply_custom_options
from falcon_pagination.exceptions import NotFoundError


def lookup(context, name) -> int:
    """Return the integer the middleware stored under ``name``."""
    # item access, context attributes may be shadowed by parameter names
    try:
        value = context[name]
    except KeyError:
        raise NotFoundError(f"{name} not found in request context")

    # bool is an int subclass but never a valid page or size
    if isinstance(value, bool) or not isinstance(value, int):
        raise NotFoundError(f"{name} not found in request context")
    return value


def get_page(req: falcon.Request, *custom_options) -> int:
    opts = apply_custom_options(*custom_options)
    return lookup(req.context, opts.page_text)


def get_page_size(req: falcon.Request, *custom_options) -> int:
    opts = apply_custom_options(*custom_options)
    return lookup(req.context, opts.size_text)
