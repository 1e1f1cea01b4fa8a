"""Falcon middleware resolving ``page`` and ``size`` query parameters."""

from falcon_pagination.config import (
    DEFAULT_OPTIONS,
    ConfigurationError,
    Options,
    apply_custom_options,
    options_from_env,
    with_default_page,
    with_default_page_size,
    with_header_prefix,
    with_max_page_size,
    with_min_page_size,
    with_page_text,
    with_size_text,
)
from falcon_pagination.exceptions import (
    NotFoundError,
    PaginationError,
    ParseError,
    ValidationError,
)
from falcon_pagination.middleware import PaginationMiddleware
from falcon_pagination.paginator import Paginator
from falcon_pagination.utils.context import get_page, get_page_size, lookup

__version__ = "0.1.0"
