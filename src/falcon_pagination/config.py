import os
from typing import NamedTuple


class ConfigurationError(Exception):
    pass


class Options(NamedTuple):
    page_text: str = "page"
    size_text: str = "size"
    default_page: int = 1
    default_page_size: int = 10
    min_page_size: int = 1
    max_page_size: int = 100
    header_prefix: str = "X-"


DEFAULT_OPTIONS = Options()


def with_page_text(page_text):
    return lambda opts: opts._replace(page_text=page_text)


def with_size_text(size_text):
    return lambda opts: opts._replace(size_text=size_text)


def with_default_page(default_page):
    return lambda opts: opts._replace(default_page=default_page)


def with_default_page_size(default_page_size):
    return lambda opts: opts._replace(default_page_size=default_page_size)


def with_min_page_size(min_page_size):
    return lambda opts: opts._replace(min_page_size=min_page_size)


def with_max_page_size(max_page_size):
    return lambda opts: opts._replace(max_page_size=max_page_size)


def with_header_prefix(header_prefix):
    return lambda opts: opts._replace(header_prefix=header_prefix)


def apply_custom_options(*custom_options, base=DEFAULT_OPTIONS) -> Options:
    """
    Apply the override functions in call order on top of ``base``.

    Later overrides win when two of them touch the same field.
    """
    opts = base
    for custom_option in custom_options:
        opts = custom_option(opts)

    if not opts.page_text or not opts.size_text:
        raise ConfigurationError("Pagination parameter names must not be empty")

    if opts.min_page_size > opts.max_page_size:
        raise ConfigurationError(
            f"min_page_size ({opts.min_page_size}) must not exceed "
            f"max_page_size ({opts.max_page_size})"
        )
    return opts


def _int_from_env(environ, name, default):
    value = environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a valid integer")


def options_from_env(environ=None) -> Options:
    environ = os.environ if environ is None else environ
    opts = Options(
        page_text=environ.get("PAGINATION_PAGE_TEXT", DEFAULT_OPTIONS.page_text),
        size_text=environ.get("PAGINATION_SIZE_TEXT", DEFAULT_OPTIONS.size_text),
        default_page=_int_from_env(
            environ, "PAGINATION_DEFAULT_PAGE", DEFAULT_OPTIONS.default_page
        ),
        default_page_size=_int_from_env(
            environ, "PAGINATION_DEFAULT_PAGE_SIZE", DEFAULT_OPTIONS.default_page_size
        ),
        min_page_size=_int_from_env(
            environ, "PAGINATION_MIN_PAGE_SIZE", DEFAULT_OPTIONS.min_page_size
        ),
        max_page_size=_int_from_env(
            environ, "PAGINATION_MAX_PAGE_SIZE", DEFAULT_OPTIONS.max_page_size
        ),
        header_prefix=environ.get(
            "PAGINATION_HEADER_PREFIX", DEFAULT_OPTIONS.header_prefix
        ),
    )
    return apply_custom_options(base=opts)


SERVICE_NAME = os.environ.get("SERVICE_NAME", "Pagination Demo API")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
