import falcon
import falcon.testing
import pytest

from falcon_pagination import (
    DEFAULT_OPTIONS,
    ParseError,
    Paginator,
    ValidationError,
    apply_custom_options,
    with_max_page_size,
    with_size_text,
)


def _paginator(query_string="", options=DEFAULT_OPTIONS):
    req = falcon.testing.create_req(query_string=query_string)
    return Paginator(options, req, falcon.Response())


def test_resolve_defaults():
    assert _paginator().resolve() == (1, 10)


def test_resolve_explicit_values():
    assert _paginator("page=3&size=42").resolve() == (3, 42)


def test_read_page_parse_error():
    with pytest.raises(ParseError, match="page parameter must be an integer"):
        _paginator("page=1e3").read_page()


def test_validate_page():
    paginator = _paginator()
    paginator.validate_page(0)

    with pytest.raises(ValidationError, match="page must be positive"):
        paginator.validate_page(-1)


def test_validate_page_size_bounds_are_inclusive():
    paginator = _paginator(options=apply_custom_options(with_max_page_size(25)))
    paginator.validate_page_size(1)
    paginator.validate_page_size(25)

    with pytest.raises(ValidationError, match="size must be between 1 and 25"):
        paginator.validate_page_size(26)


def test_size_parse_error_uses_configured_name():
    opts = apply_custom_options(with_size_text("limit"))

    with pytest.raises(ParseError, match="limit parameter must be an integer"):
        _paginator("limit=ten", opts).resolve()


def test_publish_sets_context_and_headers():
    paginator = _paginator()
    paginator.publish(2, 20)

    assert paginator.req.context["page"] == 2
    assert paginator.req.context["size"] == 20
    assert paginator.resp.get_header("X-Page") == "2"
    assert paginator.resp.get_header("X-Size") == "20"


def test_abort_with_bad_request():
    paginator = _paginator()
    paginator.abort_with_bad_request(ValidationError("size must be between 1 and 100"))

    assert paginator.resp.status == falcon.HTTP_BAD_REQUEST
    assert paginator.resp.text == "size must be between 1 and 100"
    assert paginator.resp.complete
    assert paginator.resp.get_header("X-Page") is None


def test_blank_values_use_defaults():
    assert _paginator("page=&size=").resolve() == (1, 10)
