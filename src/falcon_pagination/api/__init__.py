from .pagination import PaginationResource

__all__ = ["PaginationResource"]
