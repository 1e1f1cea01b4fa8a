from .pagination import PaginationMiddleware

__all__ = ["PaginationMiddleware"]
