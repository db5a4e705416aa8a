"""Pagination classes for API endpoints."""

from rest_framework.pagination import PageNumberPagination


class StandardPageNumberPagination(PageNumberPagination):
    """Page-number pagination for idea and notification lists.

    Clients choose the page size with ``page_size`` up to ``max_page_size``.
    """

    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100
