"""SQL condition builder, paging, logical delete, interceptors, logging and id generators."""

__version__ = "0.1.0"