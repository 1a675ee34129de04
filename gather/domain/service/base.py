"""Base service class for domain services."""

import logfire


class Service:
    """Base class for all domain services.

    Spans opened with ``span`` are named ``<span_prefix>.<operation>`` so
    traces group by service.
    """

    span_prefix: str = "service"

    def span(self, operation: str, **attributes):
        """Open a Logfire span for one operation of this service."""
        return logfire.span(f"{self.span_prefix}.{operation}", **attributes)
