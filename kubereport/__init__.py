"""kubereport - PDF health check reports for Kubernetes namespaces."""

__version__ = "0.1.0"
