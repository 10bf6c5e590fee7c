from webrev.infra.http.transport import RequestsTransport

__all__ = ["RequestsTransport"]
