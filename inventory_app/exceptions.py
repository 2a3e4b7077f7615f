"""
Domain exceptions for the inventory ledger
Each error carries the HTTP status code used by the API error handlers
"""


class LedgerError(Exception):
    """Base class for errors surfaced to callers of the ledger"""
    status_code = 500

    def __init__(self, message, status_code=None, payload=None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload or {}
        super().__init__(self.message)

    def to_dict(self):
        return {
            'error': self.message,
            'status_code': self.status_code,
            **self.payload
        }


class InvalidInputError(LedgerError):
    """Malformed request: bad movement type, non-positive quantity, missing fields"""
    status_code = 400


class NotFoundError(LedgerError):
    """Unknown product, user or other record"""
    status_code = 404


class InsufficientStockError(LedgerError):
    """A salida asks for more units than the product currently holds"""
    status_code = 400

    def __init__(self, available_stock, requested_quantity):
        self.available_stock = available_stock
        self.requested_quantity = requested_quantity
        super().__init__(
            f"Stock insuficiente. Stock actual: {available_stock}, "
            f"cantidad solicitada: {requested_quantity}",
            payload={
                'availableStock': available_stock,
                'requestedQuantity': requested_quantity
            }
        )


class PermissionDeniedError(LedgerError):
    """Acting user lacks the permission for the requested action"""
    status_code = 403


class StorageFailureError(LedgerError):
    """Persistence unreachable or inconsistent; the caller may retry"""
    status_code = 503
