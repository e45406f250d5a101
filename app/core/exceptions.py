from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging

from app.modules.sales.exceptions import (
    SaleLedgerError, InvalidSaleRequest, ProductNotFound,
    InsufficientStock, StorageFailure
)

logger = logging.getLogger(__name__)

# Errores corregibles por el cliente vs. fallas del sistema
LEDGER_STATUS_CODES = {
    InvalidSaleRequest: status.HTTP_400_BAD_REQUEST,
    ProductNotFound: status.HTTP_404_NOT_FOUND,
    InsufficientStock: status.HTTP_409_CONFLICT,
    StorageFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

def setup_exception_handlers(app: FastAPI):
    """Traducir errores del registro de ventas a respuestas HTTP"""

    @app.exception_handler(SaleLedgerError)
    async def sale_ledger_error_handler(request: Request, exc: SaleLedgerError):
        status_code = LEDGER_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        if status_code >= 500:
            # Mensaje opaco: el detalle queda en el log
            detail = "No se pudo registrar la venta, intente nuevamente"
        else:
            detail = exc.message

        return JSONResponse(
            status_code=status_code,
            content={"detail": detail, "error": exc.code}
        )
