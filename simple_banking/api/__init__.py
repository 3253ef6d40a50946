"""
Banking API Application Factory
"""

from typing import Optional
from fastapi import FastAPI

from .accounts import router as accounts_router
from .transactions import router as transactions_router
from .. import __version__
from ..ledger import Ledger


def create_app(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application serving one ledger"""
    app = FastAPI(
        title="Simple Banking API",
        description="In-memory account bookkeeping: deposits, withdrawals, transfers and interest",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.ledger = ledger or Ledger()

    app.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    app.include_router(transactions_router, prefix="/transactions", tags=["Transactions"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "simple_banking_api",
            "version": __version__
        }

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Simple Banking API",
            "version": __version__,
            "accounts": len(app.state.ledger),
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "accounts": "/accounts",
                "transactions": "/transactions"
            }
        }

    return app
