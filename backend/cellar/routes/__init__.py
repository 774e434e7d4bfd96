from .wine import router as wine_router

__all__ = ["wine_router"]
