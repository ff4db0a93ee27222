from .categories import router as categories_router
