from .categories import CatalogRejectedError, CategoriesDataAccess
