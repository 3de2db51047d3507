from .loader import ModelLoadError, load_model
from .model import Catalog, CatalogNode

__all__ = ["Catalog", "CatalogNode", "ModelLoadError", "load_model"]
