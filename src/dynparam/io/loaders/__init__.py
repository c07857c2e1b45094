from .errors import LoaderError
from .form_loader import load_forms

__all__ = ["load_forms", "LoaderError"]
