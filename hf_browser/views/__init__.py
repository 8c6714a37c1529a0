from .base_view import BaseView
from .scatter_view import ScatterView

__all__ = ["BaseView", "ScatterView"]
