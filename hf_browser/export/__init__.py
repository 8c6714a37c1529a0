from .figure_export import SUPPORTED_FORMATS, export_figure, export_filename, figure_to_bytes

__all__ = ["SUPPORTED_FORMATS", "export_figure", "export_filename", "figure_to_bytes"]
