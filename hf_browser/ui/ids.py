from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        EXPLORE_STATE = "explore-state"
        VIEW_STATE = "view-state"

    class Control:
        # Filters
        SEX_SELECT = "sex-select"
        OUTCOME_SELECT = "outcome-select"
        CONDITION_SELECT = "condition-select"

        # Axes
        X_SELECT = "x-select"
        Y_SELECT = "y-select"

        # Zoom
        ZOOM_IN_BTN = "zoom-in-btn"
        ZOOM_OUT_BTN = "zoom-out-btn"
        ZOOM_RESET_BTN = "zoom-reset-btn"

        # Graph + downloads
        MAIN_GRAPH = "main-graph"
        EXPORT_PNG_BTN = "export-png-btn"
        EXPORT_PDF_BTN = "export-pdf-btn"
        DOWNLOAD_IMAGE = "download-image"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"
        EXPORT_STATUS = "export-status"

        # Sidebar metadata
        SIDEBAR_DATASET_NAME = "sidebar-dataset-name"
        SIDEBAR_DATASET_META = "sidebar-dataset-meta"

        # Status bar
        STATUS_BAR = "status-bar"
