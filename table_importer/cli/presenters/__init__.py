from .table_summary import TableSummaryPresenter

__all__ = ["TableSummaryPresenter"]
