"""Request orchestrators for the table browser and schema upload features."""

from datadock.orchestration.base import CompilerGateway, DataGateway
from datadock.orchestration.schema_upload import SchemaUploader, UploadState, UploadStatus
from datadock.orchestration.table_browser import TableBrowser, TableBrowserState

__all__ = [
    "CompilerGateway",
    "DataGateway",
    "SchemaUploader",
    "TableBrowser",
    "TableBrowserState",
    "UploadState",
    "UploadStatus",
]
