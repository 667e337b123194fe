"""datadock - terminal client for a data API and a data compiler API.

Example:
    from datadock import DataApiClient, TableBrowser

    browser = TableBrowser(DataApiClient("http://localhost:4000"))
    state = await browser.load_table_list()
    state = await browser.select_table(state.tables[0])
"""

__version__ = "0.1.0"

from datadock.orchestration import SchemaUploader, TableBrowser
from datadock.services import DataApiClient, DataCompilerClient, RequestOutcome

__all__ = [
    "DataApiClient",
    "DataCompilerClient",
    "RequestOutcome",
    "SchemaUploader",
    "TableBrowser",
    "__version__",
]
