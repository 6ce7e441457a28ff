"""Configuration for the laboratory orders table.

Values live under the ``table`` section of ``configs/config.json``. The
workflow receives them through ``ResourceConfig``; synchronous callers use
``load_table_config``.
"""

import json
from pathlib import Path

from pydantic import BaseModel

CONFIG_FILE = "configs/config.json"

PAGE_SIZES = [10, 20, 30, 40, 50]
TEST_ORDER_TYPE = "testorder"
PLACEHOLDER = "--"
EMPTY_MESSAGE = "No test orders to display"


class TableConfig(BaseModel):
    """Pagination, projection and status-classification settings."""

    page_sizes: list[int] = PAGE_SIZES
    default_page_size: int = 10
    date_format: str = "%d-%b-%Y"
    test_order_type: str = TEST_ORDER_TYPE
    rejected_stop_reasons: list[str] = ["DECLINED", "EXCEPTION"]
    email_action_enabled: bool = False


def load_table_config(path: str | Path = CONFIG_FILE) -> TableConfig:
    """Load the ``table`` section of a config file."""
    data = json.loads(Path(path).read_text())
    return TableConfig.model_validate(data.get("table", {}))
