import sys
import pytest
from datetime import date
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from data_manager.schema import LoanParameters  # noqa: E402


@pytest.fixture
def start_date():
    """固定起始日，保证还款日期可复现"""
    return date(2024, 1, 15)


@pytest.fixture
def standard_loan():
    """40万, 6.5%, 30年"""
    return LoanParameters(principal=400000, annual_rate_percent=6.5, term_years=30)
