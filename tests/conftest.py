import pytest


@pytest.fixture
def simulated_row():
    return {
        "annual_production": 9659.26,
        "annual_savings": 1931.85,
        "monthly_savings": 160.99,
        "twenty_year_savings": 34773.3,
        "payback_period": None,
    }
