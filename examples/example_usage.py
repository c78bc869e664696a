"""Example: call the service layer directly (no Flask).

Controllers are a thin layer; the statistics live in StatisticsService.
"""

import importlib

from config import get_settings_module

from kbm_records.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.statistics_service.get_period_summary("2024-01-01", "2024-01-31").to_dict())
    for month in container.statistics_service.get_monthly_breakdown(2024):
        print(month.to_dict())


if __name__ == "__main__":
    main()
