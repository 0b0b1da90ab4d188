"""Load the official Turkish holidays of 2025 into ``turkish_holidays``.

Half-day eves (arife) are not listed; they are paid as normal days.
"""

from __future__ import annotations

import importlib
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.salon_crm.salon_crm.core.enums import HolidayType
from src.salon_crm.salon_crm.database.connection import DBConfig, DatabaseConnection
from src.salon_crm.salon_crm.holidays.model import Holiday
from src.salon_crm.salon_crm.holidays.mysql_holiday_repository import MySQLHolidayRepository

HOLIDAYS_2025 = [
    Holiday(date(2025, 1, 1), "Yılbaşı"),
    Holiday(date(2025, 3, 30), "Ramazan Bayramı 1. gün", HolidayType.RELIGIOUS),
    Holiday(date(2025, 3, 31), "Ramazan Bayramı 2. gün", HolidayType.RELIGIOUS),
    Holiday(date(2025, 4, 1), "Ramazan Bayramı 3. gün", HolidayType.RELIGIOUS),
    Holiday(date(2025, 4, 23), "Ulusal Egemenlik ve Çocuk Bayramı"),
    Holiday(date(2025, 5, 1), "Emek ve Dayanışma Günü"),
    Holiday(date(2025, 5, 19), "Atatürk'ü Anma, Gençlik ve Spor Bayramı"),
    Holiday(date(2025, 6, 6), "Kurban Bayramı 1. gün", HolidayType.RELIGIOUS),
    Holiday(date(2025, 6, 7), "Kurban Bayramı 2. gün", HolidayType.RELIGIOUS),
    Holiday(date(2025, 6, 8), "Kurban Bayramı 3. gün", HolidayType.RELIGIOUS),
    Holiday(date(2025, 6, 9), "Kurban Bayramı 4. gün", HolidayType.RELIGIOUS),
    Holiday(date(2025, 7, 15), "Demokrasi ve Milli Birlik Günü"),
    Holiday(date(2025, 8, 30), "Zafer Bayramı"),
    Holiday(date(2025, 10, 29), "Cumhuriyet Bayramı"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(settings.DB_CONFIG))

    repo = MySQLHolidayRepository(conn)
    for holiday in HOLIDAYS_2025:
        repo.upsert(holiday)

    print(f"OK: Seeded {len(HOLIDAYS_2025)} holidays -> {conn.config.describe()}")


if __name__ == "__main__":
    main()
