from src.salon_crm.salon_crm.payroll.factory import PayStrategyFactory
from src.salon_crm.salon_crm.payroll.strategies.flat_rate_strategy import HolidayStrategy, WeekendStrategy
from src.salon_crm.salon_crm.payroll.strategies.standard_strategy import StandardStrategy
from tests.fakes import MONDAY, SATURDAY, work_day


def test_factory_weekday_is_standard():
    assert isinstance(PayStrategyFactory().for_day(work_day(MONDAY, "8")), StandardStrategy)


def test_factory_saturday_and_sunday_are_weekend():
    factory = PayStrategyFactory()
    assert isinstance(factory.for_day(work_day(SATURDAY, "8")), WeekendStrategy)
    sunday = SATURDAY.replace(day=9)
    assert isinstance(factory.for_day(work_day(sunday, "8")), WeekendStrategy)


def test_factory_holiday_wins_over_weekend():
    assert isinstance(PayStrategyFactory().for_day(work_day(SATURDAY, "8", holiday=True)), HolidayStrategy)
    assert isinstance(PayStrategyFactory().for_day(work_day(MONDAY, "8", holiday=True)), HolidayStrategy)
