from datetime import datetime, timezone
from typing import Optional, Tuple, Union

MINUTE_FORMS = ("минуту", "минуты", "минут")
HOUR_FORMS = ("час", "часа", "часов")
DAY_FORMS = ("день", "дня", "дней")
MONTH_FORMS = ("месяц", "месяца", "месяцев")
YEAR_FORMS = ("год", "года", "лет")


def plural_form(count: int, forms: Tuple[str, str, str]) -> str:
    """
    Picks the Russian noun form for `count`: (one, few, many),
    e.g. 1 минуту, 3 минуты, 11 минут.
    """
    one, few, many = forms
    if count % 10 == 1 and count % 100 != 11:
        return one
    if count % 10 in (2, 3, 4) and count % 100 not in (12, 13, 14):
        return few
    return many


def _to_aware(value: Union[datetime, str]) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        # Mongo returns naive datetimes that are UTC
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_relative_time(value: Union[datetime, str], now: Optional[datetime] = None) -> str:
    """Formats a timestamp as "N <units> назад" relative to `now`."""
    date = _to_aware(value)
    now = _to_aware(now) if now is not None else datetime.now(timezone.utc)
    diff_in_seconds = int((now - date).total_seconds())

    if diff_in_seconds < 60:
        return "только что"

    diff_in_minutes = diff_in_seconds // 60
    if diff_in_minutes < 60:
        return f"{diff_in_minutes} {plural_form(diff_in_minutes, MINUTE_FORMS)} назад"

    diff_in_hours = diff_in_minutes // 60
    if diff_in_hours < 24:
        return f"{diff_in_hours} {plural_form(diff_in_hours, HOUR_FORMS)} назад"

    diff_in_days = diff_in_hours // 24
    if diff_in_days < 30:
        return f"{diff_in_days} {plural_form(diff_in_days, DAY_FORMS)} назад"

    diff_in_months = diff_in_days // 30
    if diff_in_months < 12:
        return f"{diff_in_months} {plural_form(diff_in_months, MONTH_FORMS)} назад"

    diff_in_years = diff_in_months // 12
    return f"{diff_in_years} {plural_form(diff_in_years, YEAR_FORMS)} назад"
