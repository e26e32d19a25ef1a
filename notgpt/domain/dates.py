import datetime

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_date(raw: str) -> str | None:
    """
    Zamienia datę `rok.miesiąc.dzień` na postać wyświetlaną `"11 Nov 2020"`.

    - Dokładnie trzy składniki oddzielone kropką, same cyfry.
    - Inny separator, inna liczba składników albo nieistniejąca data
      (np. miesiąc 13, 30 lutego) -> `None`, a nie zgadywana wartość.

    :param raw: Tekst daty podany przez użytkownika.
    :return: Data kanoniczna albo `None`, gdy tekstu nie da się zinterpretować.
    """
    parts = raw.strip().split(".")
    if len(parts) != 3 or not all(p.isdecimal() for p in parts):
        return None

    year, month, day = (int(p) for p in parts)
    try:
        datetime.date(year, month, day)
    except ValueError:
        return None

    return f"{day} {MONTHS[month - 1]} {year}"
