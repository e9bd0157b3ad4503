"""Enumeration types for loan entities."""

from enum import Enum


class Currency(str, Enum):
    """ISO 4217 currency codes accepted for loans."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"
    NZD = "NZD"
    SEK = "SEK"
    NOK = "NOK"
    DKK = "DKK"
    SGD = "SGD"
    HKD = "HKD"
    CNY = "CNY"
    INR = "INR"
    BRL = "BRL"
    MXN = "MXN"
    ZAR = "ZAR"
    JPY = "JPY"
    KRW = "KRW"
    KWD = "KWD"
    BHD = "BHD"

    @property
    def minor_units(self) -> int:
        """Number of decimal places used when displaying amounts."""
        return _MINOR_UNITS.get(self, 2)

    @classmethod
    def parse(cls, value: "str | Currency") -> "Currency":
        """Resolve a currency code, case-insensitively.

        Raises
        ------
        ValueError
            If the code is not a recognised currency.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


_MINOR_UNITS = {
    Currency.JPY: 0,
    Currency.KRW: 0,
    Currency.KWD: 3,
    Currency.BHD: 3,
}


class DayCountConvention(str, Enum):
    """Divisor used to turn an annual rate into a daily one."""

    ACT_365 = "ACT/365"
    ACT_360 = "ACT/360"

    @property
    def basis(self) -> int:
        return 360 if self is DayCountConvention.ACT_360 else 365
