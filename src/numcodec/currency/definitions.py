"""Currency definitions and the static dataset loaded at process start.

Each definition fixes the display symbol and its position relative to the
numeric body. Position is decided per currency, not per locale, so that
"€" trails the number even when the active locale is en-US.
"""
# ruff: noqa: ERA001 - Section comments in data structures are documentation, not dead code

from dataclasses import dataclass

from numcodec.enums import SymbolPosition

__all__ = ["CURRENCY_DEFINITIONS", "CurrencyDefinition"]

_LEADING = SymbolPosition.LEADING
_TRAILING = SymbolPosition.TRAILING


@dataclass(frozen=True, slots=True)
class CurrencyDefinition:
    """Display data for one currency.

    Attributes:
        code: ISO 4217-like code, unique within a registry (e.g. "EUR")
        symbol: Symbol rendered next to the amount (e.g. "€")
        display_name: Human-readable name (e.g. "Euro")
        position: Whether the symbol leads or trails the number
    """

    code: str
    symbol: str
    display_name: str
    position: SymbolPosition = SymbolPosition.LEADING

    def __post_init__(self) -> None:
        """Validate definition invariants.

        Raises:
            ValueError: If code or symbol is empty.
        """
        if not self.code:
            msg = "CurrencyDefinition.code must not be empty"
            raise ValueError(msg)
        if not self.symbol:
            msg = f"CurrencyDefinition.symbol must not be empty (code {self.code!r})"
            raise ValueError(msg)

    def attach(self, number_text: str, *, negative: bool) -> str:
        """Place sign and symbol around an already formatted absolute value.

        Example:
            >>> usd = CurrencyDefinition("USD", "$", "US Dollar")
            >>> usd.attach("10.00", negative=True)
            '-$10.00'
        """
        sign = "-" if negative else ""
        if self.position is SymbolPosition.LEADING:
            return f"{sign}{self.symbol}{number_text}"
        return f"{sign}{number_text} {self.symbol}"


CURRENCY_DEFINITIONS: tuple[CurrencyDefinition, ...] = (
    # Americas
    CurrencyDefinition("USD", "$", "US Dollar", _LEADING),
    CurrencyDefinition("CAD", "C$", "Canadian Dollar", _LEADING),
    CurrencyDefinition("MXN", "MX$", "Mexican Peso", _LEADING),
    CurrencyDefinition("BRL", "R$", "Brazilian Real", _LEADING),
    CurrencyDefinition("ARS", "AR$", "Argentine Peso", _LEADING),
    CurrencyDefinition("CLP", "CL$", "Chilean Peso", _LEADING),
    CurrencyDefinition("COP", "CO$", "Colombian Peso", _LEADING),
    # Europe - Eurozone
    CurrencyDefinition("EUR", "€", "Euro", _TRAILING),
    # Europe - Non-Eurozone
    CurrencyDefinition("GBP", "£", "British Pound", _LEADING),
    CurrencyDefinition("CHF", "CHF", "Swiss Franc", _TRAILING),
    CurrencyDefinition("SEK", "kr", "Swedish Krona", _TRAILING),
    CurrencyDefinition("NOK", "kr", "Norwegian Krone", _TRAILING),
    CurrencyDefinition("DKK", "kr", "Danish Krone", _TRAILING),
    CurrencyDefinition("ISK", "kr", "Icelandic Krona", _TRAILING),
    CurrencyDefinition("PLN", "zł", "Polish Zloty", _TRAILING),
    CurrencyDefinition("CZK", "Kč", "Czech Koruna", _TRAILING),
    CurrencyDefinition("HUF", "Ft", "Hungarian Forint", _TRAILING),
    CurrencyDefinition("RON", "lei", "Romanian Leu", _TRAILING),
    CurrencyDefinition("BGN", "лв", "Bulgarian Lev", _TRAILING),
    CurrencyDefinition("UAH", "₴", "Ukrainian Hryvnia", _TRAILING),
    CurrencyDefinition("RUB", "₽", "Russian Ruble", _TRAILING),
    CurrencyDefinition("TRY", "₺", "Turkish Lira", _LEADING),
    # Asia-Pacific
    CurrencyDefinition("JPY", "¥", "Japanese Yen", _LEADING),
    CurrencyDefinition("CNY", "¥", "Chinese Yuan", _LEADING),
    CurrencyDefinition("HKD", "HK$", "Hong Kong Dollar", _LEADING),
    CurrencyDefinition("TWD", "NT$", "New Taiwan Dollar", _LEADING),
    CurrencyDefinition("KRW", "₩", "South Korean Won", _LEADING),
    CurrencyDefinition("INR", "₹", "Indian Rupee", _LEADING),
    CurrencyDefinition("SGD", "S$", "Singapore Dollar", _LEADING),
    CurrencyDefinition("AUD", "A$", "Australian Dollar", _LEADING),
    CurrencyDefinition("NZD", "NZ$", "New Zealand Dollar", _LEADING),
    CurrencyDefinition("THB", "฿", "Thai Baht", _LEADING),
    CurrencyDefinition("VND", "₫", "Vietnamese Dong", _TRAILING),
    CurrencyDefinition("PHP", "₱", "Philippine Peso", _LEADING),
    CurrencyDefinition("IDR", "Rp", "Indonesian Rupiah", _LEADING),
    CurrencyDefinition("MYR", "RM", "Malaysian Ringgit", _LEADING),
    # Middle East / Africa
    CurrencyDefinition("ILS", "₪", "Israeli New Shekel", _LEADING),
    CurrencyDefinition("AED", "AED", "UAE Dirham", _LEADING),
    CurrencyDefinition("SAR", "SAR", "Saudi Riyal", _LEADING),
    CurrencyDefinition("ZAR", "R", "South African Rand", _LEADING),
    CurrencyDefinition("NGN", "₦", "Nigerian Naira", _LEADING),
    # Cryptocurrency
    CurrencyDefinition("BTC", "₿", "Bitcoin", _LEADING),
)
