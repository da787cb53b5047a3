# swms_compliance/compliance/references.py
"""
Regulatory reference tables.

Static, read-only data: the Australian Standards, WHS instruments and
codes of practice each trade must cite, and the control measures that
legislation makes mandatory for particular categories of work.
"""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class TradeStandards:
    """Citations a trade's SWMS is expected to reference."""

    primary: tuple[str, ...]
    whs: tuple[str, ...]
    codes: tuple[str, ...]

    def all_required(self) -> tuple[str, ...]:
        """Primary standards, then WHS instruments, then codes of practice."""
        return self.primary + self.whs + self.codes


TRADE_STANDARDS: MappingProxyType = MappingProxyType(
    {
        "electrical": TradeStandards(
            primary=("AS/NZS 3000:2018", "AS/NZS 3012:2019", "AS/NZS 4836:2011"),
            whs=("WHS Act 2011", "WHS Regulation 2017"),
            codes=("Electrical Safety Code of Practice", "Managing Electrical Risks COP"),
        ),
        "carpentry": TradeStandards(
            primary=("AS 1684:2010", "AS/NZS 1170:2002", "AS 4100:2020"),
            whs=("WHS Act 2011", "Construction Work COP"),
            codes=("Managing Falls COP", "Noise Management COP"),
        ),
        "plumbing": TradeStandards(
            primary=("AS/NZS 3500:2018", "AS/NZS 2032:2006"),
            whs=("WHS Act 2011", "Confined Spaces COP"),
            codes=("Hazardous Manual Tasks COP",),
        ),
        "concreting": TradeStandards(
            primary=("AS 3600:2018", "AS 1379:2007", "AS/NZS 3850:2015"),
            whs=("WHS Act 2011", "Silica Dust COP"),
            codes=("Plant and Equipment COP",),
        ),
        "roofing": TradeStandards(
            primary=("AS 1562:2018", "AS/NZS 1891:2007"),
            whs=("WHS Act 2011", "Falls Prevention COP"),
            codes=("Working at Heights COP",),
        ),
    }
)

# Activity category -> control measures legislation makes mandatory
LEGISLATION_REQUIREMENTS: MappingProxyType = MappingProxyType(
    {
        "High Risk Work": (
            "High Risk Work Licence required",
            "Safe Work Method Statement mandatory",
        ),
        "Work at Height": (
            "Fall protection systems required",
            "Competent worker supervision",
        ),
        "Confined Space": (
            "Entry permit system",
            "Atmospheric monitoring required",
        ),
        "Electrical Work": (
            "Licensed electrician required",
            "Isolation procedures mandatory",
        ),
        "Hazardous Substances": (
            "SDS available",
            "Risk assessment completed",
        ),
    }
)


def normalize_trade_type(trade_type: str) -> str:
    return trade_type.strip().lower()


def get_trade_standards(trade_type: str) -> TradeStandards | None:
    """Standards for a trade, or None when the trade has no reference entry."""
    return TRADE_STANDARDS.get(normalize_trade_type(trade_type))


def known_trades() -> list[str]:
    return list(TRADE_STANDARDS)


def citation_prefix(standard: str) -> str:
    """Text before the first colon: 'AS/NZS 3000:2018' -> 'AS/NZS 3000'."""
    return standard.split(":", 1)[0]
