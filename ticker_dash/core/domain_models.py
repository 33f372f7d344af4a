from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# --- Lenient field types ---
# The provider returns partially populated objects whose shape is not
# guaranteed. Wrong shapes are read as "absent" instead of failing validation.


def _scalar_or_none(v: Any) -> Any:
    if isinstance(v, bool):
        return str(v).lower()
    if isinstance(v, (str, int, float)):
        return v
    return None


def _records(v: Any) -> list[dict[str, Any]]:
    if not isinstance(v, list):
        return []
    return [item for item in v if isinstance(item, dict)]


def _positional_records(v: Any) -> list[dict[str, Any]]:
    # Position matters here: a malformed item becomes an empty record, not a gap
    if not isinstance(v, list):
        return []
    return [item if isinstance(item, dict) else {} for item in v]


def _record_or_none(v: Any) -> Any:
    return v if isinstance(v, dict) else None


# Raw API scalars arrive as strings or numbers; they are kept as given.
Scalar = Annotated[str | int | float | None, BeforeValidator(_scalar_or_none)]


# --- Enums ---


class FinancialMetric(str, Enum):
    """Statement keys shown on the financials grid, in display order."""

    TOTAL_REVENUE = "TotalRevenue"
    NET_INCOME = "NetIncome"
    DILUTED_EPS = "DilutedEPSExcludingExtraOrdItems"
    TOTAL_ASSETS = "TotalAssets"
    TOTAL_EQUITY = "TotalEquity"


class ChangeStyle(str, Enum):
    """Color class of a signed value."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


# --- Snapshot Models ---


class _ApiModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class CurrentPrice(_ApiModel):
    """Latest traded price per exchange."""

    nse: Scalar = Field(default=None, alias="NSE")
    bse: Scalar = Field(default=None, alias="BSE")


class TechnicalSample(_ApiModel):
    """One point of the price-trend series."""

    days: Scalar = None
    nse_price: Scalar = Field(default=None, alias="nsePrice")
    bse_price: Scalar = Field(default=None, alias="bsePrice")


class LedgerEntry(_ApiModel):
    """A single `{key, value}` line of a financial statement."""

    key: Scalar = None
    value: Scalar = None
    display_name: Scalar = Field(default=None, alias="displayName")


class StockFinancialMap(_ApiModel):
    """Statement ledgers of one reporting period."""

    income: Annotated[list[LedgerEntry], BeforeValidator(_records)] = Field(
        default_factory=list, alias="INC"
    )
    balance: Annotated[list[LedgerEntry], BeforeValidator(_records)] = Field(
        default_factory=list, alias="BAL"
    )
    cash_flow: Annotated[list[LedgerEntry], BeforeValidator(_records)] = Field(
        default_factory=list, alias="CAS"
    )


class FinancialPeriod(_ApiModel):
    """One entry of the `financials` array."""

    stock_financial_map: Annotated[StockFinancialMap | None, BeforeValidator(_record_or_none)] = (
        Field(default=None, alias="stockFinancialMap")
    )
    fiscal_year: Scalar = Field(default=None, alias="FiscalYear")
    end_date: Scalar = Field(default=None, alias="EndDate")
    period_type: Scalar = Field(default=None, alias="type")


class PeerCompany(_ApiModel):
    """Comparable company listed alongside the queried ticker."""

    company_name: Scalar = Field(default=None, alias="companyName")
    price: Scalar = None
    net_change: Scalar = Field(default=None, alias="netChange")
    percent_change: Scalar = Field(default=None, alias="percentChange")
    overall_rating: Scalar = Field(default=None, alias="overallRating")
    image_url: Scalar = Field(default=None, alias="imageUrl")


class CompanyProfile(_ApiModel):
    """Descriptive company block of the snapshot."""

    company_description: Scalar = Field(default=None, alias="companyDescription")
    peer_company_list: Annotated[list[PeerCompany], BeforeValidator(_records)] = Field(
        default_factory=list, alias="peerCompanyList"
    )


class StockSnapshot(_ApiModel):
    """
    Raw, possibly partial API response for one ticker.

    Design Choice:
    - Field names are snake_case; the camelCase API keys are aliases.
    - Nothing is coerced to numbers here; the presentation layer decides
      how each value is shown.
    """

    company_name: Scalar = Field(default=None, alias="companyName")
    industry: Scalar = None
    year_high: Scalar = Field(default=None, alias="yearHigh")
    year_low: Scalar = Field(default=None, alias="yearLow")
    current_price: Annotated[CurrentPrice | None, BeforeValidator(_record_or_none)] = Field(
        default=None, alias="currentPrice"
    )
    percent_change: Scalar = Field(default=None, alias="percentChange")
    stock_technical_data: Annotated[
        list[TechnicalSample], BeforeValidator(_positional_records)
    ] = Field(default_factory=list, alias="stockTechnicalData")
    financials: Annotated[
        list[FinancialPeriod], BeforeValidator(_positional_records)
    ] = Field(default_factory=list)
    company_profile: Annotated[CompanyProfile | None, BeforeValidator(_record_or_none)] = Field(
        default=None, alias="companyProfile"
    )

    @property
    def financial_map(self) -> StockFinancialMap | None:
        """Ledgers of the most recent reporting period, if any."""
        if not self.financials:
            return None
        return self.financials[0].stock_financial_map

    @property
    def peers(self) -> list[PeerCompany]:
        """Peer list in provider order (empty when absent)."""
        if self.company_profile is None:
            return []
        return list(self.company_profile.peer_company_list)
