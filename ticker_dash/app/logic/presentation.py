"""Presentation logic for the stock snapshot page.

Derives every displayed value from a StockSnapshot without mutating it.
All accessors are total: absent fields become placeholders, never errors.
"""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

import polars as pl

from ticker_dash.core.domain_models import (
    ChangeStyle,
    FinancialMetric,
    LedgerEntry,
    PeerCompany,
    Scalar,
    StockSnapshot,
)

PLACEHOLDER = "-"

PEER_CSV_COLUMNS = ["Company", "Price", "Change", "Percent Change", "Rating"]
PEER_CSV_MIME = "text/csv"


@dataclass(frozen=True)
class DisplayCard:
    label: str
    value: str
    style: ChangeStyle | None = None
    emphasis: bool = False


@dataclass(frozen=True)
class PriceSeries:
    """Parallel label/price sequences for the trend chart."""

    labels: list[str]
    prices: list[float]

    @property
    def is_empty(self) -> bool:
        return not self.labels


@dataclass(frozen=True)
class PeerRow:
    company: str
    image_url: str
    price: str
    change: str
    change_style: ChangeStyle
    rating: str


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str
    mime: str = PEER_CSV_MIME


def as_text(value: Scalar) -> str:
    """Render a raw API scalar the way it reads in the payload."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
    return str(value)


def format_price(value: Scalar, currency_symbol: str) -> str:
    # No numeric formatting: the value is shown as delivered
    return f"{currency_symbol}{as_text(value)}"


# --- Financials ---


def _find_value(entries: Iterable[LedgerEntry], key: str) -> str | None:
    for entry in entries:
        if as_text(entry.key) == key:
            text = as_text(entry.value)
            return text or None
    return None


def lookup_financial(snapshot: StockSnapshot | None, key: str | FinancialMetric) -> str:
    """Look up a statement value, income ledger first, then balance sheet.

    Returns the placeholder "-" if neither ledger has a value for the key.
    """
    key = key.value if isinstance(key, FinancialMetric) else key
    fin_map = snapshot.financial_map if snapshot is not None else None
    if fin_map is None:
        return PLACEHOLDER

    value = _find_value(fin_map.income, key)
    if value is None:
        value = _find_value(fin_map.balance, key)
    return value if value is not None else PLACEHOLDER


def metric_label(key: str | FinancialMetric) -> str:
    """Split a CamelCase statement key into words ("TotalRevenue" -> "Total Revenue")."""
    key = key.value if isinstance(key, FinancialMetric) else key
    return re.sub(r"([A-Z])", r" \1", key).strip()


def financial_cards(snapshot: StockSnapshot | None, currency_symbol: str) -> list[DisplayCard]:
    cards = []
    for metric in FinancialMetric:
        value = lookup_financial(snapshot, metric)
        if value != PLACEHOLDER:
            value = format_price(value, currency_symbol)
        cards.append(DisplayCard(label=metric_label(metric), value=value))
    return cards


# --- Change classification ---


def classify_change(value: Scalar) -> ChangeStyle:
    """Classify a signed numeric string as positive, negative or neutral.

    Shared by the daily change card and every peer row.
    """
    text = as_text(value)
    if not text or text == "NaN":
        return ChangeStyle.NEUTRAL
    if text.startswith("-"):
        return ChangeStyle.NEGATIVE
    return ChangeStyle.POSITIVE


# --- Overview ---


def overview_cards(snapshot: StockSnapshot, currency_symbol: str) -> list[DisplayCard]:
    """Identity and price cards shown at the top of the page."""
    prices = snapshot.current_price
    nse = prices.nse if prices is not None else None
    bse = prices.bse if prices is not None else None
    year_range = (
        f"{format_price(snapshot.year_high, currency_symbol)}"
        f" / {format_price(snapshot.year_low, currency_symbol)}"
    )
    return [
        DisplayCard(label="Company", value=as_text(snapshot.company_name)),
        DisplayCard(label="Industry", value=as_text(snapshot.industry)),
        DisplayCard(label="52W High / Low", value=year_range),
        DisplayCard(label="NSE Price", value=format_price(nse, currency_symbol), emphasis=True),
        DisplayCard(label="BSE Price", value=format_price(bse, currency_symbol), emphasis=True),
        DisplayCard(
            label="Change",
            value=f"{as_text(snapshot.percent_change)}%",
            style=classify_change(snapshot.percent_change),
        ),
    ]


# --- Price trend ---


def _to_float(value: Scalar) -> float:
    if value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def price_series(snapshot: StockSnapshot) -> PriceSeries:
    """NSE price per technical sample, in provider order.

    Missing or non-numeric prices become NaN so the chart shows a gap.
    """
    samples = snapshot.stock_technical_data
    return PriceSeries(
        labels=[f"{as_text(sample.days)}D" for sample in samples],
        prices=[_to_float(sample.nse_price) for sample in samples],
    )


# --- Peers ---


def peer_rows(snapshot: StockSnapshot, currency_symbol: str) -> list[PeerRow]:
    return [
        PeerRow(
            company=as_text(peer.company_name),
            image_url=as_text(peer.image_url),
            price=format_price(peer.price, currency_symbol),
            change=f"{as_text(peer.net_change)} ({as_text(peer.percent_change)}%)",
            change_style=classify_change(peer.percent_change),
            rating=as_text(peer.overall_rating),
        )
        for peer in snapshot.peers
    ]


def _csv_cell(value: Scalar) -> str | None:
    text = as_text(value)
    # Blank and absent fields both become an empty (unquoted) cell
    return text or None


def peers_to_csv(peers: list[PeerCompany] | None) -> str | None:
    """Serialize peers as CSV, or None when there is nothing to export.

    Fields are written verbatim; cells containing commas, quotes or
    line breaks are quoted.
    """
    if not peers:
        return None

    columns: dict[str, list[str | None]] = {
        "Company": [_csv_cell(p.company_name) for p in peers],
        "Price": [_csv_cell(p.price) for p in peers],
        "Change": [_csv_cell(p.net_change) for p in peers],
        "Percent Change": [_csv_cell(p.percent_change) for p in peers],
        "Rating": [_csv_cell(p.overall_rating) for p in peers],
    }
    df = pl.DataFrame(columns, schema={name: pl.Utf8 for name in PEER_CSV_COLUMNS})
    return df.write_csv(quote_style="necessary")


def export_filename(query: str) -> str:
    return f"peer-comparison-{query}.csv"


def build_peer_export(snapshot: StockSnapshot | None, query: str) -> CsvExport | None:
    if snapshot is None:
        return None
    content = peers_to_csv(snapshot.peers)
    if content is None:
        return None
    return CsvExport(filename=export_filename(query), content=content)
