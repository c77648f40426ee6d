from __future__ import annotations

from typing import Optional

from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.schemas.requests import ComplianceTest, QuoteItem
from rfp_gateway.schemas.responses import LineItem, PricedItem, PricedTest, QuoteResponse

FALLBACK_UNIT_PRICE = 500.0

DEFAULT_UNIT_PRICES: dict[str, float] = {
    "REF-5STAR-450": 850.0,
    "REF-4STAR-350": 650.0,
    "REF-3STAR-250": 450.0,
    "WM-5STAR-8KG": 520.0,
    "WM-4STAR-7KG": 380.0,
    "WM-SEMI-6KG": 220.0,
    "AC-5STAR-1.5T": 680.0,
    "AC-3STAR-1T": 450.0,
    "AC-WIN-1.5T": 350.0,
    "TV-4K-55": 750.0,
    "TV-FHD-43": 450.0,
    "MW-CONV-30": 280.0,
    "MW-SOLO-20": 150.0,
    "WH-INST-15": 180.0,
    "WH-STOR-25": 220.0,
}

DEFAULT_TESTS: tuple[tuple[str, float], ...] = (
    ("BEE Energy Rating Certification", 1500.0),
    ("ISI Mark Compliance", 1200.0),
    ("Safety & Performance Testing", 2800.0),
)


def default_unit_price(sku: str) -> float:
    return DEFAULT_UNIT_PRICES.get(sku.strip(), FALLBACK_UNIT_PRICE)


def price_products(
    items: list[QuoteItem], catalog: tuple[CatalogEntry, ...]
) -> tuple[list[PricedItem], float]:
    names = {entry.sku: entry.name for entry in catalog}
    priced = []
    subtotal = 0.0

    for item in items:
        sku = item.sku.strip()
        unit_price = item.unit_price if item.unit_price is not None else default_unit_price(sku)
        total = round(item.quantity * unit_price, 2)
        priced.append(
            PricedItem(
                sku=sku,
                product=item.name or names.get(sku, sku),
                quantity=item.quantity,
                unit_price=unit_price,
                total=total,
            )
        )
        subtotal += total

    return priced, round(subtotal, 2)


def build_quote(
    items: list[QuoteItem],
    catalog: tuple[CatalogEntry, ...],
    tests: Optional[list[ComplianceTest]] = None,
) -> QuoteResponse:
    """Price products and compliance tests; line items feed the proposal prompt."""
    priced, product_subtotal = price_products(items, catalog)

    if tests is None:
        test_rows = [PricedTest(test=name, cost=cost) for name, cost in DEFAULT_TESTS]
    else:
        test_rows = [PricedTest(test=t.test, cost=t.cost) for t in tests]
    test_subtotal = round(sum(t.cost for t in test_rows), 2)

    line_items = [LineItem(label=p.product, cost=p.total) for p in priced]
    line_items += [LineItem(label=t.test, cost=t.cost) for t in test_rows]

    return QuoteResponse(
        items=priced,
        tests=test_rows,
        product_subtotal=product_subtotal,
        test_subtotal=test_subtotal,
        grand_total=round(product_subtotal + test_subtotal, 2),
        line_items=line_items,
    )
