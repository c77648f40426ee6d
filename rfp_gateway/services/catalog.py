from __future__ import annotations

import json

from rfp_gateway.schemas.catalog import CatalogEntry

# FMEG product catalog sent to the model on every match request.
FMEG_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(sku="REF-5STAR-450", name="5-Star Frost-Free Refrigerator 450L", category="Refrigerators",
                 specs={"energyRating": "5-star", "capacity": "450L", "type": "Frost-free", "warranty": "10 years"}),
    CatalogEntry(sku="REF-4STAR-350", name="4-Star Double Door Refrigerator 350L", category="Refrigerators",
                 specs={"energyRating": "4-star", "capacity": "350L", "type": "Direct cool", "warranty": "5 years"}),
    CatalogEntry(sku="REF-3STAR-250", name="3-Star Single Door Refrigerator 250L", category="Refrigerators",
                 specs={"energyRating": "3-star", "capacity": "250L", "type": "Direct cool", "warranty": "3 years"}),
    CatalogEntry(sku="WM-5STAR-8KG", name="5-Star Front Load Washing Machine 8kg", category="Washing Machines",
                 specs={"energyRating": "5-star", "capacity": "8kg", "type": "Front load", "warranty": "5 years"}),
    CatalogEntry(sku="WM-4STAR-7KG", name="4-Star Top Load Washing Machine 7kg", category="Washing Machines",
                 specs={"energyRating": "4-star", "capacity": "7kg", "type": "Top load", "warranty": "3 years"}),
    CatalogEntry(sku="WM-SEMI-6KG", name="Semi-Automatic Washing Machine 6kg", category="Washing Machines",
                 specs={"energyRating": "3-star", "capacity": "6kg", "type": "Semi-automatic", "warranty": "2 years"}),
    CatalogEntry(sku="AC-5STAR-1.5T", name="5-Star Inverter Split AC 1.5 Ton", category="Air Conditioners",
                 specs={"energyRating": "5-star", "capacity": "1.5 Ton", "type": "Inverter split", "warranty": "5 years"}),
    CatalogEntry(sku="AC-3STAR-1T", name="3-Star Split AC 1 Ton", category="Air Conditioners",
                 specs={"energyRating": "3-star", "capacity": "1 Ton", "type": "Split", "warranty": "3 years"}),
    CatalogEntry(sku="AC-WIN-1.5T", name="Window AC 1.5 Ton", category="Air Conditioners",
                 specs={"energyRating": "3-star", "capacity": "1.5 Ton", "type": "Window", "warranty": "2 years"}),
    CatalogEntry(sku="TV-4K-55", name="4K Smart LED TV 55 inch", category="Televisions",
                 specs={"resolution": "4K UHD", "size": "55 inch", "type": "Smart LED", "warranty": "2 years"}),
    CatalogEntry(sku="TV-FHD-43", name="Full HD Smart TV 43 inch", category="Televisions",
                 specs={"resolution": "Full HD", "size": "43 inch", "type": "Smart LED", "warranty": "2 years"}),
    CatalogEntry(sku="MW-CONV-30", name="Convection Microwave Oven 30L", category="Microwaves",
                 specs={"capacity": "30L", "type": "Convection", "power": "900W", "warranty": "2 years"}),
    CatalogEntry(sku="MW-SOLO-20", name="Solo Microwave Oven 20L", category="Microwaves",
                 specs={"capacity": "20L", "type": "Solo", "power": "700W", "warranty": "1 year"}),
    CatalogEntry(sku="WH-INST-15", name="Instant Water Heater 15L", category="Water Heaters",
                 specs={"capacity": "15L", "type": "Instant", "power": "3000W", "warranty": "5 years"}),
    CatalogEntry(sku="WH-STOR-25", name="Storage Water Heater 25L", category="Water Heaters",
                 specs={"capacity": "25L", "type": "Storage", "power": "2000W", "warranty": "7 years"}),
)


def catalog_skus(catalog: tuple[CatalogEntry, ...]) -> frozenset[str]:
    return frozenset(entry.sku for entry in catalog)


def catalog_to_json(catalog: tuple[CatalogEntry, ...]) -> str:
    """Pretty-printed JSON block used as prompt context."""
    return json.dumps([entry.model_dump() for entry in catalog], indent=2)
