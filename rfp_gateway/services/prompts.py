"""System and user prompts for the three RFP operations."""

from __future__ import annotations

import json
from typing import Any

SUMMARIZE_SYSTEM_PROMPT = """You are an expert RFP analyst specializing in FMEG (Fast-Moving Electrical Goods) products.
Analyze RFP documents and extract key information in a structured format.
Focus on: scope, specifications, quantities, deadlines, compliance requirements, and technical specifications.
Be concise but thorough."""

SUMMARIZE_USER_TEMPLATE = """Analyze this RFP and provide a comprehensive summary:

Title: {title}

Content:
{content}

Please provide:
1. Executive Summary (2-3 sentences)
2. Key Requirements (bullet points)
3. Product Specifications (energy ratings, certifications, technical specs)
4. Quantities Required
5. Submission Deadline
6. Compliance Requirements
7. Evaluation Criteria (if mentioned)
8. Recommended Products from our FMEG catalog"""

MATCH_SYSTEM_TEMPLATE = """You are an expert product matcher for FMEG (Fast-Moving Electrical Goods).
Match RFP requirements to products from the catalog.
Consider energy ratings, specifications, capacity, and compliance requirements.
Matching sensitivity: {sensitivity} (0 = loose matching, 1 = strict matching).
Only use SKUs that appear in the catalog.
Return ONLY valid JSON array, no markdown."""

MATCH_USER_TEMPLATE = """Match these RFP requirements to our product catalog:

Requirements:
{requirements}

Product Catalog:
{catalog}

Return a JSON array with this exact structure for each match:
[
  {{
    "sku": "product SKU",
    "name": "product name",
    "matchScore": 0-100,
    "matchReason": "why this product matches",
    "gapAnalysis": "any gaps or concerns",
    "recommended": true/false
  }}
]

Sort by matchScore descending. Include all potentially matching products."""

PROPOSAL_SYSTEM_PROMPT = """You are an expert proposal writer for FMEG (Fast-Moving Electrical Goods) companies.
Generate professional, compelling RFP response proposals.
Use formal business language, highlight value propositions, and address all requirements.
Include sections: Executive Summary, Technical Compliance, Product Details, Pricing Summary, Warranty & Support, Implementation Timeline."""

PROPOSAL_USER_TEMPLATE = """Generate a comprehensive RFP response proposal with the following details:

Company: {company_name}

RFP Summary:
{summary}

Matched Products:
{matched_products}

Pricing Details:
{pricing}

Generate a complete, professional proposal response that:
1. Addresses all RFP requirements
2. Highlights product strengths and compliance
3. Provides clear pricing breakdown
4. Includes warranty and support commitments
5. Proposes implementation timeline
6. Adds value-added services

Format the response in clean, professional markdown."""


def summarize_prompt(title: str, content: str) -> tuple[str, str]:
    return SUMMARIZE_SYSTEM_PROMPT, SUMMARIZE_USER_TEMPLATE.format(title=title, content=content)


def match_prompt(requirements: str, sensitivity: float, catalog_json: str) -> tuple[str, str]:
    system = MATCH_SYSTEM_TEMPLATE.format(sensitivity=sensitivity)
    user = MATCH_USER_TEMPLATE.format(requirements=requirements, catalog=catalog_json)
    return system, user


def proposal_prompt(
    company_name: str,
    summary: str,
    matched_products: list[dict[str, Any]],
    pricing: list[dict[str, Any]],
) -> tuple[str, str]:
    user = PROPOSAL_USER_TEMPLATE.format(
        company_name=company_name,
        summary=summary,
        matched_products=json.dumps(matched_products, indent=2),
        pricing=json.dumps(pricing, indent=2),
    )
    return PROPOSAL_SYSTEM_PROMPT, user
