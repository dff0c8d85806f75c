"""Fixed report payloads returned by the protected routes.

None of these inspect the site or call a model: each builder fills a
static template with the request fields. Lists are rebuilt on every call
so no response shares mutable state with another.
"""

from __future__ import annotations

from typing import Any, Dict

from magician_api.utils.payloads import is_present


DEFAULT_TONE = "neutral"

ANALYSIS_SCORES = {"seo": 83, "performance": 78, "accessibility": 90}
ANALYSIS_ISSUES = ("Missing alt text", "No meta description", "Unoptimized images")

HEADLINE = "Transform Your Website Into a Conversion Machine"
CTA = "Book Your Free Audit"

SUGGESTED_LAYOUT = (
    "Hero banner with CTA",
    "Feature highlights section",
    "Testimonials carousel",
    "Contact form in footer",
)

SUMMARY_TEXT = (
    "Your homepage loads in 3.2s (a bit slow). "
    "SEO score 72 — missing meta descriptions and alt tags."
)
RECOMMENDED_ACTIONS = (
    "Compress images",
    "Add alt text to all images",
    "Write a proper meta description",
)


def build_analysis(url: Any) -> Dict[str, Any]:
    report = dict(ANALYSIS_SCORES)
    report["issues"] = list(ANALYSIS_ISSUES)
    return {
        "url": url,
        "summary": f"Analysis complete for {url}",
        "report": report,
    }


def build_copy(audience: Any, goal: Any, tone: Any = None) -> Dict[str, Any]:
    return {
        "headline": HEADLINE,
        "subheadline": f"Built for {audience}, designed to {goal}.",
        "tone": tone if is_present(tone) else DEFAULT_TONE,
        "cta": CTA,
    }


def build_layout(site_type: Any, goal: Any) -> Dict[str, Any]:
    return {
        "site_type": site_type,
        "goal": goal,
        "suggested_layout": list(SUGGESTED_LAYOUT),
    }


def build_summary(data: Any) -> Dict[str, Any]:
    # data is required by the route but the summary is canned
    return {
        "summary": SUMMARY_TEXT,
        "recommended_actions": list(RECOMMENDED_ACTIONS),
    }
