# =============================================================================
# core/digest.py  |  HTML page of comic issues
# =============================================================================
#
# generate_comics_html() fetches a page of issues and renders them as one
# self-contained HTML document (inline CSS, no scripts) that a client can
# save or display directly.
#
# The page itself is a jinja2 template in core/templates/comics.html with
# autoescaping on; this module only prepares one "card" per issue:
#   image        super_url → screen_large_url → medium_url
#   title        name → volume.name → "Unknown Title"
#   cover date   "2016-06-30" → "Jun 30, 2016"  (dropped if unparseable)
#   description  deck → description, HTML tags stripped, 150 chars max
# =============================================================================

import re
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.arguments import ComicsHtmlArguments
from core.envelope import wrap
from core.gateway import ComicVineGateway
from core.models import ComicsDigest, Issue
from core.resources import ResourceKind, collection_path

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
_TAG = re.compile(r"</?[^>]+(>|$)")
_DESCRIPTION_LIMIT = 150
DEFAULT_TITLE = "DC Comics Issues"
PLACEHOLDER_IMAGE = "https://comicvine.gamespot.com/a/uploads/original/0/40/1017179-noimage.png"

# The page needs a few fields the default ISSUE list does not carry.
DIGEST_FIELD_LIST = "id,name,issue_number,cover_date,deck,description,image,volume"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def _format_cover_date(value: Any) -> str:
    if not isinstance(value, str) or not value:
        return ""
    try:
        parsed = datetime.strptime(value[:10], "%Y-%m-%d")
    except ValueError:
        return ""
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _short_description(issue: dict[str, Any]) -> str:
    text = issue.get("deck") or issue.get("description") or ""
    text = _TAG.sub("", text).strip()
    if len(text) > _DESCRIPTION_LIMIT:
        return text[:_DESCRIPTION_LIMIT] + "..."
    return text


def _card(issue: dict[str, Any]) -> dict[str, str]:
    image = issue.get("image") or {}
    volume = issue.get("volume") or {}
    return {
        "image_url": image.get("super_url") or image.get("screen_large_url") or image.get("medium_url") or "",
        "title": issue.get("name") or volume.get("name") or "Unknown Title",
        "issue_number": issue.get("issue_number") or "N/A",
        "cover_date": _format_cover_date(issue.get("cover_date")),
        "description": _short_description(issue),
    }


def render_comics_html(issues: list[dict[str, Any]], title: str = DEFAULT_TITLE) -> str:
    """Render ``issues`` (normalized issue dicts) into a full HTML page."""
    template = _get_env().get_template("comics.html")
    return template.render(
        title=title,
        cards=[_card(issue) for issue in issues],
        placeholder_image=PLACEHOLDER_IMAGE,
        year=datetime.now().year,
    )


def _issue_filter(args: ComicsHtmlArguments) -> str | None:
    filters = []
    if args.name:
        filters.append(f"name:{args.name}")
    if args.issue_number:
        filters.append(f"issue_number:{args.issue_number}")
    return ",".join(filters) or None


def generate_comics_html(client: ComicVineGateway, args: ComicsHtmlArguments) -> dict[str, Any]:
    """Fetch issues and render them; returns {html, count, total, message}."""
    params = {
        "field_list": DIGEST_FIELD_LIST,
        "filter": _issue_filter(args),
        "sort": args.sort,
        "limit": args.limit,
        "offset": args.offset,
    }
    envelope = wrap(Issue, client.get(collection_path(ResourceKind.ISSUE), params))
    issues = envelope["results"]

    digest = ComicsDigest(
        html=render_comics_html(issues, args.title or DEFAULT_TITLE),
        count=len(issues),
        total=envelope["number_of_total_results"],
        message=f"Generated HTML page with {len(issues)} of "
                f"{envelope['number_of_total_results']} issues",
    )
    return digest.model_dump()
