# facr_scraper/utils/misc_utils.py
import re

UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
SCORE_PATTERN = re.compile(r"([0-9]+)\s*:\s*([0-9]+)")


def extract_uuid(href: str) -> str:
    """Returns the first UUID found in a link or text fragment, or ""."""
    href = (href or "").strip()
    if not href:
        return ""
    match = UUID_PATTERN.search(href)
    if match:
        return match.group(0)
    # Some links end with the id after a slash
    candidate = href.split("/")[-1]
    if UUID_PATTERN.fullmatch(candidate):
        return candidate
    return ""


def normalize_score(text: str) -> str:
    """Rewrites "5 : 0" style scores as "5:0"; anything else becomes ""."""
    match = SCORE_PATTERN.search(text or "")
    if not match:
        return ""
    return f"{match.group(1)}:{match.group(2)}"


def strip_team_variant(name: str) -> str:
    """Cuts a "(B)"-style reserve/variant marker off a team name."""
    name = (name or "").strip()
    idx = name.find("(")
    if idx >= 0:
        name = name[:idx].strip()
    return name


def last_path_segment(href: str) -> str:
    parts = (href or "").strip().rstrip("/").split("/")
    return parts[-1] if parts else ""
