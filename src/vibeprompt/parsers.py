"""Parsers turning raw model text into wizard data."""

import json
import re

from vibeprompt.catalogs import fallback_catalog
from vibeprompt.core.logging import get_logger
from vibeprompt.schemas.catalog import TechOptionCatalog

logger = get_logger("vibeprompt.parsers")

MAX_FEATURE_SUGGESTIONS = 10

_NUMBERING = re.compile(r"^\d+[.)](?:\s+|$)")
_BULLET = re.compile(r"^[-*•]\s*")
_FENCED = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def _clean_feature_line(line: str) -> str:
    line = line.strip()
    line = _NUMBERING.sub("", line, count=1)
    line = _BULLET.sub("", line, count=1)
    return line.strip()


def parse_feature_list(text: str, limit: int = MAX_FEATURE_SUGGESTIONS) -> list[str]:
    """
    Split a suggestion reply into feature strings.

    Leading "1. " / "1) " numbering and "-", "*" or bullet markers are
    stripped; blank lines are dropped. Clean input comes back unchanged.

    Args:
        text: Raw model reply, one feature per line
        limit: Maximum number of features kept

    Returns:
        At most ``limit`` non-empty feature strings, in reply order
    """
    features = []
    for line in (text or "").splitlines():
        feature = _clean_feature_line(line)
        if feature:
            features.append(feature)
    return features[:limit]


def _unfence(text: str) -> str:
    stripped = text.strip()
    match = _FENCED.match(stripped)
    return match.group(1) if match else stripped


def parse_tech_catalog(text: str, project_type: str) -> TechOptionCatalog:
    """
    Parse a technology catalog reply, falling back to the static catalog.

    The reply must be a JSON object (optionally wrapped in a markdown code
    fence) with all four categories. Anything else is logged and replaced by
    the static catalog for ``project_type``. Never raises.

    Args:
        text: Raw model reply
        project_type: Project type used to pick the fallback catalog

    Returns:
        Parsed or fallback TechOptionCatalog
    """
    try:
        data = json.loads(_unfence(text or ""))
        return TechOptionCatalog.model_validate(data)
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning(
            f"Falling back to static {project_type or 'web-app'} catalog: {e}",
            context={"event_type": "catalog_fallback", "project_type": project_type},
        )
        return fallback_catalog(project_type)
