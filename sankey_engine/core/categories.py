"""
Category extraction: maps a club node to the label it is grouped under at a
given aggregation level.
"""
from ..models import AggregationLevel, NetworkNode

_NODE_ATTRIBUTES = {
    AggregationLevel.LEAGUE: "league",
    AggregationLevel.COUNTRY: "country",
    AggregationLevel.CONTINENT: "continent",
}

UNKNOWN_LABELS = {
    AggregationLevel.LEAGUE: "Unknown League",
    AggregationLevel.COUNTRY: "Unknown Country",
    AggregationLevel.CONTINENT: "Unknown Continent",
}


def extract_category(node: NetworkNode, level: AggregationLevel) -> str:
    """
    Club level groups by node name. League/country/continent read the node's
    attribute and fall back to "Unknown <Level>" when it is missing or blank.
    Unrecognised levels group by node name as well.
    """
    try:
        level = AggregationLevel(level)
    except ValueError:
        return node.name
    if level is AggregationLevel.CLUB:
        return node.name

    value = getattr(node, _NODE_ATTRIBUTES[level])
    if value is None or not value.strip():
        return UNKNOWN_LABELS[level]
    return value
