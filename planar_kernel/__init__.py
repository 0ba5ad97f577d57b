from .errors import GeometryError, TooFewPoints, UnclosedRing
from .config import ValidationConfig, get_validation_config, set_validation_config
from .primitives import (
    Coordinate,
    Position,
    lexicographic_key,
    Segment,
    SegmentIntersection,
    Triangle,
    Rect,
    Envelope,
)
from .types import (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    Geometry,
    GeometryKind,
    envelope,
    kind_of,
)
from .algorithms import ring_relation, RingRelation
from .validation import ValidityReport, validate, is_valid, is_simple
from .relation import (
    Location,
    locate_position,
    intersects,
    contains,
    disjoint,
    within,
    contains_positions,
)

__all__ = [
    'GeometryError',
    'TooFewPoints',
    'UnclosedRing',
    'ValidationConfig',
    'get_validation_config',
    'set_validation_config',
    'Coordinate',
    'Position',
    'lexicographic_key',
    'Segment',
    'SegmentIntersection',
    'Triangle',
    'Rect',
    'Envelope',
    'Point',
    'LineString',
    'Polygon',
    'MultiPoint',
    'MultiLineString',
    'MultiPolygon',
    'Geometry',
    'GeometryKind',
    'envelope',
    'kind_of',
    'ring_relation',
    'RingRelation',
    'ValidityReport',
    'validate',
    'is_valid',
    'is_simple',
    'Location',
    'locate_position',
    'intersects',
    'contains',
    'disjoint',
    'within',
    'contains_positions',
]
