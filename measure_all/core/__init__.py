"""Core measurement kernel: vector math, angles, projections, arcs, classification."""

from .geometry import (
    subtract,
    add,
    scale,
    dot_product,
    cross_product,
    magnitude,
    distance_between_points,
    midpoint,
    angle_between_vectors,
    fold_to_acute,
)
from .results import (
    Ok,
    Err,
    Result,
    MeasurementError,
    DegenerateLineError,
    CoincidentPointsError,
    RadiusTooSmallError,
    NegligibleAngleError,
    FullCircleError,
    IntersectionUnavailable,
)
from .angles import line_direction, compute_angle, compute_length
from .perpendicular import project_point_on_line, compute_perpendicular
from .intersection import (
    find_intersection,
    farthest_endpoint,
    closest_endpoint_anchors,
    resolve_arc_anchors,
)
from .arc_geometry import (
    sample_local_arc,
    build_arc,
    polyline_length,
    point_at_distance,
    arc_midpoint,
    attachment_point,
)
from .classification import (
    classify,
    severity,
    evaluate_measurement,
    lookup_nominal,
    tolerance_band,
    thresholds_from_band,
    StatusSummary,
    summarize,
)
from .pair_selection import (
    NamedLike,
    collect_names,
    collect_line_names,
    custom_pair_grid,
    enumerate_pairs,
    enumerate_cross_pairs,
)
from .batch import (
    PairOutcome,
    BatchReport,
    index_by_name,
    run_length_measurements,
    run_angle_measurements,
    run_perpendicular_measurements,
)
from .formatting import format_value, format_measurement, format_summary
from .tolerances import (
    ZERO_MAGNITUDE,
    MIN_SEGMENT_LENGTH,
    MIN_ANCHOR_DISTANCE,
    MIN_ARC_RADIUS,
    ARC_RADIUS_FRACTION,
    MIN_ARC_ANGLE_DEG,
    MAX_ARC_ANGLE_DEG,
    ARC_STEP_DEG,
)

__all__ = [
    # Vector math
    'subtract',
    'add',
    'scale',
    'dot_product',
    'cross_product',
    'magnitude',
    'distance_between_points',
    'midpoint',
    'angle_between_vectors',
    'fold_to_acute',
    # Results and errors
    'Ok',
    'Err',
    'Result',
    'MeasurementError',
    'DegenerateLineError',
    'CoincidentPointsError',
    'RadiusTooSmallError',
    'NegligibleAngleError',
    'FullCircleError',
    'IntersectionUnavailable',
    # Angles and lengths
    'line_direction',
    'compute_angle',
    'compute_length',
    # Perpendicular projection
    'project_point_on_line',
    'compute_perpendicular',
    # Intersection
    'find_intersection',
    'farthest_endpoint',
    'closest_endpoint_anchors',
    'resolve_arc_anchors',
    # Arcs
    'sample_local_arc',
    'build_arc',
    'polyline_length',
    'point_at_distance',
    'arc_midpoint',
    'attachment_point',
    # Classification
    'classify',
    'severity',
    'evaluate_measurement',
    'lookup_nominal',
    'tolerance_band',
    'thresholds_from_band',
    'StatusSummary',
    'summarize',
    # Pair selection
    'NamedLike',
    'collect_names',
    'collect_line_names',
    'custom_pair_grid',
    'enumerate_pairs',
    'enumerate_cross_pairs',
    # Batches
    'PairOutcome',
    'BatchReport',
    'index_by_name',
    'run_length_measurements',
    'run_angle_measurements',
    'run_perpendicular_measurements',
    # Formatting
    'format_value',
    'format_measurement',
    'format_summary',
    # Tolerances
    'ZERO_MAGNITUDE',
    'MIN_SEGMENT_LENGTH',
    'MIN_ANCHOR_DISTANCE',
    'MIN_ARC_RADIUS',
    'ARC_RADIUS_FRACTION',
    'MIN_ARC_ANGLE_DEG',
    'MAX_ARC_ANGLE_DEG',
    'ARC_STEP_DEG',
]
